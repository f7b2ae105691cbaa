from jwtsmith.models.claims import TIME_CLAIMS, ClaimSet, RegisteredClaim, StandardClaims, read_time_claim
from jwtsmith.models.header import JwtHeader
from jwtsmith.models.validation import ValidationParameters

__all__ = [
    "TIME_CLAIMS",
    "ClaimSet",
    "RegisteredClaim",
    "StandardClaims",
    "read_time_claim",
    "JwtHeader",
    "ValidationParameters",
]
