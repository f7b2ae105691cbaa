from jwtsmith.services.builder import JwtBuilder
from jwtsmith.services.decoder import DecodedToken, JwtDecoder, TokenSegments
from jwtsmith.services.encoder import JwtEncoder
from jwtsmith.services.token_service import TokenPrincipal, TokenService
from jwtsmith.services.validator import JwtValidator

__all__ = [
    "JwtBuilder",
    "DecodedToken",
    "JwtDecoder",
    "TokenSegments",
    "JwtEncoder",
    "TokenPrincipal",
    "TokenService",
    "JwtValidator",
]
