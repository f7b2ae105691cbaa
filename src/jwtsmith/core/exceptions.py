from __future__ import annotations

from typing import Any


class JwtError(ValueError):
    """Base class for every token lifecycle failure."""


class DecodeError(JwtError):
    """Raised when base64url input cannot be decoded."""


class MalformedTokenError(JwtError):
    """Raised when a token is not three well-formed base64url JSON segments."""


class ClaimFormatError(MalformedTokenError):
    """Raised when a registered time claim does not hold a numeric value."""

    def __init__(self, claim: str, value: Any) -> None:
        self.claim = claim
        self.value = value
        super().__init__(f"Claim '{claim}' must be a number of seconds since the epoch.")


class SignatureVerificationError(JwtError):
    """Raised when a requested signature check does not pass."""


class InvalidKeyError(JwtError):
    """Raised when key material does not fit the algorithm family."""


class InvalidAlgorithmError(JwtError):
    """Raised when an algorithm is unknown, missing, or inconsistent with the header."""


class TokenValidationError(JwtError):
    def __init__(self, message: str, *, claim: str, value: int, now: int, margin: int) -> None:
        self.claim = claim
        self.value = value
        self.now = now
        self.margin = margin
        super().__init__(message)


class TokenExpiredError(TokenValidationError):
    """Raised when the current time is past ``exp`` plus the margin."""


class TokenNotYetValidError(TokenValidationError):
    """Raised when ``nbf`` or ``iat`` lies in the future beyond the margin."""
