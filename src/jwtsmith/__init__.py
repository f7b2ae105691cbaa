"""Issue and verify JSON Web Tokens."""

from jwtsmith.core import (
    SUPPORTED_ALGORITHMS,
    Algorithm,
    Base64UrlEncoder,
    ClaimFormatError,
    DecodeError,
    EcdsaAlgorithm,
    HmacAlgorithm,
    InvalidAlgorithmError,
    InvalidKeyError,
    JsonSerializer,
    JwtError,
    MalformedTokenError,
    NoneAlgorithm,
    RsaAlgorithm,
    RsaPssAlgorithm,
    Settings,
    SignatureVerificationError,
    TokenExpiredError,
    TokenNotYetValidError,
    TokenValidationError,
    configure_logging,
    install_null_handler,
    create_algorithm,
    get_settings,
)
from jwtsmith.models import JwtHeader, RegisteredClaim, StandardClaims, ValidationParameters
from jwtsmith.services import (
    DecodedToken,
    JwtBuilder,
    JwtDecoder,
    JwtEncoder,
    JwtValidator,
    TokenPrincipal,
    TokenService,
)
from jwtsmith.utils.dates import FixedClock, SystemClock, TimeProvider

install_null_handler()

__all__ = [
    "SUPPORTED_ALGORITHMS",
    "Algorithm",
    "Base64UrlEncoder",
    "ClaimFormatError",
    "DecodeError",
    "EcdsaAlgorithm",
    "HmacAlgorithm",
    "InvalidAlgorithmError",
    "InvalidKeyError",
    "JsonSerializer",
    "JwtError",
    "MalformedTokenError",
    "NoneAlgorithm",
    "RsaAlgorithm",
    "RsaPssAlgorithm",
    "Settings",
    "SignatureVerificationError",
    "TokenExpiredError",
    "TokenNotYetValidError",
    "TokenValidationError",
    "configure_logging",
    "create_algorithm",
    "get_settings",
    "JwtHeader",
    "RegisteredClaim",
    "StandardClaims",
    "ValidationParameters",
    "DecodedToken",
    "JwtBuilder",
    "JwtDecoder",
    "JwtEncoder",
    "JwtValidator",
    "TokenPrincipal",
    "TokenService",
    "FixedClock",
    "SystemClock",
    "TimeProvider",
]
