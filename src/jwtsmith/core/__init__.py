from jwtsmith.core.algorithms import (
    SUPPORTED_ALGORITHMS,
    Algorithm,
    EcdsaAlgorithm,
    HmacAlgorithm,
    NoneAlgorithm,
    RsaAlgorithm,
    RsaPssAlgorithm,
    create_algorithm,
)
from jwtsmith.core.base64url import Base64UrlEncoder, b64url_decode, b64url_encode
from jwtsmith.core.config import Settings, clear_settings_cache, get_settings
from jwtsmith.core.exceptions import (
    ClaimFormatError,
    DecodeError,
    InvalidAlgorithmError,
    InvalidKeyError,
    JwtError,
    MalformedTokenError,
    SignatureVerificationError,
    TokenExpiredError,
    TokenNotYetValidError,
    TokenValidationError,
)
from jwtsmith.core.logging import configure_logging, install_null_handler
from jwtsmith.core.serializer import JsonSerializer

__all__ = [
    "SUPPORTED_ALGORITHMS",
    "Algorithm",
    "EcdsaAlgorithm",
    "HmacAlgorithm",
    "NoneAlgorithm",
    "RsaAlgorithm",
    "RsaPssAlgorithm",
    "create_algorithm",
    "Base64UrlEncoder",
    "b64url_decode",
    "b64url_encode",
    "Settings",
    "clear_settings_cache",
    "get_settings",
    "ClaimFormatError",
    "DecodeError",
    "InvalidAlgorithmError",
    "InvalidKeyError",
    "JwtError",
    "MalformedTokenError",
    "SignatureVerificationError",
    "TokenExpiredError",
    "TokenNotYetValidError",
    "TokenValidationError",
    "configure_logging",
    "install_null_handler",
    "JsonSerializer",
]
