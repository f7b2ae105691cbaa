from __future__ import annotations

import math
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

from jwtsmith.core.exceptions import ClaimFormatError

ClaimSet = dict[str, Any]


class RegisteredClaim(str, Enum):
    EXPIRATION = "exp"
    NOT_BEFORE = "nbf"
    ISSUED_AT = "iat"


TIME_CLAIMS = tuple(claim.value for claim in RegisteredClaim)


def read_time_claim(claims: Mapping[str, Any], name: str) -> int | None:
    """Return a time claim as whole epoch seconds, or ``None`` when absent."""
    if name not in claims:
        return None
    value = claims[name]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ClaimFormatError(name, value)
    if isinstance(value, int):
        # JSON integers are unbounded; compare them exactly.
        return value
    if not math.isfinite(value):
        raise ClaimFormatError(name, value)
    return math.floor(value)


class StandardClaims(BaseModel):
    model_config = ConfigDict(extra="allow")

    iss: str | None = None
    sub: str | None = None
    aud: str | list[str] | None = None
    exp: int | float | None = None
    nbf: int | float | None = None
    iat: int | float | None = None
    jti: str | None = None
