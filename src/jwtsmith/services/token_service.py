from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from jwtsmith.core.config import Settings
from jwtsmith.core.exceptions import JwtError
from jwtsmith.models.claims import StandardClaims
from jwtsmith.models.validation import ValidationParameters
from jwtsmith.services.builder import JwtBuilder
from jwtsmith.utils.dates import SystemClock, TimeProvider, to_epoch_seconds

logger = logging.getLogger(__name__)

_RESERVED_ISSUE_CLAIMS = frozenset({"sub", "iss", "iat", "exp"})


@dataclass(frozen=True)
class TokenPrincipal:
    subject: str
    issuer: str
    claims: dict[str, Any]


class TokenService:
    def __init__(self, settings: Settings, time_provider: TimeProvider | None = None) -> None:
        self._settings = settings
        self._time_provider = time_provider or SystemClock()
        self._builder = (
            JwtBuilder.create()
            .with_algorithm(settings.jwt_algorithm)
            .with_secret(settings.jwt_secret_key)
            .with_time_provider(self._time_provider)
            .with_validation_parameters(ValidationParameters.from_settings(settings))
        )

    @property
    def token_ttl_seconds(self) -> int:
        return self._settings.jwt_access_token_ttl_seconds

    def issue_token(self, subject: str, extra_claims: Mapping[str, Any] | None = None) -> str:
        if not subject:
            raise ValueError("Token subject must not be empty.")
        extra_claims = dict(extra_claims or {})
        clashing = _RESERVED_ISSUE_CLAIMS.intersection(extra_claims)
        if clashing:
            raise ValueError(f"Claims {sorted(clashing)} are set by the token service.")

        now = to_epoch_seconds(self._time_provider.now())
        token = (
            self._builder.add_claims(
                {
                    "sub": subject,
                    "iss": self._settings.jwt_issuer,
                    "iat": now,
                    "exp": now + self.token_ttl_seconds,
                }
            )
            .add_claims(extra_claims)
            .encode()
        )
        logger.info("token.issued sub=%s ttl=%s", subject, self.token_ttl_seconds)
        return token

    def validate_token(self, token: str) -> TokenPrincipal:
        try:
            claims = self._builder.decode_to_object(token, StandardClaims)
        except JwtError as exc:
            raise PermissionError(str(exc)) from exc

        if not claims.sub:
            raise PermissionError("Token is missing subject.")
        if claims.iss != self._settings.jwt_issuer:
            raise PermissionError("Token issuer mismatch.")
        return TokenPrincipal(
            subject=claims.sub,
            issuer=claims.iss,
            claims=claims.model_dump(exclude_none=True),
        )
