from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping

from jwtsmith.core.exceptions import TokenExpiredError, TokenNotYetValidError
from jwtsmith.models.claims import RegisteredClaim, read_time_claim
from jwtsmith.models.validation import ValidationParameters
from jwtsmith.utils.dates import SystemClock, TimeProvider, to_epoch_seconds

logger = logging.getLogger(__name__)


class JwtValidator:
    """Time-based claim checks against an injected clock.

    ``exp`` fails once ``now > exp + margin`` and ``nbf`` fails while
    ``now < nbf - margin``. A future ``iat`` beyond the margin is treated
    like ``nbf``: the token claims to be issued later than the verifier's clock.
    Absent claims are skipped; present ones must be numeric.
    """

    def __init__(self, time_provider: TimeProvider | None = None) -> None:
        self.time_provider = time_provider or SystemClock()

    def validate(
        self,
        claims: Mapping[str, Any],
        parameters: ValidationParameters | None = None,
        now: datetime | int | float | None = None,
    ) -> None:
        parameters = parameters or ValidationParameters()
        now_seconds = to_epoch_seconds(self.time_provider.now() if now is None else now)
        margin = parameters.time_margin

        if parameters.validate_expiration_time:
            expires_at = read_time_claim(claims, RegisteredClaim.EXPIRATION.value)
            if expires_at is not None and now_seconds > expires_at + margin:
                logger.info("token.rejected reason=expired margin=%s", margin)
                raise TokenExpiredError(
                    "Token has expired.",
                    claim=RegisteredClaim.EXPIRATION.value,
                    value=expires_at,
                    now=now_seconds,
                    margin=margin,
                )

        if parameters.validate_issued_time:
            not_before = read_time_claim(claims, RegisteredClaim.NOT_BEFORE.value)
            if not_before is not None and now_seconds < not_before - margin:
                logger.info("token.rejected reason=not_before margin=%s", margin)
                raise TokenNotYetValidError(
                    "Token is not valid yet.",
                    claim=RegisteredClaim.NOT_BEFORE.value,
                    value=not_before,
                    now=now_seconds,
                    margin=margin,
                )

            issued_at = read_time_claim(claims, RegisteredClaim.ISSUED_AT.value)
            if issued_at is not None and issued_at > now_seconds + margin:
                logger.info("token.rejected reason=issued_in_future margin=%s", margin)
                raise TokenNotYetValidError(
                    "Token was issued in the future.",
                    claim=RegisteredClaim.ISSUED_AT.value,
                    value=issued_at,
                    now=now_seconds,
                    margin=margin,
                )
