from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from jwtsmith.core.config import Settings


@dataclass(frozen=True)
class ValidationParameters:
    """Which checks a decode performs.

    ``validate_issued_time`` covers both ``nbf`` and ``iat``. ``time_margin``
    is in whole seconds and widens every time bound by the same amount.
    """

    validate_signature: bool = True
    validate_expiration_time: bool = True
    validate_issued_time: bool = True
    time_margin: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.time_margin, bool) or not isinstance(self.time_margin, int):
            raise ValueError("time_margin must be a whole number of seconds")
        if self.time_margin < 0:
            raise ValueError("time_margin must not be negative")

    @classmethod
    def default(cls) -> ValidationParameters:
        return cls()

    @classmethod
    def none(cls) -> ValidationParameters:
        return cls(
            validate_signature=False,
            validate_expiration_time=False,
            validate_issued_time=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> ValidationParameters:
        return cls(
            validate_signature=settings.jwt_validate_signature,
            validate_expiration_time=settings.jwt_validate_expiration_time,
            validate_issued_time=settings.jwt_validate_issued_time,
            time_margin=settings.jwt_time_margin_seconds,
        )

    def with_(self, **changes: Any) -> ValidationParameters:
        return replace(self, **changes)
