from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Protocol, runtime_checkable


@runtime_checkable
class TimeProvider(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock pinned to one instant; only moves when ``advance`` is called."""

    def __init__(self, instant: datetime | int | float) -> None:
        self._instant = _as_utc_datetime(instant)

    def now(self) -> datetime:
        return self._instant

    def advance(self, seconds: float) -> None:
        self._instant = self._instant + timedelta(seconds=seconds)


def _as_utc_datetime(value: datetime | int | float) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.fromtimestamp(value, tz=timezone.utc)


def to_epoch_seconds(value: datetime | int | float) -> int:
    """Whole seconds since the Unix epoch; naive datetimes are read as UTC."""
    if isinstance(value, datetime):
        value = _as_utc_datetime(value).timestamp()
    return math.floor(value)
