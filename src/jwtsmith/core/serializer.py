from __future__ import annotations

import dataclasses
import json
from datetime import datetime
from typing import Any, TypeVar, overload

from pydantic import BaseModel, TypeAdapter

from jwtsmith.utils.dates import to_epoch_seconds

T = TypeVar("T")


class JsonSerializer:
    """Compact JSON in and out, with optional typed results through pydantic."""

    def __init__(self, sort_keys: bool = False) -> None:
        self.sort_keys = sort_keys

    def serialize(self, value: Any) -> str:
        return json.dumps(
            value,
            separators=(",", ":"),
            sort_keys=self.sort_keys,
            ensure_ascii=False,
            default=self._default,
        )

    @overload
    def deserialize(self, text: str | bytes) -> Any: ...

    @overload
    def deserialize(self, text: str | bytes, target: type[T]) -> T: ...

    def deserialize(self, text: str | bytes, target: Any = None) -> Any:
        value = json.loads(text)
        if target is None:
            return value
        return TypeAdapter(target).validate_python(value)

    @staticmethod
    def _default(value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json", by_alias=True, exclude_none=True)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return dataclasses.asdict(value)
        if isinstance(value, datetime):
            return to_epoch_seconds(value)
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
