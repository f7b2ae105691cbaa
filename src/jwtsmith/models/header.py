from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class JwtHeader(BaseModel):
    """JOSE header; unknown fields are kept as extensions."""

    model_config = ConfigDict(extra="allow", frozen=True)

    typ: str | None = "JWT"
    alg: str | None = None
    kid: str | None = None
    cty: str | None = None

    @property
    def extensions(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    def with_algorithm(self, alg: str) -> JwtHeader:
        return self.model_copy(update={"alg": alg})

    def to_json_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for name in ("typ", "alg", "kid", "cty"):
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        payload.update(self.extensions)
        return payload
