from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping


@dataclass(frozen=True)
class Settings:
    jwt_algorithm: str = "HS256"
    jwt_secret_key: str = "change-me-in-env"
    jwt_issuer: str = "jwtsmith"
    jwt_access_token_ttl_seconds: int = 3600
    jwt_time_margin_seconds: int = 0
    jwt_validate_signature: bool = True
    jwt_validate_expiration_time: bool = True
    jwt_validate_issued_time: bool = True


def _strip_wrapping_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value


def _read_dotenv() -> dict[str, str]:
    """Values from ``.env`` in the working directory; ``os.environ`` is left untouched."""
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return {}
    values: dict[str, str] = {}
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            values.setdefault(key, _strip_wrapping_quotes(value.strip()))
    return values


def _env_bool(values: Mapping[str, str], name: str, default: bool) -> bool:
    value = values.get(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def _env_non_negative_int(values: Mapping[str, str], name: str, default: int) -> int:
    raw = values.get(name)
    if raw is None or not raw.strip():
        return default
    value = int(raw.strip())
    if value < 0:
        raise ValueError(f"{name} must be zero or a positive number of seconds")
    return value


def get_settings() -> Settings:
    # process environment wins over .env
    values = {**_read_dotenv(), **os.environ}
    return Settings(
        jwt_algorithm=values.get("JWT_ALGORITHM", "HS256").strip(),
        jwt_secret_key=values.get("JWT_SECRET_KEY", "change-me-in-env"),
        jwt_issuer=values.get("JWT_ISSUER", "jwtsmith"),
        jwt_access_token_ttl_seconds=_env_non_negative_int(values, "JWT_ACCESS_TOKEN_TTL_SECONDS", 3600),
        jwt_time_margin_seconds=_env_non_negative_int(values, "JWT_TIME_MARGIN_SECONDS", 0),
        jwt_validate_signature=_env_bool(values, "JWT_VALIDATE_SIGNATURE", True),
        jwt_validate_expiration_time=_env_bool(values, "JWT_VALIDATE_EXPIRATION_TIME", True),
        jwt_validate_issued_time=_env_bool(values, "JWT_VALIDATE_ISSUED_TIME", True),
    )


get_settings = lru_cache(maxsize=1)(get_settings)


def clear_settings_cache() -> None:
    get_settings.cache_clear()  # type: ignore[attr-defined]
