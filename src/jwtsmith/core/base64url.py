from __future__ import annotations

import base64
import binascii
import re

from jwtsmith.core.exceptions import DecodeError

_ALPHABET = re.compile(r"^[A-Za-z0-9_-]*$")


class Base64UrlEncoder:
    """URL-safe base64 without padding, as used by every JWT segment."""

    def encode(self, data: bytes) -> str:
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")

    def decode(self, data: str | bytes) -> bytes:
        if isinstance(data, bytes):
            try:
                data = data.decode("ascii")
            except UnicodeDecodeError as exc:
                raise DecodeError("Base64url input must be ASCII.") from exc
        if not _ALPHABET.match(data):
            raise DecodeError("Base64url input contains characters outside the URL-safe alphabet.")
        if len(data) % 4 == 1:
            raise DecodeError("Base64url input has an impossible length.")
        padding = "=" * (-len(data) % 4)
        try:
            return base64.urlsafe_b64decode(data + padding)
        except (binascii.Error, ValueError) as exc:
            raise DecodeError("Invalid base64url input.") from exc


_codec = Base64UrlEncoder()


def b64url_encode(data: bytes) -> str:
    return _codec.encode(data)


def b64url_decode(data: str | bytes) -> bytes:
    return _codec.decode(data)
