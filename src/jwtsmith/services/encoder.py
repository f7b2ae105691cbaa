from __future__ import annotations

import logging
from typing import Any, Mapping

from jwtsmith.core.algorithms import Algorithm
from jwtsmith.core.base64url import Base64UrlEncoder
from jwtsmith.core.exceptions import InvalidAlgorithmError
from jwtsmith.core.serializer import JsonSerializer
from jwtsmith.models.header import JwtHeader

logger = logging.getLogger(__name__)


class JwtEncoder:
    def __init__(
        self,
        serializer: JsonSerializer | None = None,
        url_encoder: Base64UrlEncoder | None = None,
    ) -> None:
        self.serializer = serializer or JsonSerializer()
        self.url_encoder = url_encoder or Base64UrlEncoder()

    def encode(
        self,
        claims: Any,
        algorithm: Algorithm,
        header: JwtHeader | Mapping[str, Any] | None = None,
        extra_headers: Mapping[str, Any] | None = None,
    ) -> str:
        """Serialize, sign and assemble ``header.claims.signature``.

        Claims are written as given; nothing like ``exp`` or ``iat`` is added.
        """
        resolved_header = self._resolve_header(header, extra_headers, algorithm)

        header_json = self.serializer.serialize(resolved_header.to_json_dict())
        claims_json = self.serializer.serialize(claims)
        if not claims_json.startswith("{"):
            raise ValueError("Claims must serialize to a JSON object.")

        header_segment = self.url_encoder.encode(header_json.encode("utf-8"))
        claims_segment = self.url_encoder.encode(claims_json.encode("utf-8"))
        signing_input = f"{header_segment}.{claims_segment}"

        signature = algorithm.sign(signing_input.encode("ascii"))
        signature_segment = self.url_encoder.encode(signature)
        logger.debug("token.encoded alg=%s kid=%s", resolved_header.alg, resolved_header.kid)
        return f"{signing_input}.{signature_segment}"

    @staticmethod
    def _resolve_header(
        header: JwtHeader | Mapping[str, Any] | None,
        extra_headers: Mapping[str, Any] | None,
        algorithm: Algorithm,
    ) -> JwtHeader:
        if header is None:
            resolved = JwtHeader()
        elif isinstance(header, JwtHeader):
            resolved = header
        else:
            resolved = JwtHeader.model_validate(dict(header))
        if extra_headers:
            resolved = JwtHeader.model_validate({**resolved.to_json_dict(), **extra_headers})

        if resolved.alg is None:
            return resolved.with_algorithm(algorithm.name)
        if resolved.alg != algorithm.name:
            raise InvalidAlgorithmError(
                f"Header declares alg '{resolved.alg}' but the token is signed with '{algorithm.name}'."
            )
        return resolved
