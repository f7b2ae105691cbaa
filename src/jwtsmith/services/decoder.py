from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeVar, overload

from jwtsmith.core.algorithms import Algorithm
from jwtsmith.core.base64url import Base64UrlEncoder
from jwtsmith.core.exceptions import (
    DecodeError,
    InvalidAlgorithmError,
    MalformedTokenError,
    SignatureVerificationError,
)
from jwtsmith.core.serializer import JsonSerializer
from jwtsmith.models.header import JwtHeader
from jwtsmith.models.validation import ValidationParameters
from jwtsmith.services.validator import JwtValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class TokenSegments:
    header: str
    claims: str
    signature: str

    @property
    def signing_input(self) -> bytes:
        return f"{self.header}.{self.claims}".encode("ascii")


@dataclass(frozen=True)
class DecodedToken:
    header: JwtHeader
    claims: dict[str, Any]
    segments: TokenSegments


class JwtDecoder:
    def __init__(
        self,
        serializer: JsonSerializer | None = None,
        url_encoder: Base64UrlEncoder | None = None,
        validator: JwtValidator | None = None,
        parameters: ValidationParameters | None = None,
    ) -> None:
        self.serializer = serializer or JsonSerializer()
        self.url_encoder = url_encoder or Base64UrlEncoder()
        self.validator = validator or JwtValidator()
        self.parameters = parameters or ValidationParameters()

    @staticmethod
    def split(token: str) -> TokenSegments:
        if not isinstance(token, str):
            raise MalformedTokenError("Token must be a string.")
        if token.count(".") != 2:
            raise MalformedTokenError("Token must consist of exactly three segments.")
        header, claims, signature = token.split(".")
        return TokenSegments(header=header, claims=claims, signature=signature)

    @overload
    def decode_header(self, token: str) -> JwtHeader: ...

    @overload
    def decode_header(self, token: str, target: type[T]) -> T: ...

    def decode_header(self, token: str, target: Any = JwtHeader) -> Any:
        """Read the header without looking at the signature."""
        segments = self.split(token)
        raw = self._decode_segment(segments.header, "header")
        self._require_object(self._deserialize(raw, None, "header"), "header")
        return self._deserialize(raw, target, "header")

    def decode(
        self,
        token: str,
        algorithm: Algorithm | None = None,
        *,
        verify: bool = True,
        parameters: ValidationParameters | None = None,
    ) -> dict[str, Any]:
        return self.decode_complete(token, algorithm, verify=verify, parameters=parameters).claims

    def decode_to_object(
        self,
        token: str,
        target: type[T],
        algorithm: Algorithm | None = None,
        *,
        verify: bool = True,
        parameters: ValidationParameters | None = None,
    ) -> T:
        decoded = self.decode_complete(token, algorithm, verify=verify, parameters=parameters)
        raw_claims = self._decode_segment(decoded.segments.claims, "claims")
        return self._deserialize(raw_claims, target, "claims")

    def decode_complete(
        self,
        token: str,
        algorithm: Algorithm | None = None,
        *,
        verify: bool = True,
        parameters: ValidationParameters | None = None,
    ) -> DecodedToken:
        """Split, parse, verify and validate, in that order.

        Verification happens when ``verify`` is set and the parameters ask for
        it; skipping it requires turning off either one explicitly. The
        algorithm always comes from the caller, never from the header.
        """
        parameters = parameters or self.parameters
        segments = self.split(token)

        header_data = self._require_object(
            self._deserialize(self._decode_segment(segments.header, "header"), None, "header"), "header"
        )
        claims = self._require_object(
            self._deserialize(self._decode_segment(segments.claims, "claims"), None, "claims"), "claims"
        )
        header = self._deserialize_header(header_data)

        if verify and parameters.validate_signature:
            self._verify_signature(header, segments, algorithm)

        self.validator.validate(claims, parameters)
        logger.debug("token.decoded alg=%s kid=%s verified=%s", header.alg, header.kid, verify and parameters.validate_signature)
        return DecodedToken(header=header, claims=claims, segments=segments)

    def _verify_signature(self, header: JwtHeader, segments: TokenSegments, algorithm: Algorithm | None) -> None:
        if algorithm is None:
            raise InvalidAlgorithmError("Signature verification was requested but no algorithm was supplied.")
        if header.alg != algorithm.name:
            logger.info("token.rejected reason=algorithm_mismatch expected=%s", algorithm.name)
            raise SignatureVerificationError(
                f"Token algorithm does not match the expected algorithm '{algorithm.name}'."
            )
        signature = self._decode_segment(segments.signature, "signature")
        if not algorithm.verify(segments.signing_input, signature):
            logger.info("token.rejected reason=bad_signature alg=%s", algorithm.name)
            raise SignatureVerificationError("Invalid token signature.")

    def _decode_segment(self, segment: str, name: str) -> bytes:
        try:
            return self.url_encoder.decode(segment)
        except DecodeError as exc:
            raise MalformedTokenError(f"Token {name} segment is not valid base64url.") from exc

    def _deserialize(self, raw: bytes, target: Any, name: str) -> Any:
        try:
            if target is None:
                return self.serializer.deserialize(raw)
            return self.serializer.deserialize(raw, target)
        except ValueError as exc:
            raise MalformedTokenError(f"Token {name} segment is not valid JSON for the expected shape.") from exc

    @staticmethod
    def _require_object(value: Any, name: str) -> Any:
        if not isinstance(value, dict):
            raise MalformedTokenError(f"Token {name} segment must be a JSON object.")
        return value

    @staticmethod
    def _deserialize_header(header_data: dict[str, Any]) -> JwtHeader:
        try:
            return JwtHeader.model_validate(header_data)
        except ValueError as exc:
            raise MalformedTokenError("Token header segment is not a valid JOSE header.") from exc
