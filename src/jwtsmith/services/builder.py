from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping, TypeVar

from jwtsmith.core.algorithms import Algorithm, KeyMaterial, create_algorithm
from jwtsmith.core.base64url import Base64UrlEncoder
from jwtsmith.core.exceptions import InvalidAlgorithmError
from jwtsmith.core.serializer import JsonSerializer
from jwtsmith.models.header import JwtHeader
from jwtsmith.models.validation import ValidationParameters
from jwtsmith.services.decoder import JwtDecoder
from jwtsmith.services.encoder import JwtEncoder
from jwtsmith.services.validator import JwtValidator
from jwtsmith.utils.dates import SystemClock, TimeProvider

T = TypeVar("T")


@dataclass(frozen=True)
class JwtBuilder:
    """Immutable, chainable configuration for encoding and decoding.

    Each ``with_*``/``add_*`` call returns a new builder. Terminal calls wire
    the accumulated values into ``JwtEncoder``/``JwtDecoder`` and do nothing else.
    """

    algorithm: Algorithm | str | None = None
    key: KeyMaterial = None
    serializer: JsonSerializer = field(default_factory=JsonSerializer)
    url_encoder: Base64UrlEncoder = field(default_factory=Base64UrlEncoder)
    time_provider: TimeProvider = field(default_factory=SystemClock)
    claims: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, Any] = field(default_factory=dict)
    validation_parameters: ValidationParameters = field(default_factory=ValidationParameters)
    verify_signature: bool = True
    unsigned_allowed: bool = False

    @classmethod
    def create(cls) -> JwtBuilder:
        return cls()

    def with_algorithm(self, algorithm: Algorithm | str) -> JwtBuilder:
        return replace(self, algorithm=algorithm)

    def with_secret(self, key: KeyMaterial) -> JwtBuilder:
        return replace(self, key=key)

    with_key = with_secret

    def with_serializer(self, serializer: JsonSerializer) -> JwtBuilder:
        return replace(self, serializer=serializer)

    def with_url_encoder(self, url_encoder: Base64UrlEncoder) -> JwtBuilder:
        return replace(self, url_encoder=url_encoder)

    def with_time_provider(self, time_provider: TimeProvider) -> JwtBuilder:
        return replace(self, time_provider=time_provider)

    def with_validation_parameters(self, parameters: ValidationParameters) -> JwtBuilder:
        return replace(self, validation_parameters=parameters)

    def add_claim(self, name: str, value: Any) -> JwtBuilder:
        return replace(self, claims={**self.claims, name: value})

    def add_claims(self, claims: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> JwtBuilder:
        return replace(self, claims={**self.claims, **dict(claims)})

    def add_header(self, name: str, value: Any) -> JwtBuilder:
        return replace(self, headers={**self.headers, name: value})

    def with_key_id(self, kid: str) -> JwtBuilder:
        return self.add_header("kid", kid)

    def must_verify_signature(self) -> JwtBuilder:
        return replace(self, verify_signature=True)

    def do_not_verify_signature(self) -> JwtBuilder:
        return replace(self, verify_signature=False)

    def allow_unsigned(self, allowed: bool = True) -> JwtBuilder:
        return replace(self, unsigned_allowed=allowed)

    def resolve_algorithm(self) -> Algorithm:
        if self.algorithm is None:
            raise InvalidAlgorithmError("No algorithm configured on the builder.")
        if isinstance(self.algorithm, Algorithm):
            return self.algorithm
        return create_algorithm(self.algorithm, self.key, allow_unsigned=self.unsigned_allowed)

    def build_encoder(self) -> JwtEncoder:
        return JwtEncoder(serializer=self.serializer, url_encoder=self.url_encoder)

    def build_decoder(self) -> JwtDecoder:
        return JwtDecoder(
            serializer=self.serializer,
            url_encoder=self.url_encoder,
            validator=JwtValidator(self.time_provider),
            parameters=self.validation_parameters,
        )

    def encode(self) -> str:
        return self.build_encoder().encode(dict(self.claims), self.resolve_algorithm(), extra_headers=self.headers)

    def decode(self, token: str) -> dict[str, Any]:
        return self.build_decoder().decode(token, self._verification_algorithm(), verify=self.verify_signature)

    def decode_to_object(self, token: str, target: type[T]) -> T:
        return self.build_decoder().decode_to_object(
            token, target, self._verification_algorithm(), verify=self.verify_signature
        )

    def decode_header(self, token: str, target: Any = JwtHeader) -> Any:
        return self.build_decoder().decode_header(token, target)

    def _verification_algorithm(self) -> Algorithm | None:
        if self.verify_signature and self.validation_parameters.validate_signature:
            return self.resolve_algorithm()
        return None
