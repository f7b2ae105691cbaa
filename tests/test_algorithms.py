import pytest
from cryptography.hazmat.primitives import serialization

from jwtsmith.core.algorithms import (
    SUPPORTED_ALGORITHMS,
    EcdsaAlgorithm,
    HmacAlgorithm,
    NoneAlgorithm,
    RsaAlgorithm,
    RsaPssAlgorithm,
    create_algorithm,
)
from jwtsmith.core.exceptions import InvalidAlgorithmError, InvalidKeyError

MESSAGE = b"header.claims"


def _public_pem(private_key):
    return private_key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def _private_pem(private_key):
    return private_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )


@pytest.mark.parametrize("name", [name for name in SUPPORTED_ALGORITHMS if name != "none"])
def test_every_family_signs_and_verifies(name, signing_keys):
    algorithm = create_algorithm(name, signing_keys[name])
    assert algorithm.name == name
    signature = algorithm.sign(MESSAGE)
    assert algorithm.verify(MESSAGE, signature)
    assert not algorithm.verify(MESSAGE + b"x", signature)


def test_factory_returns_expected_family(signing_keys):
    assert isinstance(create_algorithm("HS384", signing_keys["HS384"]), HmacAlgorithm)
    assert isinstance(create_algorithm("RS512", signing_keys["RS512"]), RsaAlgorithm)
    assert isinstance(create_algorithm("PS256", signing_keys["PS256"]), RsaPssAlgorithm)
    assert isinstance(create_algorithm("ES384", signing_keys["ES384"]), EcdsaAlgorithm)
    assert isinstance(create_algorithm("none"), NoneAlgorithm)


def test_hmac_is_deterministic():
    algorithm = HmacAlgorithm("HS256", "secret-value")
    assert algorithm.sign(MESSAGE) == algorithm.sign(MESSAGE)
    assert len(algorithm.sign(MESSAGE)) == 32
    assert len(HmacAlgorithm("HS512", b"secret-value").sign(MESSAGE)) == 64


def test_rsa_pss_signatures_are_randomized_but_verify(rsa_private_key):
    algorithm = RsaPssAlgorithm("PS256", rsa_private_key)
    first = algorithm.sign(MESSAGE)
    second = algorithm.sign(MESSAGE)
    assert first != second
    assert algorithm.verify(MESSAGE, first)
    assert algorithm.verify(MESSAGE, second)


def test_pkcs1_and_pss_signatures_are_not_interchangeable(rsa_private_key):
    pkcs1 = RsaAlgorithm("RS256", rsa_private_key)
    pss = RsaPssAlgorithm("PS256", rsa_private_key)
    assert not pss.verify(MESSAGE, pkcs1.sign(MESSAGE))
    assert not pkcs1.verify(MESSAGE, pss.sign(MESSAGE))


@pytest.mark.parametrize("name,size", [("ES256", 64), ("ES384", 96), ("ES512", 132)])
def test_ecdsa_signature_uses_fixed_width_raw_encoding(name, size, ec_private_keys):
    algorithm = EcdsaAlgorithm(name, ec_private_keys[name])
    signature = algorithm.sign(MESSAGE)
    assert len(signature) == size
    assert algorithm.verify(MESSAGE, signature)
    assert not algorithm.verify(MESSAGE, signature[:-1])


def test_ecdsa_rejects_key_on_wrong_curve(ec_private_keys):
    with pytest.raises(InvalidKeyError):
        EcdsaAlgorithm("ES256", ec_private_keys["ES384"])


def test_asymmetric_families_reject_foreign_key_types(rsa_private_key, ec_private_keys):
    with pytest.raises(InvalidKeyError):
        EcdsaAlgorithm("ES256", rsa_private_key)
    with pytest.raises(InvalidKeyError):
        RsaAlgorithm("RS256", ec_private_keys["ES256"])
    with pytest.raises(InvalidKeyError):
        RsaAlgorithm("RS256", "not a pem")


def test_pem_keys_are_loaded(rsa_private_key, ec_private_keys):
    signer = create_algorithm("RS256", _private_pem(rsa_private_key).decode("ascii"))
    verifier = create_algorithm("RS256", _public_pem(rsa_private_key))
    assert verifier.verify(MESSAGE, signer.sign(MESSAGE))

    ec_key = ec_private_keys["ES256"]
    ec_signer = create_algorithm("ES256", _private_pem(ec_key))
    ec_verifier = create_algorithm("ES256", _public_pem(ec_key))
    assert ec_verifier.verify(MESSAGE, ec_signer.sign(MESSAGE))


def test_public_key_cannot_sign(rsa_private_key, ec_private_keys):
    with pytest.raises(InvalidKeyError):
        RsaAlgorithm("RS256", rsa_private_key.public_key()).sign(MESSAGE)
    with pytest.raises(InvalidKeyError):
        EcdsaAlgorithm("ES256", ec_private_keys["ES256"].public_key()).sign(MESSAGE)


def test_hmac_refuses_asymmetric_key_material_as_secret(rsa_private_key):
    with pytest.raises(InvalidKeyError):
        create_algorithm("HS256", _public_pem(rsa_private_key))
    with pytest.raises(InvalidKeyError):
        create_algorithm("HS256", "ssh-rsa AAAAB3NzaC1yc2E")
    with pytest.raises(InvalidKeyError):
        create_algorithm("HS256", b"\n  ecdsa-sha2-nistp256 AAAAE2VjZHNh")


@pytest.mark.parametrize(
    "secret",
    ["team-ssh-rsa-rotation-secret", "shared-ecdsa-sha2-passphrase", "prefix -----BEGIN PUBLIC KEY----- suffix"],
)
def test_hmac_accepts_secret_merely_mentioning_key_markers(secret):
    algorithm = HmacAlgorithm("HS256", secret)
    assert algorithm.verify(MESSAGE, algorithm.sign(MESSAGE))


def test_hmac_refuses_empty_or_non_text_secret():
    with pytest.raises(InvalidKeyError):
        HmacAlgorithm("HS256", "")
    with pytest.raises(InvalidKeyError):
        HmacAlgorithm("HS256", 12345)


def test_hmac_accepts_binary_secret():
    algorithm = HmacAlgorithm("HS256", b"\xff\xfe\x00binary")
    assert algorithm.verify(MESSAGE, algorithm.sign(MESSAGE))


def test_none_algorithm_requires_explicit_opt_in():
    assert NoneAlgorithm().sign(MESSAGE) == b""
    assert not NoneAlgorithm().verify(MESSAGE, b"")
    assert NoneAlgorithm(allow_unsigned=True).verify(MESSAGE, b"")
    assert not NoneAlgorithm(allow_unsigned=True).verify(MESSAGE, b"sig")


def test_factory_rejects_unknown_names_and_missing_keys():
    with pytest.raises(InvalidAlgorithmError):
        create_algorithm("HS999", "secret")
    with pytest.raises(InvalidAlgorithmError):
        create_algorithm("hs256", "secret")
    with pytest.raises(InvalidKeyError):
        create_algorithm("HS256")
    with pytest.raises(InvalidKeyError):
        create_algorithm("none", "secret")


def test_family_constructor_rejects_foreign_names(rsa_private_key):
    with pytest.raises(InvalidAlgorithmError):
        HmacAlgorithm("RS256", "secret")
    with pytest.raises(InvalidAlgorithmError):
        RsaPssAlgorithm("RS256", rsa_private_key)


def test_repr_does_not_expose_key_material():
    assert "secret" not in repr(HmacAlgorithm("HS256", "secret-value"))
    assert repr(NoneAlgorithm()) == "NoneAlgorithm(name='none')"
