import pytest
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from jwtsmith.utils.dates import FixedClock

NOW = 1_700_000_000


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_private_keys():
    return {
        "ES256": ec.generate_private_key(ec.SECP256R1()),
        "ES384": ec.generate_private_key(ec.SECP384R1()),
        "ES512": ec.generate_private_key(ec.SECP521R1()),
    }


@pytest.fixture(scope="session")
def signing_keys(rsa_private_key, ec_private_keys):
    keys = {name: "a-sufficiently-long-shared-secret-value-1234567890" for name in ("HS256", "HS384", "HS512")}
    keys.update({name: rsa_private_key for name in ("RS256", "RS384", "RS512", "PS256", "PS384", "PS512")})
    keys.update(ec_private_keys)
    return keys
