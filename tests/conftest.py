"""
Pytest configuration and fixtures for testing.

Keys are generated once per session with cryptography; generating RSA keys
is slow enough to matter when every test asks for one.
"""

import pytest
from cryptography.hazmat.primitives.asymmetric import ec, rsa

# HMAC secrets of at least 32 bytes keep PyJWT from warning about key length
TEST_SECRET = "test-secret-key-0123456789-abcdefghijklmnop"
OTHER_SECRET = "another-secret-key-0123456789-qrstuvwxyz"


@pytest.fixture
def secret() -> str:
    return TEST_SECRET


@pytest.fixture
def other_secret() -> str:
    return OTHER_SECRET


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """RSA private key used to sign test tokens."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_public_key(rsa_private_key: rsa.RSAPrivateKey) -> rsa.RSAPublicKey:
    return rsa_private_key.public_key()


@pytest.fixture(scope="session")
def other_rsa_public_key() -> rsa.RSAPublicKey:
    """Public key that does NOT match rsa_private_key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048).public_key()


@pytest.fixture(scope="session")
def ec_private_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256R1())
