import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat
)


def _pem_pair(key):
    priv = key.private_bytes(
        Encoding.PEM,
        PrivateFormat.TraditionalOpenSSL,
        NoEncryption()
    )
    pub = key.public_key().public_bytes(
        Encoding.PEM,
        PublicFormat.SubjectPublicKeyInfo
    )
    return priv, pub


@pytest.fixture(scope='session')
def rsa_key():
    return rsa.generate_private_key(65537, 2048)


@pytest.fixture(scope='session')
def other_rsa_key():
    return rsa.generate_private_key(65537, 2048)


@pytest.fixture(scope='session')
def pem_pair(rsa_key):
    """PKCS#1 private and PKIX public PEM of a 2048-bit key."""
    return _pem_pair(rsa_key)


@pytest.fixture(scope='session')
def other_pem_pair(other_rsa_key):
    return _pem_pair(other_rsa_key)
