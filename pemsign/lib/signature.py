""""
pemsign.lib.signature

Provides signature support for pemsign.

Example

>>> signer = RSASignerSHA256.from_bytes(pkcs1_der)
>>> msg = b'a message'
>>> sig = signer.sign(msg)
>>> verifier = RSAVerifierSHA256.from_bytes(signer.public_key.to_bytes())
>>> verifier.verify(msg, sig)

"""

from abc import ABCMeta, abstractmethod
from typing import Self
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
    load_pem_private_key,
    load_pem_public_key
)
from ..constants import SIGNATURE_ALGORITHM, KeyKind
from . import pem
from .exceptions import (
    MalformedKey,
    SigningError,
    UnsupportedKeyType,
    VerificationError
)


class SignatureKey(metaclass=ABCMeta):

    """Key for signature, to sign or to verify."""

    def __init__(self, key: object):
        self._key = key

    @property
    def key(self) -> object:
        """Return the key."""
        return self._key

    @property
    @abstractmethod
    def name(self) -> str:
        """Algorithm name."""

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Dump the key to DER bytes."""

    @abstractmethod
    def to_pem(self) -> bytes:
        """Dump the key to PEM bytes."""


class Verifier(SignatureKey):

    """Key to verify."""

    @abstractmethod
    def verify(self, data: bytes, signature: bytes) -> None:
        """Verify the signature.

        Raise VerificationError if it does not match the data.
        """


class Signer(SignatureKey):

    """Key to sign."""

    @abstractmethod
    def sign(self, data: bytes) -> bytes:
        """Sign the data."""


def _load_pem(kind: KeyKind, key_bytes: bytes, loader):
    """Load DER bytes as the exact structure the PEM tag stands for."""
    block = pem.PemBlock(kind.value, key_bytes)
    return loader(pem.encode(block))


class RSAVerifierSHA256(Verifier):

    """RSA public key, PKCS#1 v1.5 with SHA-256."""

    name = SIGNATURE_ALGORITHM

    @property
    def key_size(self) -> int:
        """Modulus size in bits."""
        return self._key.key_size

    def verify(self, data: bytes, signature: bytes) -> None:
        """Verify the signature."""
        try:
            self._key.verify(
                signature,
                data,
                padding.PKCS1v15(),
                hashes.SHA256()
            )
        except InvalidSignature as exc:
            raise VerificationError('signature does not match') from exc

    def to_bytes(self) -> bytes:
        """Dump the RSA public key to SubjectPublicKeyInfo DER."""
        return self._key.public_bytes(
            Encoding.DER,
            PublicFormat.SubjectPublicKeyInfo
        )

    def to_pem(self) -> bytes:
        """Dump the RSA public key to PEM."""
        return pem.encode(pem.PemBlock(KeyKind.RSA_PUBLIC.value,
                                       self.to_bytes()))

    @classmethod
    def from_bytes(cls, key_bytes: bytes) -> Self:
        """Load RSA public key from SubjectPublicKeyInfo DER."""
        try:
            key = _load_pem(KeyKind.RSA_PUBLIC, key_bytes,
                            load_pem_public_key)
        except UnsupportedAlgorithm as exc:
            raise UnsupportedKeyType('unknown') from exc
        except ValueError as exc:
            raise MalformedKey(f'invalid public key: {exc}') from exc
        if not isinstance(key, rsa.RSAPublicKey):
            raise UnsupportedKeyType(type(key).__name__)
        return cls(key)


class RSASignerSHA256(Signer):

    """RSA private key, PKCS#1 v1.5 with SHA-256.

    Signing is deterministic: the same key and data always give the
    same signature. Signatures are as long as the modulus.

    """

    name = SIGNATURE_ALGORITHM

    def __init__(self, key: rsa.RSAPrivateKey):
        super().__init__(key)
        self._pub_key = RSAVerifierSHA256(key.public_key())

    @property
    def public_key(self) -> RSAVerifierSHA256:
        """Get the matching verifier."""
        return self._pub_key

    @property
    def key_size(self) -> int:
        """Modulus size in bits."""
        return self._key.key_size

    def sign(self, data: bytes) -> bytes:
        """Sign the data."""
        try:
            return self._key.sign(
                data,
                padding.PKCS1v15(),
                hashes.SHA256()
            )
        except ValueError as exc:
            raise SigningError(f'cannot sign: {exc}') from exc

    def to_bytes(self) -> bytes:
        """Dump the RSA private key to PKCS#1 DER."""
        return self._key.private_bytes(
            Encoding.DER,
            PrivateFormat.TraditionalOpenSSL,
            NoEncryption()
        )

    def to_pem(self) -> bytes:
        """Dump the RSA private key to PEM."""
        return pem.encode(pem.PemBlock(KeyKind.RSA_PRIVATE.value,
                                       self.to_bytes()))

    @classmethod
    def from_bytes(cls, key_bytes: bytes) -> Self:
        """Load RSA private key from PKCS#1 DER."""
        try:
            key = _load_pem(KeyKind.RSA_PRIVATE, key_bytes,
                            lambda data: load_pem_private_key(data, None))
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise MalformedKey(f'invalid PKCS#1 private key: {exc}') from exc
        return cls(key)
