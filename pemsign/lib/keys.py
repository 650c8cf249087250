#!/usr/bin/python
# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

""""
pemsign.lib.keys

Turns PEM encoded keys into signers and verifiers.

Example

>>> signer = parse_private_key(open('id_rsa', 'rb').read())
>>> sig = signer.sign(b'hello world')
>>> verifier = parse_public_key(open('id_rsa.pub.pem', 'rb').read())
>>> verifier.verify(b'hello world', sig)

Only the first PEM block of the input is used.
"""

import logging
from ..constants import KeyKind
from . import pem
from .exceptions import NoKeyFound, UnsupportedKeyType
from .signature import RSASignerSHA256, RSAVerifierSHA256, Signer, Verifier

logger = logging.getLogger(__name__)


def _decode(pem_bytes: bytes | str) -> tuple[KeyKind | None, pem.PemBlock]:
    block = pem.decode(pem_bytes)
    if block is None:
        logger.debug("No PEM block in %d bytes of input", len(pem_bytes))
        raise NoKeyFound('no key found')
    return KeyKind.from_tag(block.tag), block


def _reject(block: pem.PemBlock):
    logger.debug("Rejecting PEM block tagged %r", block.tag)
    return UnsupportedKeyType(block.tag)


key_classes = {
    KeyKind.RSA_PRIVATE: RSASignerSHA256,
    KeyKind.RSA_PUBLIC: RSAVerifierSHA256
}


def _load(kind: KeyKind | None, block: pem.PemBlock) -> Signer | Verifier:
    if key_class := key_classes.get(kind):
        return key_class.from_bytes(block.data)
    raise _reject(block)


def parse_private_key(pem_bytes: bytes | str) -> Signer:
    """Parse a PKCS#1 "RSA PRIVATE KEY" PEM block into a signer."""
    kind, block = _decode(pem_bytes)
    if kind is not KeyKind.RSA_PRIVATE:
        raise _reject(block)
    return _load(kind, block)


def parse_public_key(pem_bytes: bytes | str) -> Verifier:
    """Parse a PKIX "PUBLIC KEY" PEM block of an RSA key into a verifier."""
    kind, block = _decode(pem_bytes)
    if kind is not KeyKind.RSA_PUBLIC:
        raise _reject(block)
    return _load(kind, block)


def parse_key(pem_bytes: bytes | str) -> Signer | Verifier:
    """Parse whichever supported key the first PEM block holds."""
    kind, block = _decode(pem_bytes)
    logger.debug("Parsing PEM block tagged %r", block.tag)
    return _load(kind, block)
