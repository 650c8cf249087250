# Copyright (c) 2022 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

""""
pemsign

RSA signing and verification with PEM encoded keys.
"""

__author__ = 'SiumLhahah'
__version__ = '0.1.0'

from .constants import KeyKind
from .lib.exceptions import (
    KeyFormatError,
    MalformedKey,
    NoKeyFound,
    SigningError,
    UnsupportedKeyType,
    VerificationError
)
from .lib.keys import parse_key, parse_private_key, parse_public_key
from .lib.signature import (
    RSASignerSHA256,
    RSAVerifierSHA256,
    Signer,
    Verifier
)
