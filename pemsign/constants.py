# Copyright (c) 2022-2023 SiumLhahah
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.

"""
pemsign.constants

Constants for pemsign.

"""

from enum import Enum

# Text encoding of PEM documents
ENCODING = 'ascii'

# Base64 characters per line when writing PEM
PEM_LINE_LENGTH = 64

SIGNATURE_ALGORITHM = 'rsa-sha256'


class KeyKind(str, Enum):

    """Supported key kinds, by PEM tag."""

    RSA_PRIVATE = 'RSA PRIVATE KEY'
    RSA_PUBLIC = 'PUBLIC KEY'

    @classmethod
    def from_tag(cls, tag: str) -> 'KeyKind | None':
        """Return the kind for a PEM tag, or None if unsupported."""
        try:
            return cls(tag)
        except ValueError:
            return None
