""""
pemsign.lib.pem

PEM block support for pemsign.

Example

>>> block = decode(b'-----BEGIN PUBLIC KEY-----\\nAAEC\\n-----END PUBLIC KEY-----\\n')
>>> block.tag, block.data
('PUBLIC KEY', b'\\x00\\x01\\x02')
>>> encode(block)
b'-----BEGIN PUBLIC KEY-----\\nAAEC\\n-----END PUBLIC KEY-----\\n'

"""

import binascii
import re
from base64 import b64decode, b64encode
from collections import namedtuple
from ..constants import ENCODING, PEM_LINE_LENGTH

_BLOCK = re.compile(
    rb'^-----BEGIN (?P<tag>[ -~]*?)-----[ \t]*\r?\n'
    rb'(?P<body>(?:.*?\n)?)'
    rb'-----END (?P=tag)-----[ \t]*\r?$',
    re.DOTALL | re.MULTILINE
)


class PemBlock(namedtuple('PemBlock', ['tag', 'data', 'headers'])):

    __slots__ = ()

    def __new__(cls, tag: str, data: bytes, headers: dict | None = None):
        return super(PemBlock, cls).__new__(cls, tag, bytes(data),
                                            dict(headers or {}))


PemBlock.tag.__doc__ = """Type label of the block."""
PemBlock.headers.__doc__ = """Headers preceding the body."""
PemBlock.data.__doc__ = """Decoded payload."""


def _parse_body(body: bytes) -> tuple[dict, bytes]:
    """Split header lines from the base64 body and decode it.

    Raises binascii.Error if the body is not valid base64.
    """
    lines = body.splitlines()
    headers = {}
    while lines and b':' in lines[0]:
        key, _, value = lines.pop(0).partition(b':')
        headers[key.strip().decode(ENCODING)] = value.strip().decode(ENCODING)
    data = b64decode(b''.join(b''.join(lines).split()), validate=True)
    return headers, data


def decode(pem_bytes: bytes | str) -> PemBlock | None:
    """Return the first valid PEM block in the input.

    Text before the block is skipped, and so is any candidate block
    that fails to decode. Return None if no block is found.
    Headers are informational only; nothing here decrypts the body.
    """
    if isinstance(pem_bytes, str):
        pem_bytes = pem_bytes.encode(ENCODING, 'replace')
    pem_bytes = bytes(pem_bytes)
    pos = 0
    while match := _BLOCK.search(pem_bytes, pos):
        try:
            headers, data = _parse_body(match['body'])
        except (binascii.Error, UnicodeDecodeError):
            # Rescan from just after the failed BEGIN line
            pos = match.end('tag')
            continue
        return PemBlock(match['tag'].decode(ENCODING), data, headers)
    return None


def encode(block: PemBlock) -> bytes:
    """Dump a PEM block to bytes."""
    tag = block.tag.encode(ENCODING)
    out = [b'-----BEGIN ' + tag + b'-----\n']
    if block.headers:
        for key, value in block.headers.items():
            out.append(f'{key}: {value}\n'.encode(ENCODING))
        out.append(b'\n')
    body = b64encode(block.data)
    for i in range(0, len(body), PEM_LINE_LENGTH):
        out.append(body[i:i + PEM_LINE_LENGTH] + b'\n')
    out.append(b'-----END ' + tag + b'-----\n')
    return b''.join(out)
