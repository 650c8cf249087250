#!/usr/bin/python

""""
pemsign.lib

The library of pemsign.
"""

__all__ = [
    'exceptions',
    'keys',
    'pem',
    'signature'
]
