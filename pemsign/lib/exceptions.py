#!/usr/bin/python

""""
pemsign.lib.exceptions
===============

Errors
"""


class ErrorMetaclass(type):
    """Error Metaclass"""

    def __new__(cls, name, base=Exception, attrs=None):
        attrs = dict(attrs or {})

        def init(self, msg=None):
            base.__init__(self, msg)
            self.msg = msg
        attrs['__init__'] = init
        attrs['__str__'] = lambda self: str(self.msg)
        return type.__new__(cls, name, (base,), attrs)

    def __init__(cls, name, base=Exception, attrs=None):
        super().__init__(name, (base,), attrs or {})


class KeyFormatError(ValueError):
    """Unusable key material."""


class UnsupportedKeyType(KeyFormatError):
    """Key of an unsupported type or algorithm."""

    def __init__(self, key_type: str):
        super().__init__(f'unsupported key type {key_type!r}')
        self.key_type = key_type


NoKeyFound = ErrorMetaclass('NoKeyFound', KeyFormatError)
MalformedKey = ErrorMetaclass('MalformedKey', KeyFormatError)
SigningError = ErrorMetaclass('SigningError', ValueError)
VerificationError = ErrorMetaclass('VerificationError', ValueError)
