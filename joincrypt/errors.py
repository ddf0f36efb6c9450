"""Exception types raised by the cryptographic primitives."""


class CryptoError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(CryptoError, ValueError):
    """An argument was malformed, out of range or otherwise unusable."""


class InternalError(CryptoError, RuntimeError):
    """A cryptographic operation failed unexpectedly."""