"""Exceptions raised by classical_cipher."""


class CipherError(Exception):
    """Base class for every error raised by the package."""


class InvalidKey(CipherError, ValueError):
    """The key is malformed or unusable for the requested cipher."""


class DispatchError(CipherError, RuntimeError):
    """A chunk failed inside the parallel dispatcher; no output is produced."""
