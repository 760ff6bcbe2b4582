"""
Exceptions for the SeedKeys SDK.
"""
from typing import Optional


class SeedKeysError(Exception):
    """Base exception for all SeedKeys SDK errors."""
    pass


class KeyDerivationError(SeedKeysError):
    """Raised when a derivation step produces unusable key material."""
    pass


class ExhaustedSearchSpace(KeyDerivationError):
    """
    Raised when no scalar below the curve order was found for any counter
    value. Treat as fatal: it points at a broken hash or broken curve
    parameters, not at bad input.
    """

    def __init__(self, message: str, data_length: int, discriminator: Optional[int] = None):
        self.data_length = data_length
        self.discriminator = discriminator
        super().__init__(message)


class InvalidEncoding(SeedKeysError, ValueError):
    """Raised when bytes do not decode to a valid secp256k1 point."""

    def __init__(self, message: str, length: Optional[int] = None):
        self.length = length
        super().__init__(message)
