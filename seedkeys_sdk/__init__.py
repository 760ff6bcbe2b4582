"""
SeedKeys SDK - deterministic secp256k1 keys from a seed.
"""
from .version import __version__
from .secp256k1 import (
    derive_scalar, derive_private_key, account_public_from_public_generator,
    derive_public_key, derive_keypair, Secp256k1Curve, SECP256K1
)
from .models import DerivationOptions, KeyPair
from .exceptions import SeedKeysError, KeyDerivationError, ExhaustedSearchSpace, InvalidEncoding

__all__ = [
    "derive_scalar",
    "derive_private_key",
    "account_public_from_public_generator",
    "derive_public_key",
    "derive_keypair",
    "Secp256k1Curve",
    "SECP256K1",
    "DerivationOptions",
    "KeyPair",
    "SeedKeysError",
    "KeyDerivationError",
    "ExhaustedSearchSpace",
    "InvalidEncoding",
    "__version__",
]
