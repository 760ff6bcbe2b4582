"""
secp256k1 key derivation for the SeedKeys SDK.

This module turns a seed into deterministic secp256k1 key material:
a root (validator) key, any number of account keys, and the account 0
public key rebuilt from public data alone.
"""
from seedkeys_sdk.secp256k1.ec_constants import SECP256K1_N
from seedkeys_sdk.secp256k1.curve import SECP256K1, Secp256k1Curve
from seedkeys_sdk.secp256k1.hashing import Sha512
from seedkeys_sdk.secp256k1.scalar import MAX_COUNTER, derive_scalar
from seedkeys_sdk.secp256k1.derivation import (
    derive_private_key, account_public_from_public_generator,
    derive_public_key, derive_keypair
)

__all__ = [
    'derive_scalar',
    'derive_private_key',
    'account_public_from_public_generator',
    'derive_public_key',
    'derive_keypair',
    'Sha512',
    'Secp256k1Curve',
    'SECP256K1',
    'SECP256K1_N',
    'MAX_COUNTER',
]
