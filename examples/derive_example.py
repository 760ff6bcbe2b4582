#!/usr/bin/env python3
"""
Simple example of deriving keys with the SeedKeys SDK.
"""
import os

from seedkeys_sdk import (
    DerivationOptions, SECP256K1, account_public_from_public_generator,
    derive_keypair, derive_scalar
)


def main():
    """
    Demonstrate basic usage of the SDK.

    This example shows how to:
    1. Derive the validator (root) key pair for a seed
    2. Derive a few account key pairs
    3. Rebuild the account 0 public key from the public generator
    """
    # Read the seed from environment, hex encoded
    seed_hex = os.environ.get("SEED_HEX", "DEDCE9CE67B451D852FD4E846FCDE31C")
    seed = bytes.fromhex(seed_hex)

    root = derive_keypair(seed, DerivationOptions(validator=True))
    print(f"Validator public key: {root.public_key_hex}")

    for account_index in range(3):
        pair = derive_keypair(seed, DerivationOptions(account_index=account_index))
        print(f"Account {account_index} public key: {pair.public_key_hex}")

    # Anyone holding the public generator can compute the account 0 public key
    public_gen = SECP256K1.encode(SECP256K1.multiply_base(derive_scalar(seed)))
    rebuilt = account_public_from_public_generator(public_gen)
    print(f"Account 0 public key from generator: {rebuilt.hex().upper()}")


if __name__ == "__main__":
    main()
