"""
Pytest fixtures for the SeedKeys SDK tests.
"""
import dataclasses

import pytest

from seedkeys_sdk.secp256k1 import SECP256K1, derive_scalar

# First 16 bytes of SHA-512("masterpassphrase")
MASTER_SEED = bytes.fromhex("DEDCE9CE67B451D852FD4E846FCDE31C")
MASTER_ACCOUNT_PUBLIC_KEY = "0330E7FC9D56BB25D6893BA3F317AE5BCF33B3291BD63DB32654A313222F7FD020"

ZERO_SEED = b"\x00" * 16

SAMPLE_SEEDS = [
    ZERO_SEED,
    MASTER_SEED,
    b"",
    b"\x01",
    b"\xff" * 16,
    bytes(range(32)),
]


@pytest.fixture
def zero_seed():
    return ZERO_SEED


@pytest.fixture
def master_seed():
    return MASTER_SEED


@pytest.fixture
def public_generator():
    """Compressed public generator for the zero seed"""
    private_gen = derive_scalar(ZERO_SEED)
    return SECP256K1.encode(SECP256K1.multiply_base(private_gen))


@pytest.fixture
def small_order_curve():
    """Curve whose order rejects roughly 63 of every 64 candidates"""
    return dataclasses.replace(SECP256K1, order=2 ** 250)
