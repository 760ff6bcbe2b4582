"""
Tests for the SHA-512 accumulator.
"""
import hashlib
import struct

import pytest

from seedkeys_sdk.secp256k1.hashing import Sha512


def test_add_matches_hashlib():
    assert Sha512().add(b"abc").finish() == hashlib.sha512(b"abc").digest()


def test_add_is_chainable_and_streaming():
    streamed = Sha512().add(b"ab").add(b"c").finish()
    assert streamed == hashlib.sha512(b"abc").digest()


def test_add_u32_is_big_endian():
    digest = Sha512().add(b"seed").add_u32(0x01020304).finish()
    assert digest == hashlib.sha512(b"seed\x01\x02\x03\x04").digest()


@pytest.mark.parametrize("value", [0, 1, 0xFFFFFFFF])
def test_add_u32_accepts_full_range(value):
    digest = Sha512().add_u32(value).finish()
    assert digest == hashlib.sha512(struct.pack(">I", value)).digest()


@pytest.mark.parametrize("value", [-1, 0x100000000])
def test_add_u32_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        Sha512().add_u32(value)


def test_first256_is_first_half_of_digest():
    full = hashlib.sha512(b"xyz").digest()
    hasher = Sha512().add(b"xyz")
    assert hasher.first256() == full[:32]
    assert hasher.first256_int() == int.from_bytes(full[:32], "big")


def test_masterpassphrase_seed():
    assert Sha512().add(b"masterpassphrase").first256()[:16].hex().upper() == "DEDCE9CE67B451D852FD4E846FCDE31C"
