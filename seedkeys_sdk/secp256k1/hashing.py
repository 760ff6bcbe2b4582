"""
SHA-512 helper used to turn arbitrary bytes into candidate scalars.
"""
import hashlib
import struct

from seedkeys_sdk.secp256k1.ec_constants import SCALAR_BYTES, UINT32_MAX


class Sha512:
    """
    Streaming SHA-512 accumulator.

    Bytes and 32-bit big-endian integers can be mixed in any order; only the
    first 256 bits of the final digest are consumed by the scalar search.
    """

    def __init__(self):
        self._hash = hashlib.sha512()

    def add(self, data: bytes) -> "Sha512":
        """
        Append raw bytes.

        Args:
            data: Bytes-like input

        Returns:
            The same accumulator, for chaining
        """
        self._hash.update(data)
        return self

    def add_u32(self, value: int) -> "Sha512":
        """
        Append an unsigned 32-bit integer in big-endian order.

        Raises:
            ValueError: If value is outside [0, 0xFFFFFFFF]
        """
        if not 0 <= value <= UINT32_MAX:
            raise ValueError(f"Value {value} does not fit in an unsigned 32-bit integer")
        self._hash.update(struct.pack(">I", value))
        return self

    def finish(self) -> bytes:
        return self._hash.digest()

    def first256(self) -> bytes:
        return self.finish()[:SCALAR_BYTES]

    def first256_int(self) -> int:
        return int.from_bytes(self.first256(), byteorder="big")
