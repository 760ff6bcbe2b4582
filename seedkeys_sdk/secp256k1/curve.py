"""
secp256k1 group operations backed by libsecp256k1 (via coincurve).
"""
import logging
from dataclasses import dataclass, field

from coincurve import PublicKey

from seedkeys_sdk.exceptions import InvalidEncoding, KeyDerivationError
from seedkeys_sdk.secp256k1.ec_constants import (
    COMPRESSED_POINT_BYTES, COMPRESSED_POINT_PREFIXES, SCALAR_BYTES, SECP256K1_MIN, SECP256K1_N
)

logger = logging.getLogger(__name__)


def _scalar_bytes(k: int, order: int) -> bytes:
    if not SECP256K1_MIN <= k < order:
        raise ValueError(f"Scalar must lie in [{SECP256K1_MIN}, curve order)")
    return k.to_bytes(SCALAR_BYTES, byteorder="big")


def _base_point() -> PublicKey:
    return PublicKey.from_secret((1).to_bytes(SCALAR_BYTES, byteorder="big"))


@dataclass(frozen=True)
class Secp256k1Curve:
    """
    Immutable handle on the secp256k1 group.

    Points are ``coincurve.PublicKey`` values. The instance is safe to share
    between threads; nothing on it is ever mutated after construction.

    Attributes:
        order: Order of the base point's subgroup
        base_point: The standard generator G
    """
    order: int = SECP256K1_N
    base_point: PublicKey = field(default_factory=_base_point, compare=False)

    def multiply_base(self, k: int) -> PublicKey:
        """Return G * k."""
        return PublicKey.from_secret(_scalar_bytes(k, self.order))

    def multiply(self, point: PublicKey, k: int) -> PublicKey:
        """Return point * k."""
        return point.multiply(_scalar_bytes(k, self.order))

    def add(self, p: PublicKey, q: PublicKey) -> PublicKey:
        """
        Return p + q.

        Raises:
            KeyDerivationError: If the sum is the point at infinity
        """
        try:
            return PublicKey.combine_keys([p, q])
        except ValueError as e:
            raise KeyDerivationError("Point addition produced the point at infinity") from e

    def encode(self, point: PublicKey) -> bytes:
        """Return the 33-byte SEC1 compressed encoding of point."""
        return point.format(compressed=True)

    def decode(self, data: bytes) -> PublicKey:
        """
        Decode a SEC1 compressed point.

        Args:
            data: 33 bytes, prefix 0x02 or 0x03

        Returns:
            The decoded point

        Raises:
            InvalidEncoding: If data is not a compressed encoding of a point on the curve
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidEncoding(f"Expected bytes, got {type(data).__name__}")
        data = bytes(data)
        if len(data) != COMPRESSED_POINT_BYTES:
            raise InvalidEncoding(
                f"Compressed point must be {COMPRESSED_POINT_BYTES} bytes, got {len(data)}",
                length=len(data),
            )
        if data[0] not in COMPRESSED_POINT_PREFIXES:
            raise InvalidEncoding(
                f"Invalid compressed point prefix 0x{data[0]:02x}", length=len(data)
            )
        try:
            return PublicKey(data)
        except ValueError as e:
            logger.debug("Rejected point %s…", data.hex()[:6])
            raise InvalidEncoding("Bytes do not encode a point on secp256k1", length=len(data)) from e


# Process-wide curve, built once at import
SECP256K1 = Secp256k1Curve()
