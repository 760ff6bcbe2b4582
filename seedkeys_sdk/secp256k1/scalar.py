"""
Deterministic hash-to-scalar search.
"""
import logging
from typing import Optional

from seedkeys_sdk.exceptions import ExhaustedSearchSpace
from seedkeys_sdk.secp256k1.curve import SECP256K1, Secp256k1Curve
from seedkeys_sdk.secp256k1.ec_constants import UINT32_MAX
from seedkeys_sdk.secp256k1.hashing import Sha512

logger = logging.getLogger(__name__)

# Highest counter value tried before giving up (inclusive)
MAX_COUNTER = UINT32_MAX


def derive_scalar(
    data: bytes,
    discriminator: Optional[int] = None,
    *,
    curve: Secp256k1Curve = SECP256K1,
) -> int:
    """
    Hash data into a scalar in the open interval (0, curve order).

    Candidates are the first 256 bits of
    SHA-512(data || discriminator_be32 || counter_be32) for counter = 0, 1, ...
    and the first candidate inside the interval is returned. The
    discriminator is only mixed in when given, so ``discriminator=None``
    and ``discriminator=0`` yield unrelated scalars.

    Args:
        data: Bytes to hash
        discriminator: Optional u32 separating independent scalar streams
        curve: Curve whose order bounds the result

    Returns:
        Scalar as an int

    Raises:
        TypeError: If data is not bytes-like or discriminator is not an int
        ValueError: If discriminator does not fit in a u32
        ExhaustedSearchSpace: If every counter value up to MAX_COUNTER fails
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes, got {type(data).__name__}")
    if discriminator is not None and (isinstance(discriminator, bool) or not isinstance(discriminator, int)):
        raise TypeError(f"discriminator must be an int, got {type(discriminator).__name__}")
    if discriminator is not None and not 0 <= discriminator <= UINT32_MAX:
        raise ValueError(f"Discriminator {discriminator} does not fit in an unsigned 32-bit integer")

    order = curve.order
    for i in range(MAX_COUNTER + 1):
        hasher = Sha512().add(data)
        if discriminator is not None:
            hasher.add_u32(discriminator)
        candidate = hasher.add_u32(i).first256_int()
        if 0 < candidate < order:
            if i > 0:
                logger.debug("Scalar found after %d iterations", i + 1)
            return candidate

    logger.error(
        "No scalar below the curve order for %d-byte input (discriminator=%s)",
        len(data), discriminator
    )
    raise ExhaustedSearchSpace(
        f"No valid scalar found in {MAX_COUNTER + 1} attempts",
        data_length=len(data),
        discriminator=discriminator,
    )
