"""
Seed to key derivation for secp256k1 accounts.

A seed maps to a root "private generator" scalar. Validator keys use that
scalar as is; account keys add a per-account offset derived from the
compressed public generator and the account index.
"""
import logging
from typing import Any, Dict, Optional, Union

from seedkeys_sdk.models import DerivationOptions, KeyPair
from seedkeys_sdk.secp256k1.curve import SECP256K1, Secp256k1Curve
from seedkeys_sdk.secp256k1.scalar import derive_scalar

logger = logging.getLogger(__name__)

OptionsLike = Union[DerivationOptions, Dict[str, Any], None]


def _coerce_options(options: OptionsLike) -> DerivationOptions:
    if options is None:
        return DerivationOptions()
    if isinstance(options, DerivationOptions):
        return options
    if isinstance(options, dict):
        return DerivationOptions.model_validate(options)
    raise TypeError(f"options must be DerivationOptions or dict, got {type(options).__name__}")


def derive_private_key(
    seed: bytes,
    options: OptionsLike = None,
    *,
    curve: Secp256k1Curve = SECP256K1,
) -> int:
    """
    Derive the private scalar for a seed.

    Args:
        seed: Seed bytes
        options: DerivationOptions, an equivalent dict, or None for defaults
        curve: Curve to derive on

    Returns:
        Private scalar in (0, curve order)

    Raises:
        TypeError: If seed or options have the wrong type
        pydantic.ValidationError: If a dict of options is invalid
        ExhaustedSearchSpace: If no scalar could be derived
    """
    opts = _coerce_options(options)

    # Root key, as used by validators
    private_gen = derive_scalar(seed, curve=curve)
    if opts.validator:
        logger.debug("Derived validator root key")
        return private_gen

    public_gen = curve.encode(curve.multiply_base(private_gen))
    offset = derive_scalar(public_gen, opts.account_index, curve=curve)
    logger.debug(
        "Derived account %d key from public generator %s…",
        opts.account_index, public_gen.hex()[:6]
    )
    return (offset + private_gen) % curve.order


def account_public_from_public_generator(
    public_gen_bytes: bytes,
    *,
    curve: Secp256k1Curve = SECP256K1,
) -> bytes:
    """
    Rebuild the account 0 public key from a compressed public generator.

    Only the default account is reachable here: the offset is always derived
    with discriminator 0.

    Args:
        public_gen_bytes: Compressed public generator point
        curve: Curve to derive on

    Returns:
        Compressed account public key

    Raises:
        InvalidEncoding: If public_gen_bytes is not a valid compressed point
        KeyDerivationError: If the account point is the point at infinity
    """
    root_pub_point = curve.decode(public_gen_bytes)
    scalar = derive_scalar(public_gen_bytes, 0, curve=curve)
    point = curve.multiply_base(scalar)
    offset = curve.add(root_pub_point, point)
    encoded = curve.encode(offset)
    logger.debug(
        "Reconstructed account public key %s… from generator %s…",
        encoded.hex()[:6], bytes(public_gen_bytes).hex()[:6]
    )
    return encoded


def derive_public_key(private_key: int, *, curve: Secp256k1Curve = SECP256K1) -> bytes:
    """Return the compressed public key for a private scalar."""
    return curve.encode(curve.multiply_base(private_key))


def derive_keypair(
    seed: bytes,
    options: OptionsLike = None,
    *,
    curve: Secp256k1Curve = SECP256K1,
) -> KeyPair:
    """
    Derive a private/public key pair for a seed.

    Args:
        seed: Seed bytes
        options: DerivationOptions, an equivalent dict, or None for defaults
        curve: Curve to derive on

    Returns:
        KeyPair holding the private scalar and compressed public key
    """
    private_key = derive_private_key(seed, options, curve=curve)
    return KeyPair(
        private_key=private_key,
        public_key=derive_public_key(private_key, curve=curve),
    )
