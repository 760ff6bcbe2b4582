"""
Constants for the secp256k1 elliptic curve.
"""

# Order of the secp256k1 base point (N value)
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# Smallest usable private scalar
SECP256K1_MIN = 1

SCALAR_BYTES = 32

# SEC1 compressed form: one parity byte followed by the x coordinate
COMPRESSED_POINT_BYTES = 33
COMPRESSED_POINT_PREFIXES = (0x02, 0x03)

UINT32_MAX = 0xFFFFFFFF
