"""
Data models for the SeedKeys SDK.
"""
from pydantic import BaseModel, ConfigDict, Field

from seedkeys_sdk.secp256k1.ec_constants import SCALAR_BYTES, UINT32_MAX


class DerivationOptions(BaseModel):
    """Options selecting which key is derived from a seed"""
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    validator: bool = Field(False, strict=True)
    account_index: int = Field(0, alias="accountIndex", ge=0, le=UINT32_MAX, strict=True)


class KeyPair(BaseModel):
    """secp256k1 key pair derived from a seed"""
    model_config = ConfigDict(frozen=True)

    private_key: int = Field(repr=False)
    public_key: bytes

    @property
    def private_key_hex(self) -> str:
        """Private scalar as 33 bytes of uppercase hex with a leading 00 byte"""
        return "00" + self.private_key.to_bytes(SCALAR_BYTES, byteorder="big").hex().upper()

    @property
    def public_key_hex(self) -> str:
        return self.public_key.hex().upper()
