"""
Tests for the SDK data models.
"""
import pytest
from pydantic import ValidationError

from seedkeys_sdk.models import DerivationOptions, KeyPair


def test_options_defaults():
    options = DerivationOptions()
    assert options.validator is False
    assert options.account_index == 0


def test_options_alias():
    assert DerivationOptions(accountIndex=12).account_index == 12
    assert DerivationOptions.model_validate({"accountIndex": 12}) == DerivationOptions(account_index=12)


@pytest.mark.parametrize("account_index", [0, 1, 0xFFFFFFFF])
def test_options_account_index_range(account_index):
    assert DerivationOptions(account_index=account_index).account_index == account_index


@pytest.mark.parametrize("account_index", [-1, 0x100000000])
def test_options_account_index_out_of_range(account_index):
    with pytest.raises(ValidationError):
        DerivationOptions(account_index=account_index)


def test_options_are_frozen():
    options = DerivationOptions()
    with pytest.raises(ValidationError):
        options.account_index = 4


def test_options_reject_unknown_fields():
    with pytest.raises(ValidationError):
        DerivationOptions(account=1)


def test_options_validation_error_is_value_error():
    with pytest.raises(ValueError):
        DerivationOptions(account_index=-5)


def test_keypair_hex():
    pair = KeyPair(private_key=1, public_key=bytes.fromhex("02" + "ab" * 32))
    assert pair.private_key_hex == "00" + "00" * 31 + "01"
    assert pair.public_key_hex == "02" + "AB" * 32


@pytest.mark.parametrize("account_index", [True, False, "7", 7.0])
def test_options_account_index_must_be_int(account_index):
    with pytest.raises(ValidationError):
        DerivationOptions(account_index=account_index)


@pytest.mark.parametrize("validator", [1, "true", None])
def test_options_validator_must_be_bool(validator):
    with pytest.raises(ValidationError):
        DerivationOptions(validator=validator)
