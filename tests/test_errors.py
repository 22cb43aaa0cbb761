import pytest

from qrlwallet.errors import (
    InvalidDescriptorError,
    InvalidSeedError,
    MnemonicError,
    WalletError,
    WalletTypeError,
)
from qrlwallet.wallettype import WalletType


def test_invalid_descriptor_default_message():
    assert str(InvalidDescriptorError()) == "invalid descriptor"


def test_invalid_descriptor_names_wallet_type():
    err = InvalidDescriptorError(WalletType.ML_DSA_87)
    assert str(err) == "invalid ML_DSA_87 descriptor"
    assert err.wallet_type is WalletType.ML_DSA_87


def test_invalid_descriptor_custom_message():
    err = InvalidDescriptorError(message="descriptor must be 3 bytes")
    assert str(err) == "descriptor must be 3 bytes"
    assert err.wallet_type is None


@pytest.mark.parametrize(
    "factory, expected",
    [
        (lambda: InvalidDescriptorError(WalletType.SPHINCSPLUS_256S), "invalid SPHINCSPLUS_256S descriptor"),
        (lambda: InvalidSeedError("bad seed"), "bad seed"),
        (lambda: MnemonicError("invalid word foo in mnemonic"), "invalid word foo in mnemonic"),
        (lambda: WalletTypeError("unknown wallet type: 9"), "unknown wallet type: 9"),
    ],
)
def test_errors_are_wallet_and_value_errors(factory, expected):
    err = factory()
    assert str(err) == expected
    assert isinstance(err, WalletError)
    assert isinstance(err, ValueError)


def test_seed_error_keeps_message():
    err = InvalidSeedError("invalid seed size 3, expected 48")
    assert str(err) == "invalid seed size 3, expected 48"
    assert err.args == ("invalid seed size 3, expected 48",)