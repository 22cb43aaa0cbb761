import pytest

from qrlwallet.errors import WalletTypeError
from qrlwallet.wallettype import (
    LegacyWalletType,
    WalletType,
    to_legacy_wallet_type,
    to_wallet_type,
    to_wallet_type_of,
)


def test_to_wallet_type_known_values():
    assert to_wallet_type(0) is WalletType.SPHINCSPLUS_256S
    assert to_wallet_type(1) is WalletType.ML_DSA_87


@pytest.mark.parametrize("val", [2, 7, 255])
def test_to_wallet_type_unknown(val):
    with pytest.raises(WalletTypeError, match=f"unknown wallet type: {val}"):
        to_wallet_type(val)


@pytest.mark.parametrize("val, name", [(0, "SPHINCSPLUS_256S"), (1, "ML_DSA_87")])
def test_string_names(val, name):
    assert str(to_wallet_type(val)) == name


@pytest.mark.parametrize("val", [0, 1])
def test_converted_members_valid(val):
    assert to_wallet_type(val).is_valid() is True


def test_converted_legacy_member_valid():
    assert to_legacy_wallet_type(0).is_valid() is True


def test_to_wallet_type_of_match():
    assert to_wallet_type_of(1, WalletType.ML_DSA_87) is WalletType.ML_DSA_87


def test_to_wallet_type_of_mismatch():
    with pytest.raises(
        WalletTypeError,
        match="wallet type mismatch. expected: ML_DSA_87, found: SPHINCSPLUS_256S",
    ):
        to_wallet_type_of(0, WalletType.ML_DSA_87)


def test_to_wallet_type_of_unknown():
    with pytest.raises(WalletTypeError, match="unknown wallet type"):
        to_wallet_type_of(9, WalletType.SPHINCSPLUS_256S)


def test_legacy_wallet_type():
    assert to_legacy_wallet_type(0) is LegacyWalletType.XMSS
    with pytest.raises(WalletTypeError, match="unknown wallet type: 1"):
        to_legacy_wallet_type(1)