import pytest

from qrlwallet.address import unsafe_get_address
from qrlwallet.descriptor import Descriptor
from qrlwallet.errors import InvalidDescriptorError, WalletTypeError
from qrlwallet.ml_dsa_87 import MLDSA87Descriptor, get_ml_dsa_87_address
from qrlwallet.wallettype import WalletType


def test_new_descriptor_bytes():
    assert MLDSA87Descriptor.new().to_bytes() == bytes([WalletType.ML_DSA_87, 0, 0])


def test_new_descriptor_wallet_type():
    desc = MLDSA87Descriptor.new()
    assert desc.wallet_type() is WalletType.ML_DSA_87
    assert desc.is_valid() is True


def test_to_descriptor_round_trip():
    desc = MLDSA87Descriptor.new()
    generic = desc.to_descriptor()
    assert generic.type() == WalletType.ML_DSA_87
    assert MLDSA87Descriptor.from_descriptor(generic) == desc


def test_from_descriptor_rejects_other_type():
    with pytest.raises(InvalidDescriptorError, match="invalid ML_DSA_87 descriptor"):
        MLDSA87Descriptor.from_descriptor(Descriptor(bytes([WalletType.SPHINCSPLUS_256S, 0, 0])))


def test_from_descriptor_bytes_rejects_bad_size():
    with pytest.raises(InvalidDescriptorError):
        MLDSA87Descriptor.from_descriptor_bytes(b"\x01\x00")


def test_metadata_is_kept():
    desc = MLDSA87Descriptor.from_descriptor_bytes(b"\x01\x05\x06")
    assert desc.to_bytes() == b"\x01\x05\x06"


def test_mismatched_type_is_not_valid():
    desc = MLDSA87Descriptor(bytes([WalletType.SPHINCSPLUS_256S, 0, 0]))
    assert desc.is_valid() is False
    with pytest.raises(WalletTypeError, match="wallet type mismatch"):
        desc.wallet_type()


def test_unknown_type_raises():
    desc = MLDSA87Descriptor(b"\x09\x00\x00")
    assert desc.is_valid() is False
    with pytest.raises(WalletTypeError, match="unknown wallet type: 9"):
        desc.wallet_type()


def test_address_matches_generic_derivation():
    pk = b"\x33" * 48
    desc = MLDSA87Descriptor.new()
    assert get_ml_dsa_87_address(pk, desc) == unsafe_get_address(pk, desc.to_descriptor())
    assert len(get_ml_dsa_87_address(pk, desc)) == 24


def test_address_rejects_invalid_descriptor():
    with pytest.raises(InvalidDescriptorError, match="invalid ML_DSA_87 descriptor"):
        get_ml_dsa_87_address(b"\x33" * 48, MLDSA87Descriptor(b"\x00\x00\x00"))