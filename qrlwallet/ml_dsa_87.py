"""Descriptor and address helpers for ML-DSA-87 wallets."""

from __future__ import annotations

from dataclasses import dataclass

from qrlwallet.address import unsafe_get_address
from qrlwallet.descriptor import DESCRIPTOR_SIZE, Descriptor, get_descriptor_bytes
from qrlwallet.errors import InvalidDescriptorError, WalletTypeError
from qrlwallet.wallettype import WalletType, to_wallet_type_of


@dataclass(frozen=True)
class MLDSA87Descriptor:
    """A descriptor whose wallet type byte must be ML_DSA_87."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != DESCRIPTOR_SIZE:
            raise InvalidDescriptorError(
                message=f"descriptor size should be {DESCRIPTOR_SIZE} bytes, got {len(self.data)}"
            )

    @classmethod
    def new(cls) -> MLDSA87Descriptor:
        """Return the default ML-DSA-87 descriptor with empty metadata."""
        return cls.from_descriptor_bytes(get_descriptor_bytes(WalletType.ML_DSA_87, b"\x00\x00"))

    @classmethod
    def from_descriptor(cls, descriptor: Descriptor) -> MLDSA87Descriptor:
        """Wrap a generic descriptor, requiring it to be of the ML-DSA-87 type."""
        candidate = cls(descriptor.to_bytes())
        if not candidate.is_valid():
            raise InvalidDescriptorError(WalletType.ML_DSA_87)
        return candidate

    @classmethod
    def from_descriptor_bytes(cls, data: bytes) -> MLDSA87Descriptor:
        """Build from three raw descriptor bytes."""
        return cls.from_descriptor(Descriptor.from_bytes(data))

    def wallet_type(self) -> WalletType:
        """Return the wallet type; raise WalletTypeError if it is not ML_DSA_87."""
        return to_wallet_type_of(self.data[0], WalletType.ML_DSA_87)

    def is_valid(self) -> bool:
        try:
            return self.wallet_type() == WalletType.ML_DSA_87
        except WalletTypeError:
            return False

    def to_descriptor(self) -> Descriptor:
        return Descriptor(self.data)

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data


def get_ml_dsa_87_address(pk: bytes, descriptor: MLDSA87Descriptor) -> bytes:
    """Derive the address of an ML-DSA-87 public key."""
    if not descriptor.is_valid():
        raise InvalidDescriptorError(WalletType.ML_DSA_87)
    return unsafe_get_address(pk, descriptor.to_descriptor())