"""Descriptor and address helpers for SPHINCS+-256s wallets."""

from __future__ import annotations

from dataclasses import dataclass

from qrlwallet.address import unsafe_get_address
from qrlwallet.descriptor import DESCRIPTOR_SIZE, Descriptor, get_descriptor_bytes
from qrlwallet.errors import InvalidDescriptorError, WalletTypeError
from qrlwallet.wallettype import WalletType, to_wallet_type_of


@dataclass(frozen=True)
class SphincsPlus256sDescriptor:
    """A descriptor whose wallet type byte must be SPHINCSPLUS_256S."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != DESCRIPTOR_SIZE:
            raise InvalidDescriptorError(
                message=f"descriptor size should be {DESCRIPTOR_SIZE} bytes, got {len(self.data)}"
            )

    @classmethod
    def new(cls) -> SphincsPlus256sDescriptor:
        """Return the default SPHINCS+-256s descriptor with empty metadata."""
        return cls.from_descriptor_bytes(
            get_descriptor_bytes(WalletType.SPHINCSPLUS_256S, b"\x00\x00")
        )

    @classmethod
    def from_descriptor(cls, descriptor: Descriptor) -> SphincsPlus256sDescriptor:
        """Wrap a generic descriptor, requiring it to be of the SPHINCS+-256s type."""
        candidate = cls(descriptor.to_bytes())
        if not candidate.is_valid():
            raise InvalidDescriptorError(WalletType.SPHINCSPLUS_256S)
        return candidate

    @classmethod
    def from_descriptor_bytes(cls, data: bytes) -> SphincsPlus256sDescriptor:
        """Build from three raw descriptor bytes."""
        return cls.from_descriptor(Descriptor.from_bytes(data))

    def wallet_type(self) -> WalletType:
        """Return the wallet type; raise WalletTypeError if it is not SPHINCSPLUS_256S."""
        return to_wallet_type_of(self.data[0], WalletType.SPHINCSPLUS_256S)

    def is_valid(self) -> bool:
        try:
            return self.wallet_type() == WalletType.SPHINCSPLUS_256S
        except WalletTypeError:
            return False

    def to_descriptor(self) -> Descriptor:
        return Descriptor(self.data)

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data


def get_sphincsplus_256s_address(pk: bytes, descriptor: SphincsPlus256sDescriptor) -> bytes:
    """Derive the address of a SPHINCS+-256s public key."""
    if not descriptor.is_valid():
        raise InvalidDescriptorError(WalletType.SPHINCSPLUS_256S)
    return unsafe_get_address(pk, descriptor.to_descriptor())