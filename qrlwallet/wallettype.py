"""Wallet type identifiers for current and legacy wallets."""

from __future__ import annotations

from enum import IntEnum

from qrlwallet.errors import WalletTypeError


class WalletType(IntEnum):
    """Signature scheme carried in the first descriptor byte."""

    SPHINCSPLUS_256S = 0
    ML_DSA_87 = 1

    def is_valid(self) -> bool:
        """Return True if this is a known wallet type."""
        return self in type(self).__members__.values()

    def __str__(self) -> str:
        return self.name


class LegacyWalletType(IntEnum):
    """Wallet types of legacy XMSS wallets, kept apart from the current ones."""

    XMSS = 0

    def is_valid(self) -> bool:
        """Return True if this is a known legacy wallet type."""
        return self in type(self).__members__.values()

    def __str__(self) -> str:
        return self.name


def to_wallet_type(val: int) -> WalletType:
    """Convert a byte to a WalletType; raise WalletTypeError if unknown."""
    try:
        return WalletType(val)
    except ValueError:
        raise WalletTypeError(f"unknown wallet type: {val}") from None


def to_wallet_type_of(val: int, wallet_type: WalletType) -> WalletType:
    """Convert a byte to a WalletType and require it to equal ``wallet_type``."""
    found = to_wallet_type(val)
    if found != wallet_type:
        raise WalletTypeError(
            f"wallet type mismatch. expected: {WalletType(wallet_type)}, found: {found}"
        )
    return found


def to_legacy_wallet_type(val: int) -> LegacyWalletType:
    """Convert a nibble to a LegacyWalletType; raise WalletTypeError if unknown."""
    try:
        return LegacyWalletType(val)
    except ValueError:
        raise WalletTypeError(f"unknown wallet type: {val}") from None