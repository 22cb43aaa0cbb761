"""Exceptions raised by the wallet package."""

from __future__ import annotations


class WalletError(Exception):
    """Base class for every error raised by this package."""


class InvalidDescriptorError(WalletError, ValueError):
    """A descriptor is malformed or does not belong to the expected wallet type."""

    def __init__(self, wallet_type: object | None = None, message: str | None = None) -> None:
        self.wallet_type = wallet_type
        if message is None:
            if wallet_type is None:
                message = "invalid descriptor"
            else:
                message = f"invalid {wallet_type} descriptor"
        super().__init__(message)


class InvalidSeedError(WalletError, ValueError):
    """A seed or extended seed has the wrong size or cannot be decoded."""


class MnemonicError(WalletError, ValueError):
    """A mnemonic cannot be converted to or from binary data."""


class WalletTypeError(WalletError, ValueError):
    """A wallet type byte is unknown or not the one that was expected."""