"""The three-byte descriptor that identifies a wallet's signature scheme."""

from __future__ import annotations

from dataclasses import dataclass

from qrlwallet.errors import InvalidDescriptorError

DESCRIPTOR_SIZE = 3


@dataclass(frozen=True)
class Descriptor:
    """Byte 0 holds the wallet type; the remaining bytes are type-specific metadata."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != DESCRIPTOR_SIZE:
            raise InvalidDescriptorError(
                message=f"descriptor size should be {DESCRIPTOR_SIZE} bytes, got {len(self.data)}"
            )

    @classmethod
    def from_bytes(cls, data: bytes) -> Descriptor:
        """Build a descriptor from exactly three bytes."""
        return cls(bytes(data))

    def type(self) -> int:
        """Return the wallet type byte."""
        return self.data[0]

    def is_valid(self) -> bool:
        """Return whether the descriptor is usable; every well-sized descriptor is."""
        return True

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data


def get_descriptor_bytes(wallet_type: int, metadata: bytes) -> bytes:
    """Return descriptor bytes for a wallet type followed by two metadata bytes."""
    meta = bytes(metadata)
    if len(meta) != DESCRIPTOR_SIZE - 1:
        raise InvalidDescriptorError(
            message=f"descriptor metadata should be {DESCRIPTOR_SIZE - 1} bytes, got {len(meta)}"
        )
    return bytes([int(wallet_type)]) + meta