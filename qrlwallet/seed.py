"""Wallet seeds and extended seeds (descriptor followed by seed)."""

from __future__ import annotations

import binascii
from dataclasses import dataclass

from qrlwallet.descriptor import DESCRIPTOR_SIZE, Descriptor
from qrlwallet.errors import InvalidDescriptorError, InvalidSeedError
from qrlwallet.hashing import sha256, shake256

ADDRESS_SIZE = 24
SEED_SIZE = 48
EXTENDED_SEED_SIZE = DESCRIPTOR_SIZE + SEED_SIZE


def _unhex(text: str) -> bytes:
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as exc:
        raise InvalidSeedError(f"hex decode failed: {exc}") from None


@dataclass(frozen=True)
class Seed:
    """A 48-byte wallet seed."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != SEED_SIZE:
            raise InvalidSeedError(f"invalid seed size {len(self.data)}, expected {SEED_SIZE}")

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data

    def hash_sha256(self) -> bytes:
        """Return the SHA-256 digest of the seed."""
        return sha256(self.data)

    def hash_shake256(self, size: int) -> bytes:
        """Return ``size`` bytes of SHAKE256 output for the seed."""
        return shake256(self.data, size)


def to_seed(seed_bytes: bytes) -> Seed:
    """Build a Seed, raising InvalidSeedError unless given exactly 48 bytes."""
    return Seed(bytes(seed_bytes))


def hex_str_to_seed(hex_str: str) -> Seed:
    """Decode a hex seed, with or without a leading ``0x``."""
    if hex_str.startswith("0x"):
        hex_str = hex_str[2:]
    return to_seed(_unhex(hex_str))


@dataclass(frozen=True)
class ExtendedSeed:
    """A 51-byte extended seed: a 3-byte descriptor followed by a 48-byte seed."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != EXTENDED_SEED_SIZE:
            raise InvalidSeedError("invalid length of extendedSeedBytes")

    @classmethod
    def create(cls, descriptor: Descriptor, seed: Seed) -> ExtendedSeed:
        """Join a descriptor and a seed."""
        if not descriptor.is_valid():
            raise InvalidDescriptorError()
        desc_bytes = descriptor.to_bytes()
        seed_bytes = seed.to_bytes()
        if len(desc_bytes) + len(seed_bytes) != EXTENDED_SEED_SIZE:
            raise InvalidSeedError("invalid length of descriptor bytes and seed")
        return cls(desc_bytes + seed_bytes)

    @classmethod
    def from_bytes(cls, data: bytes) -> ExtendedSeed:
        """Parse 51 raw bytes into an extended seed."""
        raw = bytes(data)
        if len(raw) != EXTENDED_SEED_SIZE:
            raise InvalidSeedError("invalid length of extendedSeedBytes")
        descriptor = Descriptor.from_bytes(raw[:DESCRIPTOR_SIZE])
        seed = to_seed(raw[DESCRIPTOR_SIZE:])
        return cls.create(descriptor, seed)

    @classmethod
    def from_hex(cls, text: str) -> ExtendedSeed:
        """Parse a 102-character hex string into an extended seed."""
        if len(text) != 2 * EXTENDED_SEED_SIZE:
            raise InvalidSeedError("invalid length of extendedSeedStr")
        return cls.from_bytes(_unhex(text))

    def descriptor_bytes(self) -> bytes:
        return self.data[:DESCRIPTOR_SIZE]

    def seed_bytes(self) -> bytes:
        return self.data[DESCRIPTOR_SIZE:]

    def seed(self) -> Seed:
        return to_seed(self.seed_bytes())

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data