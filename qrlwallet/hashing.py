"""Hash helpers and the 8-word hash address used by hash-based signatures."""

from __future__ import annotations

import hashlib
import sys
from typing import Iterable

_UINT32_MASK = 0xFFFFFFFF
_ADDRESS_WORDS = 8


def shake128(msg: bytes, size: int) -> bytes:
    """Return ``size`` bytes of SHAKE128 output for ``msg``."""
    return hashlib.shake_128(bytes(msg)).digest(size)


def shake256(msg: bytes, size: int) -> bytes:
    """Return ``size`` bytes of SHAKE256 output for ``msg``."""
    return hashlib.shake_256(bytes(msg)).digest(size)


def sha256(msg: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``msg``."""
    return hashlib.sha256(bytes(msg)).digest()


def _low_bytes(value: int, size: int) -> int:
    return (value & _UINT32_MASK) & ((1 << (8 * size)) - 1)


def to_byte_little_endian(value: int, size: int) -> bytes:
    """Encode the low ``size`` bytes of a 32-bit value most significant byte first.

    This is the encoding used for hash addresses on little-endian hosts.
    """
    return _low_bytes(value, size).to_bytes(size, "big")


def to_byte_big_endian(value: int, size: int) -> bytes:
    """Encode the low ``size`` bytes of a 32-bit value least significant byte first.

    This is the encoding used for hash addresses on big-endian hosts.
    """
    return _low_bytes(value, size).to_bytes(size, "little")


class HashAddress:
    """Eight 32-bit words addressing one hash call inside a hash-based signature tree."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[int] | None = None) -> None:
        values = [0] * _ADDRESS_WORDS if words is None else [w & _UINT32_MASK for w in words]
        if len(values) != _ADDRESS_WORDS:
            raise ValueError(f"hash address needs {_ADDRESS_WORDS} words, got {len(values)}")
        self._words = values

    @property
    def words(self) -> tuple[int, ...]:
        """The eight address words."""
        return tuple(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashAddress):
            return NotImplemented
        return self._words == other._words

    def __repr__(self) -> str:
        return f"HashAddress({self._words!r})"

    def _set(self, index: int, value: int) -> None:
        self._words[index] = value & _UINT32_MASK

    def set_type(self, type_value: int) -> None:
        """Set the address type and clear every word after it."""
        self._set(3, type_value)
        self._words[4:] = [0] * (_ADDRESS_WORDS - 4)

    def set_ots_addr(self, ots: int) -> None:
        self._set(4, ots)

    def set_chain_addr(self, chain: int) -> None:
        self._set(5, chain)

    def set_hash_addr(self, hash_value: int) -> None:
        self._set(6, hash_value)

    def set_ltree_addr(self, ltree: int) -> None:
        self._set(4, ltree)

    def set_tree_height(self, tree_height: int) -> None:
        self._set(5, tree_height)

    def set_tree_index(self, tree_index: int) -> None:
        self._set(6, tree_index)

    def set_key_and_mask(self, key_and_mask: int) -> None:
        self._set(7, key_and_mask)

    def to_bytes(self) -> bytes:
        """Serialise the address to 32 bytes using the encoding for the host byte order."""
        if sys.byteorder == "little":
            encode = to_byte_little_endian
        elif sys.byteorder == "big":
            encode = to_byte_big_endian
        else:
            raise RuntimeError("could not determine native byte order")
        return b"".join(encode(word, 4) for word in self._words)