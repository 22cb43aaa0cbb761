"""Address derivation from a public key and its descriptor."""

from __future__ import annotations

from qrlwallet.descriptor import DESCRIPTOR_SIZE
from qrlwallet.hashing import shake256
from qrlwallet.seed import ADDRESS_SIZE

_HASH_SIZE = 32


def unsafe_get_address(pk: bytes, descriptor: object) -> bytes:
    """Derive the 24-byte address of a public key.

    Neither the key nor the descriptor is validated; callers must do that first.
    The hash input is a zero block as long as descriptor and key together,
    followed by the descriptor bytes and the key bytes.
    """
    if _HASH_SIZE < ADDRESS_SIZE:
        raise RuntimeError("Address size is not sufficient")
    key = bytes(pk)
    desc = bytes(descriptor)
    hash_input = bytes(DESCRIPTOR_SIZE + len(key)) + desc + key
    hashed = shake256(hash_input, _HASH_SIZE)
    return hashed[_HASH_SIZE - ADDRESS_SIZE:]


def address_to_str(address: bytes) -> str:
    """Render an address as ``Q`` followed by lower-case hex."""
    return "Q" + bytes(address).hex()