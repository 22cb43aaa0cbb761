import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from qrlwallet.hashing import (
    HashAddress,
    sha256,
    shake128,
    shake256,
    to_byte_big_endian,
    to_byte_little_endian,
)


def test_sha256_empty_vector():
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_shake128_empty_vector():
    assert shake128(b"", 32).hex() == (
        "7f9c2ba4e88f827d616045507605853ed73b8093f6efbc88eb1a6eacfa66ef26"
    )


def test_shake256_empty_vector():
    assert shake256(b"", 32).hex() == (
        "46b9dd2b0ba88d13233b3feb743eeb243fcd52ea62b81b82b50c27646ed5762f"
    )


@given(st.binary(max_size=64), st.integers(min_value=0, max_value=100))
def test_shake_output_is_prefix_of_longer_output(msg, size):
    assert shake256(msg, size) == shake256(msg, 128)[:size]
    assert shake128(msg, size) == shake128(msg, 128)[:size]
    assert len(shake256(msg, size)) == size


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_word_encodings_round_trip(value):
    first = to_byte_little_endian(value, 4)
    second = to_byte_big_endian(value, 4)
    assert int.from_bytes(first, "big") == value
    assert int.from_bytes(second, "little") == value
    assert first == second[::-1]


def test_encoding_keeps_low_bytes_only():
    assert to_byte_little_endian(0x1234, 1) == bytes([0x34])
    assert to_byte_big_endian(0x1234, 1) == bytes([0x34])


def test_set_type_clears_following_words():
    addr = HashAddress([1, 2, 3, 4, 5, 6, 7, 8])
    addr.set_type(9)
    assert addr.words == (1, 2, 3, 9, 0, 0, 0, 0)


def test_setters_target_their_words():
    addr = HashAddress()
    addr.set_ots_addr(11)
    addr.set_chain_addr(12)
    addr.set_hash_addr(13)
    addr.set_key_and_mask(14)
    assert addr.words[4:] == (11, 12, 13, 14)
    addr.set_ltree_addr(21)
    addr.set_tree_height(22)
    addr.set_tree_index(23)
    assert addr.words[4:] == (21, 22, 23, 14)


def test_wrong_word_count_rejected():
    with pytest.raises(ValueError):
        HashAddress([0] * 7)


@pytest.mark.parametrize("order, decode", [("little", "big"), ("big", "little")])
def test_to_bytes_follows_host_order(monkeypatch, order, decode):
    monkeypatch.setattr(sys, "byteorder", order)
    words = [0x01020304, 0, 7, 0xFFFFFFFF, 5, 6, 0xA0B0C0D0, 1]
    out = HashAddress(words).to_bytes()
    assert len(out) == 32
    decoded = [int.from_bytes(out[i : i + 4], decode) for i in range(0, 32, 4)]
    assert decoded == words