# qrlwallet

Building blocks for QRL wallets, in pure Python with no runtime dependencies.

## What is in the package

- `qrlwallet.wallettype`: the `WalletType` enum (`SPHINCSPLUS_256S = 0`,
  `ML_DSA_87 = 1`) and `LegacyWalletType` (`XMSS = 0`), with
  `to_wallet_type`, `to_wallet_type_of` and `to_legacy_wallet_type`, which
  raise `WalletTypeError` for unknown or mismatched values.
- `qrlwallet.descriptor`: the three-byte `Descriptor` (byte 0 is the wallet
  type, the other two are metadata) and `get_descriptor_bytes(wallet_type, metadata)`.
- `qrlwallet.seed`: the 48-byte `Seed` (with `hash_sha256()` and
  `hash_shake256(size)`), the 51-byte `ExtendedSeed` (descriptor followed by
  seed; `create`, `from_bytes`, `from_hex`), `to_seed` and `hex_str_to_seed`
  (which accepts an optional `0x` prefix).
- `qrlwallet.hashing`: `sha256`, `shake128`, `shake256`, the byte encoders
  `to_byte_little_endian` / `to_byte_big_endian`, and `HashAddress`, the
  eight 32-bit words that address a hash call in a hash-based signature tree.
- `qrlwallet.address`: `unsafe_get_address(pk, descriptor)`, which derives a
  24-byte address from a public key and descriptor with SHAKE256 without
  validating either, and `address_to_str`, which renders it as `Q` plus hex.
- `qrlwallet.ml_dsa_87` and `qrlwallet.sphincsplus_256s`:
  `MLDSA87Descriptor` / `SphincsPlus256sDescriptor`, descriptors that must
  carry their own wallet type, and `get_ml_dsa_87_address` /
  `get_sphincsplus_256s_address`, which check the descriptor before deriving
  the address.
- `qrlwallet.words_a.first_words()`: the leading part of the mnemonic word
  list, from `aback` to `kuwait`, in word-index order.

## Installation

```
pip install .
```

## Usage

Descriptors and wallet types:

```python
from qrlwallet.ml_dsa_87 import MLDSA87Descriptor
from qrlwallet.wallettype import WalletType

descriptor = MLDSA87Descriptor.new()
assert descriptor.to_bytes() == b"\x01\x00\x00"
assert descriptor.wallet_type() is WalletType.ML_DSA_87
```

Seeds and extended seeds:

```python
from qrlwallet.descriptor import Descriptor
from qrlwallet.seed import ExtendedSeed, hex_str_to_seed

seed = hex_str_to_seed("0x" + "00" * 48)
extended = ExtendedSeed.create(Descriptor(b"\x01\x00\x00"), seed)
assert ExtendedSeed.from_hex(extended.to_bytes().hex()) == extended
digest = seed.hash_sha256()
```

Addresses:

```python
from qrlwallet.address import address_to_str
from qrlwallet.ml_dsa_87 import MLDSA87Descriptor, get_ml_dsa_87_address

address = get_ml_dsa_87_address(public_key_bytes, MLDSA87Descriptor.new())
print(address_to_str(address))  # "Q" followed by 48 hex digits
```

The public key bytes are hashed as given; their length is not checked.

Hash addresses:

```python
from qrlwallet.hashing import HashAddress

addr = HashAddress()
addr.set_type(2)
addr.set_tree_index(7)
raw = addr.to_bytes()  # 32 bytes
```

`HashAddress.to_bytes()` picks the word encoding from the host byte order:
on little-endian hosts each word is written most significant byte first, on
big-endian hosts least significant byte first.

Failures raise subclasses of `qrlwallet.errors.WalletError`:
`InvalidDescriptorError`, `InvalidSeedError`, `MnemonicError` and
`WalletTypeError` (all of them are also `ValueError`s).

## What the package does not do

- It does not convert between extended seeds and mnemonic phrases, and it
  holds only the first part of the mnemonic word list (`aback` to `kuwait`),
  not the full 4096 words.
- It does not generate keys, sign or verify: there are no ML-DSA-87,
  SPHINCS+-256s or XMSS key pairs here, only their descriptors and address
  derivation from a public key you already have.
- It has no command-line tool and no key storage.

## Tests

```
pip install ".[test]"
pytest
```