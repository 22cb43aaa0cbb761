"""Wallet primitives for QRL: wallet types, descriptors, seeds, hashing and addresses."""

__version__ = "0.1.0"