"""Hashing helpers.

The filter only needs a deterministic 64-bit hash of the item bytes for a
given seed. xxHash64 is the default.
"""

from __future__ import annotations

import xxhash

from ..core.types import Item

LOW_MASK = 0xFFFFFFFF


def xxh64(data: bytes, seed: int) -> int:
    """Return the unsigned 64-bit xxHash of data with seed."""
    return xxhash.xxh64(data, seed=seed).intdigest()


def encode_item(item: Item) -> bytes:
    """Convert an item to the bytes that get hashed."""
    if isinstance(item, str):
        return item.encode("utf-8")
    if isinstance(item, (bytes, bytearray, memoryview)):
        return bytes(item)
    raise TypeError(f"Unsupported item type: {type(item).__name__}")


def split_hash(value: int) -> tuple[int, int]:
    """Split a 64-bit hash into its (low, high) 32-bit halves."""
    return value & LOW_MASK, (value >> 32) & LOW_MASK
