"""Common type definitions for bitbloom.

Defines fundamental types shared by the vector and the filter.
"""

from __future__ import annotations

from typing import Callable, Union

# Core primitive types
Item = Union[str, bytes, bytearray, memoryview]
Position = int
Snapshot = Union[bytes, bytearray, memoryview]

# (item bytes, seed) -> unsigned 64-bit hash
HashFunction = Callable[[bytes, int], int]

SNAPSHOT_TYPES = (bytes, bytearray, memoryview)
