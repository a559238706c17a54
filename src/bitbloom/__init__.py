"""bitbloom - Bloom filter over a packed bit vector."""

from .components.bloom import BloomFilter
from .components.estimation import estimate_false_positive_probability, estimate_maximum_capacity
from .components.hashing import xxh64
from .components.vector import BitVector
from .core.config import DEFAULT_SEED, BloomConfig
from .core.errors import (
    BloomError,
    InvalidHashCountError,
    InvalidSeedError,
    InvalidSizeError,
    InvalidSnapshotTypeError,
    SnapshotSizeMismatchError,
)
from .core.types import HashFunction, Item, Position, Snapshot
from .interfaces.filter import MembershipFilter

__all__ = [
    "BloomFilter",
    "BitVector",
    "BloomConfig",
    "DEFAULT_SEED",
    "MembershipFilter",
    "estimate_false_positive_probability",
    "estimate_maximum_capacity",
    "xxh64",
    "BloomError",
    "InvalidHashCountError",
    "InvalidSeedError",
    "InvalidSizeError",
    "InvalidSnapshotTypeError",
    "SnapshotSizeMismatchError",
    "HashFunction",
    "Item",
    "Position",
    "Snapshot",
]
