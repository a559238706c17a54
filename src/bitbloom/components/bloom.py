"""Bloom filter implementation.

Bit-vector backed Bloom filter deriving k positions from one 64-bit hash
with double hashing (Kirsch-Mitzenmacher).
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..core.config import DEFAULT_SEED, BloomConfig, validate_parameters
from ..core.errors import InvalidSnapshotTypeError, SnapshotSizeMismatchError
from ..core.types import SNAPSHOT_TYPES, HashFunction, Item, Position, Snapshot
from . import estimation
from .hashing import encode_item, split_hash, xxh64
from .vector import BitVector

logger = logging.getLogger(__name__)


class BloomFilter:
    """Probabilistic set membership test over a fixed-size bit vector.

    Args:
        size_in_bits: Filter size in bits, a positive multiple of 8
        num_hash_functions: Number of positions set per item (k)
        snapshot: Previously taken snapshot, exactly size_in_bits / 8 bytes.
            It is copied, so the caller keeps no handle on the filter state.
        seed: 32-bit seed passed to the hash function
        hash_function: (data, seed) -> unsigned 64-bit hash

    Invariants:
        - False positives are possible
        - False negatives are not possible
        - size_in_bits, k and seed are fixed at creation time

    Not thread-safe: concurrent add/contains calls must be serialised by
    the caller.
    """

    def __init__(
        self,
        size_in_bits: int,
        num_hash_functions: int,
        snapshot: Snapshot | None = None,
        seed: int = DEFAULT_SEED,
        hash_function: HashFunction = xxh64,
    ):
        validate_parameters(size_in_bits, num_hash_functions, seed)
        self._size_in_bits = size_in_bits
        self._k = num_hash_functions
        self._seed = seed
        self._hash_function = hash_function

        if snapshot is None:
            self._vector = BitVector(size_in_bits)
            logger.debug(f"Created bloom filter m={size_in_bits} k={num_hash_functions}")
            return

        if not isinstance(snapshot, SNAPSHOT_TYPES):
            raise InvalidSnapshotTypeError(
                f"Invalid Bloom filter snapshot format: {type(snapshot).__name__}"
            )
        nbytes = memoryview(snapshot).nbytes
        if nbytes * 8 != size_in_bits:
            raise SnapshotSizeMismatchError(
                f"Mismatched Bloom filter size for a given snapshot: "
                f"expected {size_in_bits // 8} bytes, got {nbytes}"
            )
        self._vector = BitVector(size_in_bits, bytearray(snapshot))
        logger.debug(
            f"Restored bloom filter m={size_in_bits} k={num_hash_functions} "
            f"with {self._vector.total_set_bits} bits set"
        )

    @classmethod
    def from_config(cls, config: BloomConfig, snapshot: Snapshot | None = None) -> BloomFilter:
        """Create a filter from a BloomConfig, optionally restoring a snapshot."""
        return cls(config.size_in_bits, config.num_hash_functions, snapshot, seed=config.seed)

    @property
    def size_in_bits(self) -> int:
        return self._size_in_bits

    @property
    def k(self) -> int:
        return self._k

    @property
    def num_hash_functions(self) -> int:
        return self._k

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def config(self) -> BloomConfig:
        return BloomConfig(self._size_in_bits, self._k, self._seed)

    @property
    def total_set_bits(self) -> int:
        return self._vector.total_set_bits

    def compute_mask(self, item: Item) -> list[Position]:
        """Return the k bit positions for item.

        Positions are (low + i * high) mod m, where low and high are the
        32-bit halves of the item's 64-bit hash. Duplicates are kept.
        """
        low, high = split_hash(self._hash_function(encode_item(item), self._seed))
        m = self._size_in_bits
        return [(low + i * high) % m for i in range(self._k)]

    def add(self, item: Item) -> None:
        """Add item to the filter."""
        vector = self._vector
        for position in self.compute_mask(item):
            vector.set(position, True)

    def update(self, items: Iterable[Item]) -> None:
        """Add every item from an iterable."""
        for item in items:
            self.add(item)

    def contains(self, item: Item) -> bool:
        """Return True if item may be present; False if definitely absent."""
        vector = self._vector
        for position in self.compute_mask(item):
            if not vector.get(position):
                return False
        return True

    def __contains__(self, item: Item) -> bool:
        return self.contains(item)

    def snapshot(self) -> bytearray:
        """Copy of the filter bits, size_in_bits / 8 bytes, LSB first."""
        return self._vector.snapshot()

    def estimate_false_positives(self) -> float:
        """False-positive estimate in percent based on the current fill ratio."""
        return estimation.fill_ratio_false_positive_percent(
            self._vector.total_set_bits, self._size_in_bits, self._k
        )

    estimate_false_positive_probability = staticmethod(
        estimation.estimate_false_positive_probability
    )
    estimate_maximum_capacity = staticmethod(estimation.estimate_maximum_capacity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BloomFilter):
            return NotImplemented
        return (
            self._size_in_bits == other._size_in_bits
            and self._k == other._k
            and self._seed == other._seed
            and self._vector == other._vector
        )

    __hash__ = None

    def __repr__(self) -> str:
        vector = getattr(self, "_vector", None)
        if vector is None:
            return "BloomFilter(<uninitialized>)"
        return (
            f"BloomFilter(size_in_bits={self._size_in_bits}, k={self._k}, "
            f"seed={self._seed:#x}, set_bits={vector.total_set_bits})"
        )
