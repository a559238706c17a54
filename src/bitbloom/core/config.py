"""Configuration for bitbloom filters.

Groups the parameters that must travel alongside a snapshot: the raw
snapshot bytes carry no header, so size, hash count and seed have to be
stored and restored by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidHashCountError, InvalidSeedError, InvalidSizeError

DEFAULT_SEED = 0x7E53A269
MAX_SEED = 0xFFFFFFFF


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_parameters(size_in_bits: int, num_hash_functions: int, seed: int) -> None:
    """Raise the matching construction error for invalid filter parameters."""
    if not _is_int(size_in_bits) or size_in_bits <= 0 or size_in_bits % 8 != 0:
        raise InvalidSizeError(
            f"Invalid Bloom filter size: {size_in_bits!r} (must be a positive multiple of 8)"
        )
    if not _is_int(num_hash_functions) or num_hash_functions < 1:
        raise InvalidHashCountError(
            f"Invalid number of hash functions: {num_hash_functions!r} (must be an integer >= 1)"
        )
    if not _is_int(seed) or not 0 <= seed <= MAX_SEED:
        raise InvalidSeedError(f"Invalid seed: {seed!r} (must fit in 32 unsigned bits)")


@dataclass(frozen=True)
class BloomConfig:
    """Parameters of a Bloom filter.

    Attributes:
        size_in_bits: Total bit capacity, a positive multiple of 8
        num_hash_functions: Positions computed per item (k)
        seed: 32-bit seed mixed into the hash function
    """

    size_in_bits: int
    num_hash_functions: int
    seed: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        validate_parameters(self.size_in_bits, self.num_hash_functions, self.seed)

    @property
    def size_in_bytes(self) -> int:
        return self.size_in_bits // 8

    @classmethod
    def for_capacity(
        cls,
        expected_items: int,
        false_positive_rate: float = 0.01,
        seed: int = DEFAULT_SEED,
    ) -> BloomConfig:
        """Derive size and hash count for an expected item count and target FP rate.

        m = -n * ln(p) / (ln(2)^2), rounded up to whole bytes
        k = (m / n) * ln(2)

        Rounding k moves the predicted rate off the optimum, so m is then
        grown a byte at a time until the predicted rate is within target.
        """
        from ..components.estimation import (
            estimate_false_positive_probability,
            optimal_num_hash_functions,
            optimal_size_in_bits,
        )

        expected_items = max(1, expected_items)
        size_in_bits = optimal_size_in_bits(expected_items, false_positive_rate)
        k = optimal_num_hash_functions(size_in_bits, expected_items)
        while (
            estimate_false_positive_probability(size_in_bits, k, expected_items)
            > false_positive_rate
        ):
            size_in_bits += 8
        return cls(size_in_bits=size_in_bits, num_hash_functions=k, seed=seed)
