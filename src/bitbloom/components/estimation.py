"""False-positive and capacity estimation.

Closed-form Bloom filter formulas (see https://hur.st/bloomfilter/).
None of these depend on filter state.
"""

from __future__ import annotations

import math


def estimate_false_positive_probability(
    size_in_bits: int, num_hash_functions: int, estimated_items_count: int
) -> float:
    """Expected false-positive probability after inserting n items.

    p = (1 - e^(-k / (m / n)))^k

    Returns:
        Probability as a fraction in [0, 1]
    """
    if estimated_items_count <= 0:
        return 0.0
    k = num_hash_functions
    bits_per_item = size_in_bits / estimated_items_count
    return math.pow(1 - math.exp(-k / bits_per_item), k)


def estimate_maximum_capacity(
    size_in_bits: int, num_hash_functions: int, max_allowed_false_positive_probability: float
) -> int:
    """Largest item count that keeps the false-positive probability at or below p.

    n = ceil(m / (-k / ln(1 - e^(ln(p) / k))))
    """
    p = max_allowed_false_positive_probability
    if not 0 < p < 1:
        raise ValueError(f"False positive probability must be in (0, 1), got {p}")
    k = num_hash_functions
    return math.ceil(size_in_bits / (-k / math.log(1 - math.exp(math.log(p) / k))))


def fill_ratio_false_positive_percent(
    set_bits: int, size_in_bits: int, num_hash_functions: int
) -> float:
    """False-positive estimate in percent from the current fill ratio.

    (set_bits / m)^k * 100
    """
    return ((set_bits / size_in_bits) ** num_hash_functions) * 100


def optimal_size_in_bits(expected_items: int, false_positive_rate: float) -> int:
    """Bit count for n items at rate p, rounded up to a whole number of bytes."""
    if not 0 < false_positive_rate < 1:
        raise ValueError(f"False positive rate must be in (0, 1), got {false_positive_rate}")
    bits = math.ceil(-expected_items * math.log(false_positive_rate) / (math.log(2) ** 2))
    return max(8, (bits + 7) // 8 * 8)


def optimal_num_hash_functions(size_in_bits: int, expected_items: int) -> int:
    """Hash count minimising false positives: k = (m / n) * ln(2)."""
    return max(1, round(size_in_bits / max(1, expected_items) * math.log(2)))
