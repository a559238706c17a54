"""Integration tests: snapshot out, restore, and keep querying."""

import pytest

from bitbloom import BitVector, BloomConfig, BloomFilter


@pytest.fixture
def populated_filter():
    """Filter sized for 1000 items holding 800 of them."""
    config = BloomConfig.for_capacity(1000, 0.01)
    bf = BloomFilter.from_config(config)
    bf.update(f"user:{i}" for i in range(800))
    return bf


def test_restore_preserves_membership(populated_filter):
    """A filter rebuilt from a snapshot answers exactly like the original."""
    config = populated_filter.config
    restored = BloomFilter.from_config(config, populated_filter.snapshot())

    assert restored == populated_filter
    for i in range(800):
        assert f"user:{i}" in restored
    for i in range(800, 2000):
        item = f"user:{i}"
        assert (item in restored) == (item in populated_filter)


def test_restore_from_immutable_bytes(populated_filter):
    restored = BloomFilter(
        populated_filter.size_in_bits,
        populated_filter.k,
        bytes(populated_filter.snapshot()),
        seed=populated_filter.seed,
    )
    assert restored.total_set_bits == populated_filter.total_set_bits
    assert "user:0" in restored


def test_restored_filter_diverges_independently(populated_filter):
    restored = BloomFilter.from_config(populated_filter.config, populated_filter.snapshot())
    restored.update(f"extra:{i}" for i in range(200))
    assert restored.total_set_bits > populated_filter.total_set_bits
    assert restored != populated_filter


def test_snapshot_layout_matches_vector(populated_filter):
    """Snapshot bytes are a plain LSB-first bit vector of size m / 8."""
    snap = populated_filter.snapshot()
    assert len(snap) == populated_filter.size_in_bits // 8

    vec = BitVector(populated_filter.size_in_bits, snap)
    for position in populated_filter.compute_mask("user:42"):
        assert vec.get(position)
    assert vec.total_set_bits == populated_filter.total_set_bits


def test_measured_false_positive_rate(populated_filter):
    """Measured FP rate stays near the configured target."""
    false_positives = sum(1 for i in range(10_000) if f"absent:{i}" in populated_filter)
    measured = false_positives / 10_000

    expected = BloomFilter.estimate_false_positive_probability(
        populated_filter.size_in_bits, populated_filter.k, 800
    )
    assert measured <= max(0.02, expected * 2)

    # Fill-based estimate is a percentage and should be in the same ballpark
    assert populated_filter.estimate_false_positives() <= 2.0


def test_capacity_estimate_round_trip():
    """A filter filled to its estimated capacity stays near the target rate."""
    m, k, target = 16_384, 5, 0.02
    capacity = BloomFilter.estimate_maximum_capacity(m, k, target)
    bf = BloomFilter(m, k)
    bf.update(f"item-{i}" for i in range(capacity))

    false_positives = sum(1 for i in range(10_000) if f"other-{i}" in bf)
    assert false_positives / 10_000 <= target * 2
