"""Unit tests for false-positive and capacity estimation."""

import math

import pytest

from bitbloom.components.estimation import (
    estimate_false_positive_probability,
    estimate_maximum_capacity,
    fill_ratio_false_positive_percent,
    optimal_num_hash_functions,
    optimal_size_in_bits,
)


def test_false_positive_probability_in_unit_interval():
    p = estimate_false_positive_probability(8000, 4, 500)
    assert 0 < p < 1


def test_false_positive_probability_formula():
    m, k, n = 8000, 4, 500
    expected = (1 - math.exp(-k / (m / n))) ** k
    assert estimate_false_positive_probability(m, k, n) == pytest.approx(expected)


def test_false_positive_probability_increases_with_items():
    """More items at fixed m and k means a strictly higher probability."""
    values = [estimate_false_positive_probability(8000, 4, n) for n in (100, 500, 1000, 5000, 20000)]
    assert all(a < b for a, b in zip(values, values[1:]))


def test_false_positive_probability_no_items():
    assert estimate_false_positive_probability(8000, 4, 0) == 0.0


def test_maximum_capacity_inverts_probability():
    """The returned capacity sits at the target probability boundary."""
    m, k, p = 8000, 4, 0.01
    n = estimate_maximum_capacity(m, k, p)
    assert estimate_false_positive_probability(m, k, n - 1) <= p
    assert estimate_false_positive_probability(m, k, n) == pytest.approx(p, rel=0.01)


def test_maximum_capacity_grows_with_tolerance():
    strict = estimate_maximum_capacity(8000, 4, 0.001)
    loose = estimate_maximum_capacity(8000, 4, 0.1)
    assert strict < loose


@pytest.mark.parametrize("p", [0, 1, -0.5, 1.5])
def test_maximum_capacity_rejects_bad_probability(p):
    with pytest.raises(ValueError, match="must be in"):
        estimate_maximum_capacity(8000, 4, p)


def test_fill_ratio_estimate():
    assert fill_ratio_false_positive_percent(0, 64, 4) == 0.0
    assert fill_ratio_false_positive_percent(64, 64, 4) == 100.0
    assert fill_ratio_false_positive_percent(16, 64, 2) == pytest.approx(6.25)


def test_optimal_size_is_byte_aligned():
    m = optimal_size_in_bits(1000, 0.01)
    assert m % 8 == 0
    expected = -1000 * math.log(0.01) / (math.log(2) ** 2)
    assert expected <= m < expected + 8


def test_optimal_size_minimum():
    assert optimal_size_in_bits(1, 0.5) == 8


def test_optimal_hash_count():
    assert optimal_num_hash_functions(9592, 1000) == 7
    assert optimal_num_hash_functions(8, 1000) == 1


@pytest.mark.parametrize("rate", [0, 1, 2])
def test_optimal_size_rejects_bad_rate(rate):
    with pytest.raises(ValueError):
        optimal_size_in_bits(100, rate)
