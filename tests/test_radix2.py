"""Tests for the radix-2 NTT."""

import random

import numpy as np
import pytest

from ntt_toolkit.common.field import PrimeField
from ntt_toolkit.common.numtheory import normalize
from ntt_toolkit.common.polynomial import naive_transform
from ntt_toolkit.transform.radix2 import intt2, ntt2, twiddle_factors

PRIME = 433
OMEGA = 354  # 8th root of unity in Z_433


def test_forward_reference():
    points = ntt2([1, 2, 3, 4, 5, 6, 7, 8], OMEGA, PRIME)
    assert points == [36, -130, -287, 3, -4, 422, 279, -311]


def test_forward_reference_canonical():
    points = ntt2([1, 2, 3, 4, 5, 6, 7, 8], OMEGA, PRIME)
    assert normalize(points, PRIME) == [36, 303, 146, 3, 429, 422, 279, 122]


def test_inverse_reference():
    coeffs = intt2([36, -130, -287, 3, -4, 422, 279, -311], OMEGA, PRIME)
    assert coeffs == [1, 2, 3, -429, 5, -427, -426, 8]
    assert normalize(coeffs, PRIME) == [1, 2, 3, 4, 5, 6, 7, 8]


def test_returns_python_ints():
    points = ntt2([1, 2, 3, 4, 5, 6, 7, 8], OMEGA, PRIME)
    assert all(type(v) is int for v in points)


def test_single_element_unchanged():
    assert ntt2([-7], 1, PRIME) == [-7]
    assert ntt2([5], 12345, PRIME) == [5]
    assert intt2([-7], 1, PRIME) == [-7]
    assert intt2([5], 0, PRIME) == [5]
    assert intt2([440], 0, PRIME) == [7]


def test_matches_direct_evaluation():
    rng = random.Random(4)
    for _ in range(20):
        coeffs = [rng.randint(-PRIME, PRIME) for _ in range(8)]
        fast = ntt2(coeffs, OMEGA, PRIME)
        slow = naive_transform(coeffs, OMEGA, PRIME)
        assert normalize(fast, PRIME) == normalize(slow, PRIME)


@pytest.mark.parametrize("n", [2, 4, 8, 16])
def test_round_trip_small_field(n):
    field = PrimeField(PRIME)
    omega = field.root_of_unity(n)
    coeffs = field.random_vector(n)
    recovered = intt2(ntt2(coeffs, omega, PRIME), omega, PRIME)
    assert normalize(recovered, PRIME) == coeffs


def test_round_trip_negative_root_and_inputs():
    rng = random.Random(5)
    coeffs = [rng.randint(-10**6, 10**6) for _ in range(8)]
    omega = OMEGA - PRIME
    recovered = intt2(ntt2(coeffs, omega, PRIME), omega, PRIME)
    assert normalize(recovered, PRIME) == normalize(coeffs, PRIME)


def test_round_trip_large_field():
    prime = 998244353
    field = PrimeField(prime)
    omega = field.root_of_unity(256)
    coeffs = field.random_vector(256)
    points = ntt2(coeffs, omega, prime)
    assert normalize(intt2(points, omega, prime), prime) == coeffs


def test_input_not_mutated():
    coeffs = np.arange(1, 9, dtype=np.int64)
    before = coeffs.copy()
    ntt2(coeffs, OMEGA, PRIME)
    intt2(coeffs, OMEGA, PRIME)
    assert (coeffs == before).all()


def test_accepts_tuple_and_array():
    expected = ntt2([1, 2, 3, 4, 5, 6, 7, 8], OMEGA, PRIME)
    assert ntt2(tuple(range(1, 9)), OMEGA, PRIME) == expected
    assert ntt2(np.arange(1, 9), OMEGA, PRIME) == expected


@pytest.mark.parametrize("length", [0, 3, 6, 9, 12])
def test_rejects_non_power_of_two(length):
    with pytest.raises(ValueError, match="power of 2"):
        ntt2([1] * length, OMEGA, PRIME)


def test_rejects_wrong_root_order():
    with pytest.raises(ValueError, match="root of unity of order 8"):
        ntt2(list(range(8)), 179, PRIME)
    with pytest.raises(ValueError, match="root of unity of order 4"):
        intt2(list(range(4)), OMEGA, PRIME)


def test_unvalidated_wrong_root_still_runs():
    points = ntt2(list(range(8)), 179, PRIME, validate=False)
    assert len(points) == 8


def test_rejects_two_dimensional_input():
    with pytest.raises(ValueError, match="1-D"):
        ntt2([[1, 2], [3, 4]], OMEGA, PRIME)


@pytest.mark.parametrize("values", [
    [1.9, 2.9],
    np.array([1.0, 2.0]),
    [True, False],
])
def test_rejects_non_integer_values(values):
    with pytest.raises(ValueError, match="must be integers"):
        ntt2(values, PRIME - 1, PRIME)


def test_overflow_guards():
    with pytest.raises(OverflowError):
        ntt2([1, 2], 2**31 - 2, 2**31 - 1)
    with pytest.raises(OverflowError):
        ntt2([2**40, 1], PRIME - 1, PRIME)
    with pytest.raises(OverflowError):
        ntt2([2**70, 1], PRIME - 1, PRIME)


def test_twiddle_factors():
    assert twiddle_factors(OMEGA, 4, PRIME).tolist() == [1, 354, 179, 148]
