"""Tests for gcd, modular inverse and modular exponentiation."""

import math
import random

import pytest

from ntt_toolkit.common.numtheory import (
    extended_gcd,
    mod_inverse,
    mod_pow,
    normalize,
    trunc_div,
    trunc_mod,
)

PRIMES = [2, 3, 7, 17, 433, 7681, 998244353]


def test_trunc_div_rounds_toward_zero():
    assert trunc_div(7, 3) == 2
    assert trunc_div(-7, 3) == -2
    assert trunc_div(7, -3) == -2
    assert trunc_div(-7, -3) == 2


def test_trunc_mod_follows_dividend_sign():
    assert trunc_mod(7, 3) == 1
    assert trunc_mod(-7, 3) == -1
    assert trunc_mod(7, -3) == 1
    assert trunc_mod(-7, -3) == -1


def test_trunc_identity():
    rng = random.Random(1)
    for _ in range(200):
        a = rng.randint(-10**6, 10**6)
        b = rng.choice([-1, 1]) * rng.randint(1, 1000)
        assert trunc_div(a, b) * b + trunc_mod(a, b) == a


def test_gcd_reference():
    assert extended_gcd(12, 16) == (4, -1, 1)


def test_gcd_zero_second_operand():
    assert extended_gcd(5, 0) == (5, 1, 0)
    assert extended_gcd(0, 0) == (0, 1, 0)


def test_gcd_bezout_random():
    rng = random.Random(2)
    for _ in range(300):
        a = rng.randint(-10**9, 10**9)
        b = rng.randint(-10**9, 10**9)
        g, x, y = extended_gcd(a, b)
        assert a * x + b * y == g
        assert g == math.gcd(a, b)


def test_gcd_negative_inputs_give_nonnegative_gcd():
    g, x, y = extended_gcd(4, -6)
    assert g == 2
    assert 4 * x + (-6) * y == 2


def test_mod_inverse_reference():
    assert mod_inverse(3, 7) == 5


def test_mod_inverse_negative_and_large_k():
    assert mod_inverse(-3, 7) == 2
    assert mod_inverse(10, 7) == 5
    assert mod_inverse(-10, 7) == 2


@pytest.mark.parametrize("prime", PRIMES)
def test_mod_inverse_property(prime):
    rng = random.Random(prime)
    for _ in range(50):
        k = rng.randint(-10**12, 10**12)
        if k % prime == 0:
            continue
        r = mod_inverse(k, prime)
        assert 0 <= r < prime
        assert (k * r) % prime == 1


def test_mod_inverse_of_zero_raises():
    with pytest.raises(ValueError, match="No inverse exists"):
        mod_inverse(0, 7)
    with pytest.raises(ValueError, match="No inverse exists"):
        mod_inverse(14, 7)


def test_mod_inverse_non_coprime_raises():
    with pytest.raises(ValueError, match="gcd = 4"):
        mod_inverse(4, 8)


def test_mod_inverse_bad_modulus():
    with pytest.raises(ValueError):
        mod_inverse(3, 1)


def test_mod_pow_reference():
    assert mod_pow(2, 0, 17) == 1
    assert mod_pow(2, 3, 17) == 8
    assert mod_pow(2, 6, 17) == 13


def test_mod_pow_negative_base_keeps_sign():
    assert mod_pow(-3, 0, 17) == 1
    assert mod_pow(-3, 1, 17) == -3
    assert mod_pow(-3, 15, 17) == -6


@pytest.mark.parametrize("prime", PRIMES)
def test_mod_pow_congruent_to_builtin(prime):
    rng = random.Random(prime + 1)
    for _ in range(50):
        x = rng.randint(-10**6, 10**6)
        e = rng.randint(0, 500)
        assert mod_pow(x, e, prime) % prime == pow(x, e, prime)


def test_mod_pow_negative_exponent_raises():
    with pytest.raises(ValueError):
        mod_pow(2, -1, 17)


def test_normalize_scalar_and_sequence():
    assert normalize(-6, 17) == 11
    assert normalize(40, 17) == 6
    assert normalize([-130, 3, -4], 433) == [303, 3, 429]
