"""
Radix-2 Number-Theoretic Transform.

Recursive Cooley-Tukey decimation in time for lengths that are powers of two.

Algorithm:
    Split A(x) = B(x^2) + x * C(x^2), where B holds the even-index and C the
    odd-index coefficients. Transform B and C with w^2 (an n/2-th root), then
    combine with the butterfly

        A(w^i)       = B(w^2i) + w^i * C(w^2i)
        A(w^(i+n/2)) = B(w^2i) - w^i * C(w^2i)

    using w^(n/2) = -1.

Sign Convention:
    Every reduction is the truncated remainder (numpy.fmod), so point values
    can be negative. For p = 433, w = 354:

        ntt2([1..8]) == [36, -130, -287, 3, -4, 422, 279, -311]

    which is [36, 303, 146, 3, 429, 422, 279, 122] after normalization.
"""

from __future__ import annotations
from typing import List, Sequence

import numpy as np

from ..common.numtheory import mod_inverse, mod_pow
from .checks import check_transform_input


def twiddle_factors(omega: int, count: int, prime: int) -> np.ndarray:
    """omega^0 .. omega^(count-1), each computed with mod_pow."""
    return np.array([mod_pow(omega, i, prime) for i in range(count)],
                    dtype=np.int64)


def _ntt2(values: np.ndarray, omega: int, prime: int) -> np.ndarray:
    n = len(values)
    if n == 1:
        return values

    omega_squared = mod_pow(omega, 2, prime)
    b_point = _ntt2(values[0::2], omega_squared, prime)
    c_point = _ntt2(values[1::2], omega_squared, prime)

    products = twiddle_factors(omega, n // 2, prime) * c_point
    return np.concatenate([
        np.fmod(b_point + products, prime),
        np.fmod(b_point - products, prime),
    ])


def ntt2(values: Sequence[int], omega: int, prime: int,
         validate: bool = True) -> List[int]:
    """
    Forward radix-2 NTT.

    Args:
        values: Coefficients, length a power of two
        omega: Root of unity of order len(values)
        prime: The prime modulus
        validate: Check the order of omega before transforming

    Returns:
        Point values A(omega^0) .. A(omega^(n-1)), not normalized
    """
    buf = check_transform_input(values, omega, prime, radix=2,
                                validate=validate)
    return _ntt2(buf, omega, prime).tolist()


def intt2(values: Sequence[int], omega: int, prime: int,
          validate: bool = True) -> List[int]:
    """
    Inverse radix-2 NTT.

    Runs the forward transform with omega^-1 and scales by n^-1. The result
    is congruent to the original coefficients but may not equal them
    literally (e.g. -429 for 4 mod 433).
    """
    buf = check_transform_input(values, omega, prime, radix=2,
                                validate=validate)
    # n^-1 = 1 and the root is unused
    if len(buf) == 1:
        return np.fmod(buf, prime).tolist()
    omega_inv = mod_inverse(omega, prime)
    len_inv = mod_inverse(len(buf), prime)
    scaled = _ntt2(buf, omega_inv, prime)
    return np.fmod(scaled * len_inv, prime).tolist()
