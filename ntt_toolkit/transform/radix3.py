"""
Radix-3 Number-Theoretic Transform.

Same recursion as the radix-2 transform, split three ways for lengths that
are powers of three:

    A(x) = B(x^3) + x * C(x^3) + x^2 * D(x^3)

B, C and D take the coefficients at indices 0, 1 and 2 mod 3 and are
transformed with w^3. Output j (with i = j mod n/3) is then

    A(w^j) = B[i] + x * C[i] + x^2 * D[i],   x = w^j

Every reduction is the truncated remainder, as in radix2.
"""

from __future__ import annotations
from typing import List, Sequence

import numpy as np

from ..common.numtheory import mod_inverse, mod_pow
from .checks import check_transform_input
from .radix2 import twiddle_factors


def _ntt3(values: np.ndarray, omega: int, prime: int) -> np.ndarray:
    n = len(values)
    if n == 1:
        return values

    omega_cubed = mod_pow(omega, 3, prime)
    b_point = _ntt3(values[0::3], omega_cubed, prime)
    c_point = _ntt3(values[1::3], omega_cubed, prime)
    d_point = _ntt3(values[2::3], omega_cubed, prime)

    # x = w^j for every output j; sub-results repeat once per third
    x = twiddle_factors(omega, n, prime)
    x_squared = np.fmod(x * x, prime)
    return np.fmod(np.tile(b_point, 3)
                   + x * np.tile(c_point, 3)
                   + x_squared * np.tile(d_point, 3), prime)


def ntt3(values: Sequence[int], omega: int, prime: int,
         validate: bool = True) -> List[int]:
    """
    Forward radix-3 NTT.

    Args:
        values: Coefficients, length a power of three
        omega: Root of unity of order len(values)
        prime: The prime modulus
        validate: Check the order of omega before transforming

    Returns:
        Point values A(omega^0) .. A(omega^(n-1)), not normalized

    Example:
        >>> ntt3([1, 2, 3, 4, 5, 6, 7, 8, 9], 150, 433)
        [45, 404, 407, 266, 377, 47, 158, 17, 20]
    """
    buf = check_transform_input(values, omega, prime, radix=3,
                                validate=validate)
    return _ntt3(buf, omega, prime).tolist()


def intt3(values: Sequence[int], omega: int, prime: int,
          validate: bool = True) -> List[int]:
    """Inverse radix-3 NTT: forward with omega^-1, then scale by n^-1."""
    buf = check_transform_input(values, omega, prime, radix=3,
                                validate=validate)
    if len(buf) == 1:
        return np.fmod(buf, prime).tolist()
    omega_inv = mod_inverse(omega, prime)
    len_inv = mod_inverse(len(buf), prime)
    scaled = _ntt3(buf, omega_inv, prime)
    return np.fmod(scaled * len_inv, prime).tolist()
