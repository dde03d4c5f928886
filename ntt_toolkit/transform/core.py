"""
Transform Dispatch and NTT-Based Polynomial Multiplication.

``ntt`` / ``intt`` pick the radix from the sequence length, so callers with
either a 2^k or a 3^k sized domain use one entry point.

Polynomial multiplication is the main reason the transform exists:

    a * b = intt( ntt(a) ⊙ ntt(b) )

with both operands zero-padded to a transform size n >= len(a) + len(b) - 1,
so the cyclic convolution does not wrap around.

Example:
    >>> multiply_polynomials([1, 2], [3, 4], 433)   # (1 + 2x)(3 + 4x)
    [3, 10, 8]
"""

from __future__ import annotations
from typing import List, Sequence

import numpy as np

from ..common.field import find_root_of_unity
from ..common.numtheory import normalize
from .checks import check_modulus, is_power_of
from .radix2 import intt2, ntt2
from .radix3 import intt3, ntt3


def radix_for_length(n: int) -> int:
    """
    Return the radix (2 or 3) whose transform handles length n.

    A single element counts as a power of two.

    Raises:
        ValueError: If n is neither a power of 2 nor a power of 3
    """
    if is_power_of(n, 2):
        return 2
    if is_power_of(n, 3):
        return 3
    raise ValueError(f"Length {n} is neither a power of 2 nor a power of 3")


def ntt(values: Sequence[int], omega: int, prime: int,
        validate: bool = True) -> List[int]:
    """Forward NTT, radix chosen from len(values)."""
    if radix_for_length(len(values)) == 2:
        return ntt2(values, omega, prime, validate=validate)
    return ntt3(values, omega, prime, validate=validate)


def intt(values: Sequence[int], omega: int, prime: int,
         validate: bool = True) -> List[int]:
    """Inverse NTT, radix chosen from len(values)."""
    if radix_for_length(len(values)) == 2:
        return intt2(values, omega, prime, validate=validate)
    return intt3(values, omega, prime, validate=validate)


def transform_size(length: int, prime: int) -> int:
    """
    Smallest power of 2 or 3 that is >= length and divides prime - 1.

    Raises:
        ValueError: If the field has no root of unity of a large enough order
    """
    candidates = []
    for radix in (2, 3):
        n = 1
        while n < length:
            n *= radix
        if (prime - 1) % n == 0:
            candidates.append(n)
    if not candidates:
        raise ValueError(f"Z_{prime} has no power-of-2 or power-of-3 root of "
                         f"unity of order >= {length}")
    return min(candidates)


def multiply_polynomials(a: Sequence[int], b: Sequence[int],
                         prime: int) -> List[int]:
    """
    Multiply two polynomials over Z_p using the NTT.

    Args:
        a: Coefficients of the first polynomial, lowest degree first
        b: Coefficients of the second polynomial
        prime: The prime modulus (at most MAX_MODULUS)

    Returns:
        Canonical coefficients of a * b, length len(a) + len(b) - 1
        (empty if either operand is empty)
    """
    if len(a) == 0 or len(b) == 0:
        return []
    check_modulus(prime)

    result_len = len(a) + len(b) - 1
    n = transform_size(result_len, prime)
    omega = find_root_of_unity(n, prime)

    padded_a = normalize(a, prime) + [0] * (n - len(a))
    padded_b = normalize(b, prime) + [0] * (n - len(b))

    # omega comes from find_root_of_unity, so its order is already known
    points_a = np.array(ntt(padded_a, omega, prime, validate=False),
                        dtype=np.int64)
    points_b = np.array(ntt(padded_b, omega, prime, validate=False),
                        dtype=np.int64)
    product = np.fmod(points_a * points_b, prime)

    coeffs = intt(product.tolist(), omega, prime, validate=False)
    return normalize(coeffs[:result_len], prime)
