"""
Direct Polynomial Evaluation over Z_p.

These routines evaluate a polynomial given by its coefficient list
(index = degree) without any transform. They work for any length and serve
as the correctness oracle for the NTTs:

    ntt(v, w, p)[i]  ≡  evaluate_polynomial(v, w^i, p)   (mod p)

Cost:
    - evaluate_polynomial: O(n) mod_pow calls, O(n log n) total
    - evaluate_horner: O(n) multiplications
    - naive_transform: O(n^2), only for small inputs and tests
"""

from __future__ import annotations
from typing import List, Sequence

from .numtheory import mod_pow, trunc_mod


def evaluate_polynomial(coefficients: Sequence[int], point: int,
                        prime: int) -> int:
    """
    Evaluate a polynomial at a point by direct summation.

    Each term coef[d] * point^d is reduced before it is added, and the running
    sum is reduced after every addition. Reduction is the truncated remainder,
    so the result may be negative.

    Args:
        coefficients: Coefficients, lowest degree first (may be empty)
        point: Evaluation point
        prime: The modulus

    Returns:
        P(point) mod prime (not normalized)

    Example:
        >>> evaluate_polynomial([1, 2, 3, 4, 5, 6], 5, 17)
        4
    """
    total = 0
    for degree, coef in enumerate(coefficients):
        term = trunc_mod(int(coef) * mod_pow(point, degree, prime), prime)
        total = trunc_mod(total + term, prime)
    return total


def evaluate_horner(coefficients: Sequence[int], point: int,
                    prime: int) -> int:
    """Evaluate a polynomial with Horner's rule; result is in [0, prime)."""
    result = 0
    for coef in reversed(coefficients):
        result = (result * point + int(coef)) % prime
    return result


def naive_transform(values: Sequence[int], omega: int,
                    prime: int) -> List[int]:
    """Point values at omega^0 .. omega^(n-1), one direct evaluation each."""
    return [evaluate_polynomial(values, mod_pow(omega, i, prime), prime)
            for i in range(len(values))]


def multiply_naive(a: Sequence[int], b: Sequence[int],
                   prime: int) -> List[int]:
    """Schoolbook product of two coefficient lists, canonical residues."""
    if len(a) == 0 or len(b) == 0:
        return []
    result = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            result[i + j] = (result[i + j] + int(x) * int(y)) % prime
    return result
