"""
Integer Number Theory for Prime-Field Transforms.

This module holds the scalar building blocks every transform relies on:
extended gcd, modular inverse and modular exponentiation.

Sign Conventions:
    Python's ``//`` and ``%`` round toward negative infinity. The routines here
    use *truncated* division instead (quotient rounds toward zero, remainder
    takes the sign of the dividend), so results can be negative:

    - mod_inverse: always canonical, in [0, p)
    - mod_pow: NOT normalized, e.g. mod_pow(-3, 1, 17) == -3
    - normalize: maps anything into [0, p)

    Callers that need canonical residues apply ``normalize`` themselves.

Example:
    >>> extended_gcd(12, 16)
    (4, -1, 1)
    >>> mod_inverse(3, 7)
    5
    >>> mod_pow(2, 6, 17)
    13
"""

from __future__ import annotations
from numbers import Integral
from typing import List, Sequence, Tuple, Union


def trunc_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def trunc_mod(a: int, b: int) -> int:
    """
    Remainder of truncated division.

    The result has the sign of ``a`` and satisfies
    ``a == trunc_div(a, b) * b + trunc_mod(a, b)``.

    Example:
        >>> trunc_mod(-7, 3)
        -1
        >>> -7 % 3
        2
    """
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _egcd(a: int, b: int) -> Tuple[int, int, int]:
    if b == 0:
        return a, 1, 0
    n = trunc_div(a, b)
    c = trunc_mod(a, b)
    g, x, y = _egcd(b, c)
    return g, y, x - y * n


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm.

    Finds (g, x, y) such that a*x + b*y = g = gcd(a, b).

    Args:
        a: First integer (any sign)
        b: Second integer (any sign)

    Returns:
        Tuple (g, x, y) with g >= 0. ``extended_gcd(0, 0)`` is (0, 1, 0).
    """
    g, x, y = _egcd(a, b)
    if g < 0:
        # Only reachable with negative inputs; flipping keeps a*x + b*y == g
        return -g, -x, -y
    return g, x, y


def mod_inverse(k: int, prime: int) -> int:
    """
    Compute the multiplicative inverse of k modulo prime.

    Finds r in [0, prime) with k * r ≡ 1 (mod prime). Works for negative k.

    Args:
        k: Value to invert (must not be a multiple of prime)
        prime: The modulus, normally prime

    Returns:
        The canonical inverse

    Raises:
        ValueError: If prime < 2 or no inverse exists
    """
    if prime < 2:
        raise ValueError(f"Modulus must be at least 2, got {prime}")

    k2 = trunc_mod(k, prime)
    if k2 < 0:
        g, _, r = _egcd(prime, -k2)
        r = -r
    else:
        g, _, r = _egcd(prime, k2)

    if g != 1:
        raise ValueError(f"No inverse exists (gcd = {g})")

    return (prime + r) % prime


def mod_pow(x: int, e: int, prime: int) -> int:
    """
    Compute x^e mod prime using square-and-multiply.

    Bits of the exponent are consumed from least to most significant.
    Reduction uses the truncated remainder, so a negative base can give
    a negative result (``mod_pow(-3, 15, 17) == -6``).

    Raises:
        ValueError: If e is negative
    """
    if e < 0:
        raise ValueError(f"Exponent must be non-negative, got {e}")

    acc = 1
    while e > 0:
        if e & 1:
            acc = trunc_mod(acc * x, prime)
        x = trunc_mod(x * x, prime)
        e >>= 1
    return acc


def normalize(value: Union[int, Sequence[int]],
              prime: int) -> Union[int, List[int]]:
    """Map a value (or every value of a sequence) into [0, prime)."""
    if isinstance(value, Integral):
        return ((int(value) % prime) + prime) % prime
    return [((int(v) % prime) + prime) % prime for v in value]


# Example usage
if __name__ == "__main__":
    print("=" * 60)
    print("NUMBER THEORY DEMO")
    print("=" * 60)

    print(f"\nextended_gcd(12, 16) = {extended_gcd(12, 16)}")
    print(f"mod_inverse(3, 7)    = {mod_inverse(3, 7)}  (3 * 5 = 15 ≡ 1 mod 7)")
    print(f"mod_pow(2, 6, 17)    = {mod_pow(2, 6, 17)}")
    print(f"mod_pow(-3, 15, 17)  = {mod_pow(-3, 15, 17)}  "
          f"(normalized: {normalize(mod_pow(-3, 15, 17), 17)})")
