"""
Prime Field Helper for NTT Computations.

This module wraps a prime modulus together with the arithmetic and the
root-of-unity machinery an NTT needs. The raw number theory lives in
``numtheory``; ``PrimeField`` adds canonical-result arithmetic on top of it.

Key Concepts:
    - Z_p* is cyclic of order p - 1, generated by a primitive root g
    - An n-th root of unity exists iff n divides p - 1
    - If it exists, w = g^((p-1)/n) has order exactly n
    - A size-n radix-2 NTT therefore needs 2^k | p - 1 (radix-3: 3^k | p - 1)

Example:
    >>> field = PrimeField(433)   # 432 = 2^4 * 3^3
    >>> field.supports_size(8), field.supports_size(27)
    (True, True)
    >>> field.is_root_of_unity(354, 8)
    True
    >>> field.inv(354)
    285

NTT-Friendly Primes:
    - 433: tiny, holds both 16th and 27th roots (good for hand-checking)
    - 998244353 = 119 * 2^23 + 1: roots up to order 2^23, generator 3
"""

from __future__ import annotations
from typing import List, Optional
import random

from sympy import factorint, isprime
from sympy.ntheory import primitive_root as _sympy_primitive_root

from .numtheory import mod_inverse, mod_pow, normalize


def is_root_of_unity(omega: int, n: int, prime: int) -> bool:
    """
    Check that omega has multiplicative order exactly n modulo prime.

    omega^n must be 1, and omega^(n/q) must not be 1 for any prime q | n.
    """
    if n < 1:
        return False
    if mod_pow(omega, n, prime) % prime != 1:
        return False
    return all(mod_pow(omega, n // q, prime) % prime != 1
               for q in factorint(n))


def primitive_root(prime: int) -> int:
    """Smallest generator of the multiplicative group mod prime."""
    return _sympy_primitive_root(prime)


def find_root_of_unity(n: int, prime: int,
                       generator: Optional[int] = None) -> int:
    """
    Find an element of order exactly n modulo prime.

    Args:
        n: Desired order (must divide prime - 1)
        prime: The prime modulus
        generator: Primitive root to derive from (computed if omitted)

    Returns:
        g^((prime-1)/n) mod prime

    Raises:
        ValueError: If prime is not prime or n does not divide prime - 1
    """
    if not isprime(prime):
        raise ValueError(f"Modulus must be prime, got {prime}")
    if n < 1 or (prime - 1) % n != 0:
        raise ValueError(f"No root of unity of order {n} mod {prime} "
                         f"({n} does not divide {prime - 1})")
    if generator is None:
        generator = primitive_root(prime)
    return pow(generator, (prime - 1) // n, prime)


class PrimeField:
    """
    A prime field Z_p for NTT arithmetic.

    Attributes:
        prime: The prime modulus p

    Example:
        >>> field = PrimeField(17)
        >>> field.sub(3, 5)
        15
        >>> field.pow(-3, 15)   # mod_pow gives -6, normalized here
        11
    """

    def __init__(self, prime: int):
        """
        Initialize a prime field.

        Args:
            prime: The prime modulus. Should be prime for correct behavior.
                   (We don't verify primality for performance reasons)
        """
        if prime < 2:
            raise ValueError("Prime must be at least 2")
        self.prime = prime
        self._generator: Optional[int] = None

    def __repr__(self) -> str:
        return f"PrimeField({self.prime})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PrimeField) and other.prime == self.prime

    def __hash__(self) -> int:
        return hash(self.prime)

    # Canonical arithmetic: every result is in [0, p)

    def add(self, a: int, b: int) -> int:
        """Add two integers in the field."""
        return (a + b) % self.prime

    def sub(self, a: int, b: int) -> int:
        """Subtract two integers in the field."""
        return (a - b) % self.prime

    def mul(self, a: int, b: int) -> int:
        """Multiply two integers in the field."""
        return (a * b) % self.prime

    def neg(self, a: int) -> int:
        """Negate an integer in the field."""
        return (-a) % self.prime

    def inv(self, a: int) -> int:
        """Compute modular inverse of an integer."""
        return mod_inverse(a, self.prime)

    def pow(self, base: int, exp: int) -> int:
        """Compute base^exp in the field."""
        return normalize(mod_pow(base, exp, self.prime), self.prime)

    def normalize(self, value):
        """Reduce an int or a sequence of ints into [0, p)."""
        return normalize(value, self.prime)

    # Roots of unity

    def supports_size(self, n: int) -> bool:
        """True when the field holds an n-th root of unity."""
        return n >= 1 and (self.prime - 1) % n == 0

    def is_root_of_unity(self, omega: int, n: int) -> bool:
        """Check that omega has order exactly n."""
        return is_root_of_unity(omega, n, self.prime)

    def primitive_root(self) -> int:
        """Generator of Z_p* (cached after the first call)."""
        if self._generator is None:
            self._generator = primitive_root(self.prime)
        return self._generator

    def root_of_unity(self, n: int) -> int:
        """Return an element of order exactly n."""
        return find_root_of_unity(n, self.prime,
                                  generator=self.primitive_root())

    def random_vector(self, n: int, exclude_zero: bool = False) -> List[int]:
        """
        Generate n random field elements.

        Args:
            n: Number of elements
            exclude_zero: If True, never returns zero (useful for testing inverses)
        """
        low = 1 if exclude_zero else 0
        return [random.randint(low, self.prime - 1) for _ in range(n)]


# Example usage
if __name__ == "__main__":
    print("=" * 60)
    print("PRIME FIELD DEMO")
    print("=" * 60)

    field = PrimeField(433)
    print(f"\nField: Z_{field.prime}  (p - 1 = {field.prime - 1} = "
          f"{factorint(field.prime - 1)})")
    print(f"Primitive root: {field.primitive_root()}")

    for n in [2, 3, 4, 8, 9, 16, 27]:
        w = field.root_of_unity(n)
        print(f"  order {n:>2}: w = {w:>3}, w^{n} = {field.pow(w, n)}")

    print(f"\n354 is an 8th root of unity: {field.is_root_of_unity(354, 8)}")
    print(f"150 is a 9th root of unity:  {field.is_root_of_unity(150, 9)}")
