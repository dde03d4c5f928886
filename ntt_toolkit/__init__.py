"""
NTT Toolkit
===========

Exact prime-field arithmetic and Number-Theoretic Transforms for
polynomial work over Z/pZ (evaluation, convolution, secret sharing).

Modules:
    - common: number theory, PrimeField, direct polynomial evaluation
    - transform: radix-2 / radix-3 NTTs, parameter sets, multiplication

Quick Start:
    >>> from ntt_toolkit import ntt, intt, normalize
    >>> points = ntt([1, 2, 3, 4, 5, 6, 7, 8], omega=354, prime=433)
    >>> normalize(points, 433)
    [36, 303, 146, 3, 429, 422, 279, 122]
"""

__version__ = "0.1.0"

from . import common
from . import transform
from .common import (
    PrimeField,
    evaluate_polynomial,
    extended_gcd,
    mod_inverse,
    mod_pow,
    normalize,
)
from .transform import intt, intt2, intt3, multiply_polynomials, ntt, ntt2, ntt3
