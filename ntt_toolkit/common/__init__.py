"""
Common utilities for the NTT toolkit.

This module provides:
    - Integer number theory (extended gcd, inverse, exponentiation)
    - Prime field helper with root-of-unity discovery (PrimeField)
    - Direct polynomial evaluation (the transform oracle)
"""

from .numtheory import (
    extended_gcd,
    mod_inverse,
    mod_pow,
    normalize,
    trunc_div,
    trunc_mod,
)
from .field import PrimeField, find_root_of_unity, is_root_of_unity
from .polynomial import (
    evaluate_horner,
    evaluate_polynomial,
    multiply_naive,
    naive_transform,
)

__all__ = [
    "extended_gcd",
    "mod_inverse",
    "mod_pow",
    "normalize",
    "trunc_div",
    "trunc_mod",
    "PrimeField",
    "find_root_of_unity",
    "is_root_of_unity",
    "evaluate_horner",
    "evaluate_polynomial",
    "multiply_naive",
    "naive_transform",
]
