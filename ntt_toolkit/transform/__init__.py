"""
Number-Theoretic Transforms.

Key Components:
    - ntt2 / intt2: radix-2 transform for lengths 2^k
    - ntt3 / intt3: radix-3 transform for lengths 3^k
    - ntt / intt: dispatch on length
    - multiply_polynomials: NTT-based convolution over Z_p
    - NTTParams: validated (prime, omega, size, radix) bundles

Usage:
    >>> from ntt_toolkit.transform import ntt2, intt2
    >>> points = ntt2([1, 2, 3, 4, 5, 6, 7, 8], omega=354, prime=433)
    >>> intt2(points, omega=354, prime=433)
    [1, 2, 3, -429, 5, -427, -426, 8]
"""

from .checks import MAX_MAGNITUDE, MAX_MODULUS, is_power_of
from .radix2 import intt2, ntt2
from .radix3 import intt3, ntt3
from .core import intt, multiply_polynomials, ntt, radix_for_length
from .params import (
    NTTParams,
    create_ntt_friendly_params,
    create_radix2_demo_params,
    create_radix3_demo_params,
)

__all__ = [
    "MAX_MAGNITUDE",
    "MAX_MODULUS",
    "is_power_of",
    "ntt2",
    "intt2",
    "ntt3",
    "intt3",
    "ntt",
    "intt",
    "multiply_polynomials",
    "radix_for_length",
    "NTTParams",
    "create_ntt_friendly_params",
    "create_radix2_demo_params",
    "create_radix3_demo_params",
]
