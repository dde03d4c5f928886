"""
NTT Parameter Sets.

An NTT is only correct when the modulus is prime, the length is a power of
the radix and omega has order exactly that length. ``NTTParams`` bundles the
four values and checks all of them once, up front, so the transforms can run
with ``validate=False`` afterwards.

Predefined Sets:
    - radix2 demo: p = 433, w = 354, n = 8 (hand-checkable)
    - radix3 demo: p = 433, w = 150, n = 9
    - NTT-friendly: p = 998244353 = 119 * 2^23 + 1, generator 3, n up to 2^23

Example:
    >>> params = create_radix2_demo_params()
    >>> params.forward([1, 2, 3, 4, 5, 6, 7, 8])
    [36, -130, -287, 3, -4, 422, 279, -311]
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from sympy import isprime

from ..common.field import PrimeField, find_root_of_unity, is_root_of_unity
from ..common.numtheory import mod_inverse
from .checks import MAX_MAGNITUDE, MAX_MODULUS, is_power_of
from .radix2 import intt2, ntt2
from .radix3 import intt3, ntt3

FRIENDLY_PRIME = 998244353      # 119 * 2^23 + 1
FRIENDLY_GENERATOR = 3


@dataclass
class NTTParams:
    """
    Validated parameters for one transform size.

    Attributes:
        prime: Prime modulus, at most MAX_MODULUS
        omega: Root of unity of order exactly ``size``
        size: Transform length, a power of ``radix``
        radix: 2 or 3
        name: Label for summaries
    """

    prime: int
    omega: int
    size: int
    radix: int = 2
    name: str = "custom"

    def __post_init__(self):
        """Validate parameters."""
        if self.prime < 2 or not isprime(self.prime):
            raise ValueError(f"Modulus must be prime, got {self.prime}")
        if self.prime > MAX_MODULUS:
            raise ValueError(f"Modulus {self.prime} exceeds MAX_MODULUS "
                             f"({MAX_MODULUS})")
        if self.radix not in (2, 3):
            raise ValueError(f"radix must be 2 or 3, got {self.radix}")
        if not is_power_of(self.size, self.radix):
            raise ValueError(f"size must be a power of {self.radix}, "
                             f"got {self.size}")
        if not is_root_of_unity(self.omega, self.size, self.prime):
            raise ValueError(f"omega={self.omega} does not have order "
                             f"{self.size} mod {self.prime}")

    @property
    def field(self) -> PrimeField:
        return PrimeField(self.prime)

    @property
    def omega_inverse(self) -> int:
        return mod_inverse(self.omega, self.prime)

    @property
    def size_inverse(self) -> int:
        return mod_inverse(self.size, self.prime)

    def forward(self, values: Sequence[int]) -> List[int]:
        """Forward transform of a length-``size`` sequence."""
        self._check_length(values)
        transform = ntt2 if self.radix == 2 else ntt3
        return transform(values, self.omega, self.prime, validate=False)

    def inverse(self, values: Sequence[int]) -> List[int]:
        """Inverse transform of a length-``size`` sequence."""
        self._check_length(values)
        transform = intt2 if self.radix == 2 else intt3
        return transform(values, self.omega, self.prime, validate=False)

    def _check_length(self, values: Sequence[int]) -> None:
        if len(values) != self.size:
            raise ValueError(f"Input must have {self.size} values, "
                             f"got {len(values)}")

    def summary(self) -> str:
        """Return parameter summary string."""
        return (
            f"NTTParams '{self.name}':\n"
            f"  Modulus: {self.prime}\n"
            f"  Radix: {self.radix}\n"
            f"  Size: {self.size}\n"
            f"  Omega: {self.omega} (inverse {self.omega_inverse})\n"
            f"  Size inverse: {self.size_inverse}\n"
            f"  Input bound: |v| < {MAX_MAGNITUDE}"
        )

    def __repr__(self) -> str:
        return (f"NTTParams(name='{self.name}', p={self.prime}, "
                f"n={self.size}, radix={self.radix})")


# =============================================================================
# PREDEFINED PARAMETER SETS
# =============================================================================

def create_radix2_demo_params() -> NTTParams:
    """Z_433 with 354 as an 8th root of unity."""
    return NTTParams(prime=433, omega=354, size=8, radix=2,
                     name="radix2-demo")


def create_radix3_demo_params() -> NTTParams:
    """Z_433 with 150 as a 9th root of unity."""
    return NTTParams(prime=433, omega=150, size=9, radix=3,
                     name="radix3-demo")


def create_ntt_friendly_params(size: int = 1024) -> NTTParams:
    """
    Radix-2 parameters over 998244353.

    The root is derived from the known generator 3, so no factoring of
    p - 1 is needed beyond the order check.

    Args:
        size: Transform length, a power of two up to 2^23
    """
    omega = find_root_of_unity(size, FRIENDLY_PRIME,
                               generator=FRIENDLY_GENERATOR)
    return NTTParams(prime=FRIENDLY_PRIME, omega=omega, size=size, radix=2,
                     name=f"friendly-{size}")


# Example usage
if __name__ == "__main__":
    print("=" * 60)
    print("NTT PARAMETER SETS")
    print("=" * 60)

    for params in [create_radix2_demo_params(),
                   create_radix3_demo_params(),
                   create_ntt_friendly_params(16)]:
        print(f"\n{params.summary()}")
        print("-" * 60)
