"""
Input checks shared by the radix-2 and radix-3 transforms.

Transform buffers are numpy int64 arrays. To keep every intermediate value
exact, the modulus and the input magnitudes are bounded:

    |B + x*C + x2*D| < 2^31 + 2 * 2^30 * 2^31 = 2^31 + 2^62 < 2^63

which covers the radix-3 combine (the largest expression in either transform)
when p <= MAX_MODULUS and every input satisfies |v| < MAX_MAGNITUDE.
"""

from __future__ import annotations
from typing import Sequence

import numpy as np

from ..common.field import is_root_of_unity

MAX_MODULUS = 1 << 30
MAX_MAGNITUDE = 1 << 31


def is_power_of(n: int, radix: int) -> bool:
    """True if n == radix^k for some k >= 0."""
    if n < 1:
        return False
    while n % radix == 0:
        n //= radix
    return n == 1


def check_modulus(prime: int) -> None:
    """Reject moduli the int64 buffers cannot handle."""
    if prime < 2:
        raise ValueError(f"Modulus must be at least 2, got {prime}")
    if prime > MAX_MODULUS:
        raise OverflowError(f"Modulus {prime} exceeds MAX_MODULUS (2^30); "
                            f"products would overflow int64")


def check_transform_input(values: Sequence[int], omega: int, prime: int,
                          radix: int, validate: bool = True) -> np.ndarray:
    """
    Validate a transform call and return the input as an int64 array.

    Args:
        values: Coefficient or point-value sequence
        omega: Root of unity for the transform
        prime: The modulus
        radix: 2 or 3
        validate: Also check that omega has order exactly len(values)

    Returns:
        A fresh 1-D int64 array holding the values

    Raises:
        ValueError: Non-integer values, wrong shape or length, or omega of
            the wrong order
        OverflowError: Modulus or values too large for int64 arithmetic
    """
    check_modulus(prime)

    # Python ints past int64 arrive as object arrays and fail the cast below
    raw = np.asarray(values)
    if raw.size and raw.dtype.kind not in "iuO":
        raise ValueError(f"Values must be integers, got dtype {raw.dtype}")
    try:
        buf = np.array(raw, dtype=np.int64)
    except OverflowError:
        raise OverflowError("Input values do not fit in int64") from None
    if buf.ndim != 1:
        raise ValueError(f"Expected a 1-D sequence, got shape {buf.shape}")

    n = len(buf)
    if not is_power_of(n, radix):
        raise ValueError(f"Sequence length must be a power of {radix}, got {n}")
    if np.any((buf >= MAX_MAGNITUDE) | (buf <= -MAX_MAGNITUDE)):
        raise OverflowError("Input magnitudes must be below MAX_MAGNITUDE (2^31)")

    # The root is unused for a single element
    if validate and n > 1 and not is_root_of_unity(omega, n, prime):
        raise ValueError(f"{omega} is not a root of unity of order {n} "
                         f"mod {prime}")

    return buf
