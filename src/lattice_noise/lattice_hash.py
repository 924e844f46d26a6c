"""Lattice hash: integer sequence to a deterministic value in [0, 1).

the hash folds each integer into two accumulators, mixing in the
position of the value and a data-dependent shift, then maps the result
through cos() and keeps the fractional part. all integer arithmetic wraps
as 64-bit two's complement so results do not depend on python's
unbounded ints.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

INT64_BITS = 64
INT64_MASK = (1 << INT64_BITS) - 1
INT64_SIGN = 1 << (INT64_BITS - 1)

# constants of the positional mix: b ^= POSITION_STRIDE * (i + POSITION_OFFSET) + x
POSITION_STRIDE = 17
POSITION_OFFSET = 11

# shift = (i + SHIFT_OFFSET) mod max(1, (b mod SHIFT_MODULUS) + SHIFT_BIAS)
SHIFT_OFFSET = 7
SHIFT_MODULUS = 11
SHIFT_BIAS = 5

# largest float strictly below 1.0
_BELOW_ONE = math.nextafter(1.0, 0.0)


def _wrap64(value: int) -> int:
    """Reduce an int to its signed 64-bit two's complement image."""
    value &= INT64_MASK
    if value & INT64_SIGN:
        value -= 1 << INT64_BITS
    return value


def _trunc_rem(value: int, modulus: int) -> int:
    """Remainder with the sign of the dividend (truncating division)."""
    rem = abs(value) % modulus
    return -rem if value < 0 else rem


def fractional_part(value: float) -> float:
    """Return value - floor(value), kept strictly below 1.0.

    Args:
        value: finite float

    Returns:
        fractional part in [0, 1)
    """
    frac = value - math.floor(value)
    # tiny negative inputs round up to exactly 1.0
    if frac >= 1.0:
        return _BELOW_ONE
    return frac


def lattice_hash(coords: Sequence[int]) -> float:
    """Hash a sequence of integers to a pseudo-random value in [0, 1).

    The hash is order sensitive: permutations of the same values generally
    produce different results. An empty sequence hashes to exactly 0.0.

    Args:
        coords: lattice coordinates and channel tags, in lookup order

    Returns:
        deterministic value in [0, 1)

    Raises:
        ValueError: if a value is a float with a fractional part (or not finite)
    """
    a = 0
    b = 0
    for i, x in enumerate(coords):
        if isinstance(x, float) and not x.is_integer():
            msg = f"lattice coordinates must be integral, got {x} at position {i}"
            raise ValueError(msg)
        x = _wrap64(int(x))
        a ^= x
        b = _wrap64(b ^ (POSITION_STRIDE * (i + POSITION_OFFSET) + x))
        a, b = b, a
        shift = (i + SHIFT_OFFSET) % max(1, _trunc_rem(b, SHIFT_MODULUS) + SHIFT_BIAS)
        a = _wrap64(a ^ (a << shift))
    return fractional_part(math.cos(float(a) + float(b)))
