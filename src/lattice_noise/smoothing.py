"""Smoothing kernels and the shared interpolation helper.

kernels map [0, 1] onto [0, 1], clamping outside that interval. they are
exposed both as plain functions and through the Smoothing enum, which is
the strategy value accepted by the noise functions.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum
from typing import Union


def smoothcos(x: float) -> float:
    """Half-cosine ease between 0 and 1."""
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    return (math.cos((1.0 - x) * math.pi) + 1.0) / 2.0


def smoothstep(x: float) -> float:
    """Cubic smoothstep x^2 (3 - 2x), clamped to [0, 1]."""
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    return x * x * (3.0 - 2.0 * x)


def identity(x: float) -> float:
    """Linear pass-through (no easing)."""
    return x


class Smoothing(Enum):
    """Closed set of smoothing kernels.

    Attributes:
        COSINE: half-cosine ease, the default for coherent noise
        SMOOTHSTEP: cubic smoothstep
        IDENTITY: plain linear interpolation
    """

    COSINE = "cosine"
    SMOOTHSTEP = "smoothstep"
    IDENTITY = "identity"

    def apply(self, x: float) -> float:
        """Evaluate this kernel at x."""
        if self is Smoothing.COSINE:
            return smoothcos(x)
        if self is Smoothing.SMOOTHSTEP:
            return smoothstep(x)
        return identity(x)


SmoothingLike = Union[Smoothing, Callable[[float], float]]


def resolve_smoothing(smoothing: SmoothingLike | str) -> Callable[[float], float]:
    """Turn a Smoothing member, its name/value, or a callable into a kernel.

    Args:
        smoothing: enum member, enum value string (e.g. "cosine"), or callable

    Returns:
        callable kernel

    Raises:
        ValueError: if a string does not name a known kernel
        TypeError: if smoothing is neither a string, enum nor callable
    """
    if isinstance(smoothing, Smoothing):
        return smoothing.apply
    if isinstance(smoothing, str):
        try:
            return Smoothing(smoothing.lower()).apply
        except ValueError:
            valid = ", ".join(s.value for s in Smoothing)
            msg = f"unknown smoothing '{smoothing}', expected one of: {valid}"
            raise ValueError(msg) from None
    if callable(smoothing):
        return smoothing
    msg = f"smoothing must be a Smoothing, str or callable, got {type(smoothing).__name__}"
    raise TypeError(msg)


def interpolate(
    smoothing: SmoothingLike | str,
    x: float,
    x_inf: float,
    x_sup: float,
    dst_inf: float,
    dst_sup: float,
) -> float:
    """Map x from [x_inf, x_sup] onto [dst_inf, dst_sup] through a kernel.

    Args:
        smoothing: kernel applied to the normalized position
        x: position to interpolate at
        x_inf: source interval start
        x_sup: source interval end, must differ from x_inf
        dst_inf: value at x_inf
        dst_sup: value at x_sup

    Returns:
        dst_inf + smoothing(ratio) * (dst_sup - dst_inf)

    Raises:
        ValueError: if x_inf == x_sup
    """
    if x_sup == x_inf:
        msg = f"interpolation interval is empty: x_inf == x_sup == {x_inf}"
        raise ValueError(msg)
    kernel = resolve_smoothing(smoothing)
    ratio = (x - x_inf) / (x_sup - x_inf)
    return dst_inf + kernel(ratio) * (dst_sup - dst_inf)
