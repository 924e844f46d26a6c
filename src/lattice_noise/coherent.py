"""Coherent value noise over an arbitrary number of continuous axes.

each continuous coordinate is collapsed by interpolating between the two
lattice values that bracket it. the lattice coordinate of an axis is
appended to the channel tags, so the leaf lookup is always a single
lattice_hash() call over channels + [n_0, n_1, ...].

two evaluation strategies are provided:
- coherent_noise: direct recursion, one level per axis
- corner_noise: enumerates the 2^N lattice corners and folds them
  axis by axis, innermost axis first

both perform the same floating point operations in the same order and
return identical results. cost is 2^N hash lookups for N axes either way.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from lattice_noise.lattice_hash import lattice_hash
from lattice_noise.smoothing import Smoothing, SmoothingLike, interpolate, resolve_smoothing


def _split_axis(x: float) -> tuple[int, float]:
    """Return (floor(x), x - floor(x)) for a finite coordinate."""
    if not math.isfinite(x):
        msg = f"noise coordinates must be finite, got {x}"
        raise ValueError(msg)
    n = math.floor(x)
    return n, x - n


def _coherent(
    xs: tuple[float, ...],
    channels: tuple[int, ...],
    kernel: Callable[[float], float],
) -> float:
    if not xs:
        return lattice_hash(channels)

    n, frac = _split_axis(xs[0])
    rest = xs[1:]
    inf = _coherent(rest, (*channels, n), kernel)
    sup = _coherent(rest, (*channels, n + 1), kernel)
    return interpolate(kernel, frac, 0.0, 1.0, inf, sup)


def coherent_noise(
    xs: Sequence[float],
    channels: Sequence[int] = (),
    smoothing: SmoothingLike | str = Smoothing.COSINE,
) -> float:
    """Sample coherent value noise at a point.

    Args:
        xs: continuous coordinates, any number of axes (including none)
        channels: integer tags that select an independent noise field
        smoothing: kernel used between lattice values (default: cosine ease)

    Returns:
        noise value in [0, 1); integer coordinates return the lattice value

    Raises:
        ValueError: if any coordinate is nan or infinite
    """
    kernel = resolve_smoothing(smoothing)
    return _coherent(tuple(float(x) for x in xs), tuple(int(c) for c in channels), kernel)


def corner_noise(
    xs: Sequence[float],
    channels: Sequence[int] = (),
    smoothing: SmoothingLike | str = Smoothing.COSINE,
) -> float:
    """Sample coherent value noise without recursion.

    Same contract and results as coherent_noise().

    Args:
        xs: continuous coordinates, any number of axes (including none)
        channels: integer tags that select an independent noise field
        smoothing: kernel used between lattice values (default: cosine ease)

    Returns:
        noise value in [0, 1)

    Raises:
        ValueError: if any coordinate is nan or infinite
    """
    kernel = resolve_smoothing(smoothing)
    prefix = tuple(int(c) for c in channels)
    axes = [_split_axis(float(x)) for x in xs]
    dims = len(axes)

    # corner index bits, most significant first, pick n or n + 1 on each axis
    values = []
    for corner in range(1 << dims):
        key = list(prefix)
        for axis, (n, _) in enumerate(axes):
            key.append(n + ((corner >> (dims - 1 - axis)) & 1))
        values.append(lattice_hash(key))

    for axis in range(dims - 1, -1, -1):
        frac = axes[axis][1]
        values = [
            interpolate(kernel, frac, 0.0, 1.0, values[i], values[i + 1])
            for i in range(0, len(values), 2)
        ]
    return values[0]
