"""Fractal (multi-octave) noise built on coherent_noise.

drop-in replacement for the usual fbm helpers: persistence is fixed at 0.5
and lacunarity at 2.0, and the result is normalized by the sum of octave
weights so it stays in the same [0, 1) range as a single octave.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from lattice_noise.coherent import coherent_noise
from lattice_noise.smoothing import Smoothing, SmoothingLike

DEFAULT_OCTAVES = 4

# per-octave multipliers
PERSISTENCE = 0.5
LACUNARITY = 2.0

NoiseFunction = Callable[..., float]


def _scale(x: float) -> float:
    """Double a coordinate, holding it in place once doubling would overflow."""
    scaled = x * LACUNARITY
    return scaled if math.isfinite(scaled) else x


def octave_noise(
    octave_count: int,
    xs: Sequence[float],
    channels: Sequence[int] = (),
    smoothing: SmoothingLike | str = Smoothing.COSINE,
    noise: NoiseFunction = coherent_noise,
) -> float:
    """Sum octaves of coherent noise at doubling frequency, halving weight.

    The first octave samples xs as given (base frequency included). Each
    following octave doubles every coordinate and halves the weight. A
    coordinate whose doubling would overflow to infinity is held at its
    last finite value.

    Args:
        octave_count: number of octaves, must be >= 1
        xs: continuous coordinates
        channels: integer tags that select an independent noise field
        smoothing: kernel passed through to the noise function
        noise: per-octave evaluation strategy, coherent_noise or corner_noise

    Returns:
        weighted average of the octave samples, approximately in [0, 1)

    Raises:
        ValueError: if octave_count is less than 1
    """
    if octave_count < 1:
        msg = f"octave_count must be >= 1, got {octave_count}"
        raise ValueError(msg)

    coords = [float(x) for x in xs]
    coefficient = 1.0
    weighted_sum = 0.0
    coefficient_sum = 0.0

    for _ in range(octave_count):
        weighted_sum += coefficient * noise(coords, channels, smoothing)
        coefficient_sum += coefficient
        coefficient *= PERSISTENCE
        coords = [_scale(x) for x in coords]

    return weighted_sum / coefficient_sum
