"""Deterministic value-noise engine for procedural textures.

Given a point in an N-dimensional continuous space plus a few integer
"channel" tags, the engine returns a reproducible value in [0, 1) that
varies smoothly between integer lattice points. There is no seed and no
global state: the same inputs always give the same output.

Quick Start:
    from lattice_noise import coherent_noise, octave_noise

    # single octave, two continuous axes, red channel
    r = coherent_noise([rx * 8.0, ry * 8.0], [1])

    # fractal noise, same coordinates, decorrelated green channel
    g = octave_noise(5, [rx * 8.0, ry * 8.0], [2])

Grid Sampling:
    from lattice_noise import NoiseConfig, sample_grid

    config = NoiseConfig(octaves=6, frequency=16.0, channels=(3,))
    values = sample_grid(800, 800, config, workers=4)  # numpy (800, 800)

Features:
    - order-sensitive 64-bit lattice hash
    - recursive and corner-enumeration coherent noise (identical results)
    - pluggable smoothing: cosine ease, cubic smoothstep, identity
    - normalized octave summation
"""

import logging

from lattice_noise.coherent import coherent_noise, corner_noise
from lattice_noise.field import NoiseConfig, NoiseField, sample_grid
from lattice_noise.lattice_hash import lattice_hash
from lattice_noise.octaves import octave_noise
from lattice_noise.smoothing import (
    Smoothing,
    identity,
    interpolate,
    smoothcos,
    smoothstep,
)

__all__ = [
    "NoiseConfig",
    "NoiseField",
    "Smoothing",
    "coherent_noise",
    "corner_noise",
    "identity",
    "interpolate",
    "lattice_hash",
    "octave_noise",
    "sample_grid",
    "smoothcos",
    "smoothstep",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
