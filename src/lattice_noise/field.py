"""Noise field configuration and grid sampling.

This module wraps the engine in a small, framework-agnostic interface for
callers that render textures:
- NoiseConfig: frequency, octave count, channels, smoothing and strategy
- NoiseField: evaluates a config at arbitrary coordinates
- sample_grid: evaluates a config over a width x height pixel grid, with
  optional scanline parallelism across worker processes
"""

from __future__ import annotations

import logging
import multiprocessing
from dataclasses import dataclass

import numpy as np

from lattice_noise.coherent import coherent_noise, corner_noise
from lattice_noise.octaves import DEFAULT_OCTAVES, octave_noise
from lattice_noise.smoothing import Smoothing, resolve_smoothing

logger = logging.getLogger(__name__)

DEFAULT_FREQUENCY = 8.0

STRATEGIES = {
    "recursive": coherent_noise,
    "corners": corner_noise,
}


@dataclass(frozen=True)
class NoiseConfig:
    """Configuration for sampling a noise field.

    Attributes:
        octaves: number of octaves summed per sample (>= 1)
        frequency: scale applied to coordinates before sampling
        channels: integer tags selecting an independent field
        smoothing: kernel used between lattice values
        strategy: "recursive" or "corners" evaluation of coherent noise
    """

    octaves: int = DEFAULT_OCTAVES
    frequency: float = DEFAULT_FREQUENCY
    channels: tuple[int, ...] = ()
    smoothing: Smoothing = Smoothing.COSINE
    strategy: str = "recursive"

    def __post_init__(self) -> None:
        """Validate and normalize field values."""
        if self.octaves < 1:
            msg = f"octaves must be >= 1, got {self.octaves}"
            raise ValueError(msg)
        if self.frequency <= 0:
            msg = f"frequency must be positive, got {self.frequency}"
            raise ValueError(msg)
        if self.strategy not in STRATEGIES:
            valid = ", ".join(STRATEGIES)
            msg = f"unknown strategy '{self.strategy}', expected one of: {valid}"
            raise ValueError(msg)
        # frozen dataclass, so normalize through object.__setattr__
        object.__setattr__(self, "channels", tuple(int(c) for c in self.channels))
        if isinstance(self.smoothing, str):
            resolve_smoothing(self.smoothing)
            object.__setattr__(self, "smoothing", Smoothing(self.smoothing.lower()))
        elif not isinstance(self.smoothing, Smoothing):
            msg = f"smoothing must be a Smoothing or its name, got {self.smoothing!r}"
            raise ValueError(msg)


class NoiseField:
    """Evaluates a NoiseConfig at arbitrary coordinates.

    holds no state besides the config, so instances can be shared freely
    between threads and pickled into worker processes.
    """

    def __init__(self, config: NoiseConfig | None = None) -> None:
        """Initialize noise field.

        Args:
            config: sampling configuration (uses defaults if not provided)
        """
        self.config = config or NoiseConfig()

    def sample(self, *coords: float) -> float:
        """Sample the field at a point.

        Args:
            *coords: continuous coordinates, scaled by config.frequency

        Returns:
            noise value, approximately in [0, 1)
        """
        cfg = self.config
        return octave_noise(
            cfg.octaves,
            [c * cfg.frequency for c in coords],
            cfg.channels,
            cfg.smoothing,
            noise=STRATEGIES[cfg.strategy],
        )

    def sample_row(self, py: int, width: int, height: int) -> list[float]:
        """Sample one scanline at normalized pixel coordinates.

        Args:
            py: row index
            width: grid width in pixels
            height: grid height in pixels

        Returns:
            list of width noise values
        """
        ry = py / height
        return [self.sample(px / width, ry) for px in range(width)]


def _sample_row_job(args: tuple[NoiseConfig, int, int, int]) -> tuple[int, list[float]]:
    """Top-level, pickle-able scanline job for worker processes."""
    config, py, width, height = args
    return py, NoiseField(config).sample_row(py, width, height)


def sample_grid(
    width: int,
    height: int,
    config: NoiseConfig | None = None,
    workers: int | None = None,
) -> np.ndarray:
    """Evaluate a noise field over a pixel grid.

    pixel (px, py) is sampled at normalized coordinates (px / width,
    py / height), so the grid covers [0, 1) x [0, 1) before frequency
    scaling.

    Args:
        width: number of columns, must be positive
        height: number of rows, must be positive
        config: sampling configuration (uses defaults if not provided)
        workers: worker processes for scanline parallelism; None or 1
            evaluates serially

    Returns:
        float64 array of shape (height, width)

    Raises:
        ValueError: if width, height or workers is not positive
    """
    if width <= 0 or height <= 0:
        msg = f"grid size must be positive, got {width}x{height}"
        raise ValueError(msg)
    if workers is not None and workers <= 0:
        msg = f"workers must be positive, got {workers}"
        raise ValueError(msg)

    config = config or NoiseConfig()
    out = np.zeros((height, width), dtype=np.float64)
    logger.debug(
        "sampling %dx%d grid: octaves=%d frequency=%s channels=%s workers=%s",
        width, height, config.octaves, config.frequency, config.channels, workers,
    )

    if workers is None or workers == 1:
        field = NoiseField(config)
        for py in range(height):
            out[py, :] = field.sample_row(py, width, height)
    else:
        jobs = [(config, py, width, height) for py in range(height)]
        with multiprocessing.Pool(processes=workers) as pool:
            for py, row in pool.imap_unordered(_sample_row_job, jobs):
                out[py, :] = row

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("sampled grid range: min=%.4f max=%.4f", out.min(), out.max())
    return out
