"""shared fixtures for noise engine tests."""

import numpy as np
import pytest


@pytest.fixture()
def sample_points():
    """200 reproducible 2d points spread over [-20, 20)."""
    rng = np.random.default_rng(1234)
    return [tuple(p) for p in rng.uniform(-20.0, 20.0, size=(200, 2)).tolist()]


@pytest.fixture()
def lattice_grid():
    """20x20 grid of points, offset from the integer lattice."""
    return [(x + 0.37, y + 0.61) for y in range(20) for x in range(20)]
