"""Unit tests for smoothing kernels and interpolation."""

import math

import numpy as np
import pytest

from lattice_noise.smoothing import (
    Smoothing,
    identity,
    interpolate,
    resolve_smoothing,
    smoothcos,
    smoothstep,
)


class TestKernels:
    """Tests for smoothcos, smoothstep and identity."""

    @pytest.mark.parametrize("kernel", [smoothcos, smoothstep])
    def test_endpoints(self, kernel) -> None:
        """kernels hit 0 and 1 exactly at the interval ends."""
        assert kernel(0.0) == 0.0
        assert kernel(1.0) == 1.0

    @pytest.mark.parametrize("kernel", [smoothcos, smoothstep])
    def test_clamps_outside_interval(self, kernel) -> None:
        """inputs below 0 map to 0, above 1 map to 1."""
        assert kernel(-3.0) == 0.0
        assert kernel(-1e-9) == 0.0
        assert kernel(1.0 + 1e-9) == 1.0
        assert kernel(42.0) == 1.0

    @pytest.mark.parametrize("kernel", [smoothcos, smoothstep])
    def test_monotonic(self, kernel) -> None:
        """kernels never decrease across [0, 1]."""
        # given
        ts = np.linspace(-0.5, 1.5, 2001)

        # when
        values = np.array([kernel(float(t)) for t in ts])

        # then
        assert np.all(np.diff(values) >= -1e-15)
        assert values.min() >= 0.0
        assert values.max() <= 1.0

    @pytest.mark.parametrize("kernel", [smoothcos, smoothstep])
    def test_midpoint(self, kernel) -> None:
        """both kernels are symmetric around (0.5, 0.5)."""
        assert kernel(0.5) == pytest.approx(0.5, abs=1e-12)
        assert kernel(0.25) + kernel(0.75) == pytest.approx(1.0, abs=1e-12)

    def test_smoothcos_formula(self) -> None:
        """interior values follow (cos((1 - x) pi) + 1) / 2."""
        assert smoothcos(0.3) == (math.cos((1.0 - 0.3) * math.pi) + 1.0) / 2.0

    def test_smoothstep_formula(self) -> None:
        """interior values follow x^2 (3 - 2x)."""
        assert smoothstep(0.3) == pytest.approx(0.09 * 2.4)

    def test_identity_passes_through(self) -> None:
        """identity does not clamp."""
        assert identity(0.3) == 0.3
        assert identity(-2.0) == -2.0


class TestSmoothingEnum:
    """Tests for Smoothing dispatch and resolution."""

    def test_apply_dispatches(self) -> None:
        """each member evaluates its own kernel."""
        assert Smoothing.COSINE.apply(0.3) == smoothcos(0.3)
        assert Smoothing.SMOOTHSTEP.apply(0.3) == smoothstep(0.3)
        assert Smoothing.IDENTITY.apply(0.3) == 0.3

    def test_resolve_by_name(self) -> None:
        """strings resolve case-insensitively to enum kernels."""
        assert resolve_smoothing("SmoothStep")(0.3) == smoothstep(0.3)

    def test_resolve_callable(self) -> None:
        """plain callables are used as-is."""
        kernel = lambda t: t * t  # noqa: E731
        assert resolve_smoothing(kernel) is kernel

    def test_resolve_unknown_name_raises(self) -> None:
        """unknown names list the valid choices."""
        with pytest.raises(ValueError, match="cosine, smoothstep, identity"):
            resolve_smoothing("quintic")

    def test_resolve_wrong_type_raises(self) -> None:
        """non-callable values are rejected."""
        with pytest.raises(TypeError, match="int"):
            resolve_smoothing(3)


class TestInterpolate:
    """Tests for interpolate."""

    def test_linear_blend(self) -> None:
        """identity kernel gives plain linear interpolation."""
        assert interpolate(identity, 5.0, 0.0, 10.0, 100.0, 200.0) == 150.0
        assert interpolate(Smoothing.IDENTITY, 2.5, 0.0, 10.0, 0.0, 1.0) == 0.25

    def test_endpoints_recovered(self) -> None:
        """x at either end returns the matching destination value."""
        assert interpolate(smoothcos, 2.0, 2.0, 4.0, 0.25, 0.75) == 0.25
        assert interpolate(smoothcos, 4.0, 2.0, 4.0, 0.25, 0.75) == 0.75

    def test_eased_blend_clamps_outside_interval(self) -> None:
        """eased kernels saturate beyond the interval."""
        assert interpolate(Smoothing.SMOOTHSTEP, -5.0, 0.0, 1.0, 0.25, 0.75) == 0.25
        assert interpolate("cosine", 7.0, 0.0, 1.0, 0.25, 0.75) == 0.75

    def test_empty_interval_raises(self) -> None:
        """x_inf == x_sup is a precondition violation."""
        with pytest.raises(ValueError, match="x_inf == x_sup"):
            interpolate(identity, 1.0, 3.0, 3.0, 0.0, 1.0)
