"""
Tests for brush falloff curves.
"""

import numpy as np
import pytest
from py_heightbrush.core.easing import (
    ease_in_back, ease_in_out_back, ease_in_out_cubic, get_easing, list_easings
)
from py_heightbrush.core.exceptions import UnknownEasingError


class TestEaseInOutCubic:
    """Test the default circular brush falloff."""

    def test_boundary_values(self):
        """Curve starts at 0 and ends at 1."""
        assert ease_in_out_cubic(0.0) == 0.0
        assert ease_in_out_cubic(1.0) == 1.0

    def test_midpoint(self):
        """Curve is symmetric around its midpoint."""
        assert ease_in_out_cubic(0.5) == pytest.approx(0.5)
        assert ease_in_out_cubic(0.25) == pytest.approx(0.1)
        assert ease_in_out_cubic(0.25) + ease_in_out_cubic(0.75) == pytest.approx(1.0)

    def test_monotonic(self):
        """Curve never decreases on [0, 1]."""
        t = np.linspace(0.0, 1.0, 1001)
        values = ease_in_out_cubic(t)

        assert np.all(np.diff(values) >= 0)
        assert values.min() >= 0.0

    def test_scalar_and_array_agree(self):
        """Vectorized evaluation matches scalar evaluation."""
        t = np.array([0.1, 0.3, 0.6, 0.9])
        expected = [ease_in_out_cubic(float(v)) for v in t]

        np.testing.assert_allclose(ease_in_out_cubic(t), expected)


class TestEaseInOutBack:
    """Test the overshooting alternative falloff."""

    def test_boundary_values(self):
        assert ease_in_out_back(0.0) == 0.0
        assert ease_in_out_back(1.0) == pytest.approx(1.0)
        assert ease_in_out_back(0.5) == pytest.approx(0.5)

    def test_overshoots(self):
        """The back curve dips below zero early on."""
        assert ease_in_back(0.2) < 0
        assert ease_in_out_back(0.1) < 0

    def test_array_input(self):
        t = np.array([0.1, 0.4, 0.6, 0.9])
        expected = [ease_in_out_back(float(v)) for v in t]

        np.testing.assert_allclose(ease_in_out_back(t), expected)


class TestEasingRegistry:
    """Test looking up falloff curves by name."""

    def test_lookup(self):
        assert get_easing("in_out_cubic") is ease_in_out_cubic
        assert get_easing("in_out_back") is ease_in_out_back
        assert list_easings() == ["in_out_back", "in_out_cubic"]

    def test_unknown(self):
        with pytest.raises(UnknownEasingError):
            get_easing("bounce")
