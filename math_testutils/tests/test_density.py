"""
Tests for zero-mass point elimination.
"""

import numpy as np
import pytest

from math_testutils.density import eliminate_zero_mass_points


class TestEliminateZeroMassPoints:
    """Tests for eliminate_zero_mass_points."""

    def test_compacts_arrays(self):
        points = np.array([10, 20, 30, 40])
        values = np.array([0.0, 5.0, 0.0, 7.0])

        k = eliminate_zero_mass_points(points, values)

        assert k == 2
        np.testing.assert_array_equal(points[:k], [20, 40])
        np.testing.assert_array_equal(values[:k], [5.0, 7.0])

    def test_compacts_lists(self):
        points = [10, 20, 30, 40]
        values = [0.0, 5.0, 0.0, 7.0]

        k = eliminate_zero_mass_points(points, values)

        assert k == 2
        assert points[:k] == [20, 40]
        assert values[:k] == [5.0, 7.0]
        assert len(points) == 4 and len(values) == 4

    def test_negative_and_nan_mass_dropped(self):
        points = [1, 2, 3, 4, 5]
        values = [0.1, -0.2, float("nan"), 0.3, 0.0]

        k = eliminate_zero_mass_points(points, values)

        assert k == 2
        assert points[:k] == [1, 4]
        assert values[:k] == [0.1, 0.3]

    def test_all_positive_is_noop(self):
        points = np.array([3, 1, 2])
        values = np.array([0.5, 0.25, 0.25])

        k = eliminate_zero_mass_points(points, values)

        assert k == 3
        np.testing.assert_array_equal(points, [3, 1, 2])
        np.testing.assert_array_equal(values, [0.5, 0.25, 0.25])

    @pytest.mark.parametrize("n", [0, 3])
    def test_no_positive_mass(self, n):
        points = list(range(n))
        values = [0.0] * n

        assert eliminate_zero_mass_points(points, values) == 0

    def test_preserves_relative_order(self, rng):
        points = np.arange(200)
        values = rng.uniform(-1.0, 1.0, size=200)
        keep = values > 0
        expected_points = points[keep].copy()
        expected_values = values[keep].copy()

        k = eliminate_zero_mass_points(points, values)

        assert k == int(keep.sum())
        np.testing.assert_array_equal(points[:k], expected_points)
        np.testing.assert_array_equal(values[:k], expected_values)
