"""Tests for angle helpers."""

import math

import pytest
import numpy as np
from planar_arm.angles import (
    angle_difference_degrees, deg_to_rad, normalize_angle_degrees, rad_to_deg
)

SAMPLES = [0.0, -0.0, 45.0, 180.0, -180.0, 181.0, -181.0, 359.999, 360.0,
           540.0, -540.0, 720.5, -1e-12, 1e6 + 0.25, -123456.789]


class TestNormalizeAngle:

    @pytest.mark.parametrize("angle,expected", [
        (0.0, 0.0), (90.0, 90.0), (180.0, 180.0), (-180.0, 180.0),
        (190.0, -170.0), (-190.0, 170.0), (360.0, 0.0), (450.0, 90.0),
        (540.0, 180.0), (-540.0, 180.0), (-720.0, 0.0),
    ])
    def test_known_values(self, angle, expected):
        assert normalize_angle_degrees(angle) == pytest.approx(expected)

    @pytest.mark.parametrize("angle", [-0.0, 360.0, -360.0, -720.0])
    def test_no_negative_zero(self, angle):
        result = normalize_angle_degrees(angle)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    @pytest.mark.parametrize("angle", SAMPLES)
    def test_range(self, angle):
        assert -180.0 < normalize_angle_degrees(angle) <= 180.0

    @pytest.mark.parametrize("angle", SAMPLES)
    def test_idempotent(self, angle):
        once = normalize_angle_degrees(angle)
        assert normalize_angle_degrees(once) == once

    @pytest.mark.parametrize("angle", SAMPLES)
    def test_congruent(self, angle):
        diff = (normalize_angle_degrees(angle) - angle) / 360.0
        assert diff == pytest.approx(round(diff), abs=1e-9)

    def test_accepts_numpy_scalars(self):
        result = normalize_angle_degrees(np.float64(270.0))
        assert type(result) is float
        assert result == -90.0


class TestConversions:

    def test_deg_to_rad(self):
        assert deg_to_rad(180.0) == pytest.approx(np.pi)

    def test_rad_to_deg_array(self):
        out = rad_to_deg(np.array([0.0, np.pi / 2, -np.pi]))
        assert np.allclose(out, [0.0, 90.0, -180.0])


class TestAngleDifference:

    def test_wraps_across_seam(self):
        assert angle_difference_degrees(-170.0, 170.0) == pytest.approx(20.0)
        assert angle_difference_degrees(170.0, -170.0) == pytest.approx(-20.0)

    def test_equal_angles(self):
        assert angle_difference_degrees(180.0, -180.0) == 0.0
