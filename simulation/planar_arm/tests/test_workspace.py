"""Tests for workspace limits and boundary sampling."""

import pytest
import numpy as np
from planar_arm.workspace import circle_points, reach_limits, workspace_boundary


class TestReachLimits:

    def test_longer_first_link(self):
        assert reach_limits(150.0, 100.0) == (50.0, 250.0)

    def test_longer_second_link(self):
        assert reach_limits(100.0, 150.0) == (50.0, 250.0)

    def test_equal_links_reach_base(self):
        assert reach_limits(80.0, 80.0) == (0.0, 160.0)


class TestWorkspaceBoundary:

    def test_shapes(self):
        outer, inner = workspace_boundary(150.0, 100.0, n=64)
        assert outer.shape == (64, 2)
        assert inner.shape == (64, 2)

    def test_radii(self):
        outer, inner = workspace_boundary(150.0, 100.0)
        assert np.allclose(np.hypot(outer[:, 0], outer[:, 1]), 250.0)
        assert np.allclose(np.hypot(inner[:, 0], inner[:, 1]), 50.0)

    def test_closed_polyline(self):
        pts = circle_points(10.0, n=16)
        assert np.allclose(pts[0], pts[-1])
        assert np.allclose(pts[0], [10.0, 0.0])

    def test_too_few_points(self):
        with pytest.raises(ValueError, match="at least 3"):
            workspace_boundary(150.0, 100.0, n=2)
