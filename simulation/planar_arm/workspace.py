"""Reachable workspace of the 2-link arm.

The workspace is an annulus around the base: inner radius |L1 - L2|
(arm fully folded), outer radius L1 + L2 (arm fully extended).
"""

import numpy as np
from typing import Tuple


def reach_limits(L1: float, L2: float) -> Tuple[float, float]:
    """
    Minimum and maximum distance from the base the end-effector can reach.

    Args:
        L1: Shoulder to elbow length
        L2: Elbow to end-effector length

    Returns:
        (min_reach, max_reach)
    """
    return (abs(L1 - L2), L1 + L2)


def circle_points(radius: float, n: int = 256) -> np.ndarray:
    """Closed polyline of n points on a circle centred on the base."""
    t = np.linspace(0, 2*np.pi, n, endpoint=True)
    return np.column_stack([radius*np.cos(t), radius*np.sin(t)])


def workspace_boundary(L1: float, L2: float,
                       n: int = 256) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample the outer and inner workspace boundaries for drawing.

    Args:
        L1: Shoulder to elbow length
        L2: Elbow to end-effector length
        n: Points per circle (first and last coincide)

    Returns:
        (outer, inner) arrays of shape (n, 2)

    Raises:
        ValueError: If fewer than 3 points are requested
    """
    if n < 3:
        raise ValueError(f"Need at least 3 boundary points, got {n}")

    min_reach, max_reach = reach_limits(L1, L2)
    return circle_points(max_reach, n), circle_points(min_reach, n)
