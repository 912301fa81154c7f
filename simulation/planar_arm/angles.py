"""Angle helpers shared by the kinematics and the arm state."""

import math

import numpy as np


def deg_to_rad(angle):
    """Degrees to radians. Accepts scalars or numpy arrays."""
    return np.radians(angle)


def rad_to_deg(angle):
    """Radians to degrees. Accepts scalars or numpy arrays."""
    return np.degrees(angle)


def normalize_angle_degrees(angle: float) -> float:
    """
    Map an angle onto the half-open interval (-180, 180].

    Args:
        angle: Any finite angle in degrees

    Returns:
        Congruent angle in (-180, 180]; never -0.0

    Example:
        >>> normalize_angle_degrees(-180.0)
        180.0
        >>> normalize_angle_degrees(450.0)
        90.0
    """
    wrapped = math.fmod(float(angle), 360.0)

    # fmod keeps the sign of the input, so the result is in (-360, 360)
    if wrapped <= -180.0:
        wrapped += 360.0
    elif wrapped > 180.0:
        wrapped -= 360.0

    if wrapped == 0.0:
        wrapped = 0.0
    return wrapped


def angle_difference_degrees(a: float, b: float) -> float:
    """Signed difference a - b wrapped onto (-180, 180]."""
    return normalize_angle_degrees(float(a) - float(b))
