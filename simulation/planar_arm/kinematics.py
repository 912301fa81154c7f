"""Forward and inverse kinematics for a 2-DOF planar arm.

Angles are degrees at the interface and radians inside the trig.
Link 1 rotates about the base from the +x axis (theta1); link 2
rotates relative to the extension of link 1 (theta2).
"""

import logging
from enum import Enum
from typing import NamedTuple, Tuple, Union

import numpy as np

from planar_arm.angles import deg_to_rad, normalize_angle_degrees, rad_to_deg
from planar_arm.config import DEFAULT_L1, DEFAULT_L2, REACH_EPSILON
from planar_arm.workspace import reach_limits, workspace_boundary

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    """Cartesian point in the link-length unit, origin at the base."""
    x: float
    y: float


class FKResult(NamedTuple):
    """Joint and end-effector positions for one arm pose."""
    joint1: Point
    end_effector: Point


class Elbow(str, Enum):
    """Which of the two mirror-image IK solutions to pick."""
    UP = 'up'
    DOWN = 'down'


class IKSolution(NamedTuple):
    """
    Result of solve_ik.

    theta1/theta2 are degrees in (-180, 180]. When is_valid is False the
    target was unreachable and both angles are 0.
    """
    theta1: float
    theta2: float
    is_valid: bool
    elbow: Elbow

    @classmethod
    def invalid(cls, elbow: Elbow) -> 'IKSolution':
        return cls(0.0, 0.0, False, elbow)


def parse_elbow(elbow: Union[Elbow, str]) -> Elbow:
    """Elbow from an Elbow or its 'up'/'down' string; ValueError otherwise."""
    try:
        return Elbow(elbow)
    except ValueError:
        raise ValueError(f"Elbow must be 'up' or 'down', got {elbow!r}") from None


def forward_kinematics(theta1: float, theta2: float,
                       L1: float, L2: float) -> FKResult:
    """
    Compute forward kinematics.

    Args:
        theta1: Shoulder angle (degrees)
        theta2: Elbow angle relative to link 1 (degrees)
        L1: Shoulder to elbow length
        L2: Elbow to end-effector length

    Returns:
        FKResult with elbow joint and end-effector positions
    """
    t1 = deg_to_rad(theta1)
    t12 = t1 + deg_to_rad(theta2)

    jx = L1 * np.cos(t1)
    jy = L1 * np.sin(t1)
    x = jx + L2 * np.cos(t12)
    y = jy + L2 * np.sin(t12)

    return FKResult(Point(float(jx), float(jy)), Point(float(x), float(y)))


def is_reachable(target_x: float, target_y: float, L1: float, L2: float,
                 eps: float = REACH_EPSILON) -> bool:
    """
    Check whether a target lies in the annular workspace.

    Targets within eps of either boundary count as reachable. A target
    within eps of the base is never reachable, since the bearing to it
    is undefined.

    Args:
        target_x: Target X position
        target_y: Target Y position
        L1: Shoulder to elbow length (> 0)
        L2: Elbow to end-effector length (> 0)
        eps: Absolute slack on the comparisons

    Returns:
        True if the end-effector can be placed at the target
    """
    d = float(np.hypot(target_x, target_y))
    min_reach, max_reach = reach_limits(L1, L2)
    return d > eps and (min_reach - eps) <= d <= (max_reach + eps)


def solve_ik(target_x: float, target_y: float, L1: float, L2: float,
             elbow: Union[Elbow, str] = Elbow.UP,
             eps: float = REACH_EPSILON) -> IKSolution:
    """
    Compute inverse kinematics.

    Uses the law of cosines on the triangle (base, elbow, target) for the
    elbow angle, then subtracts the offset link 2 introduces from the
    bearing to the target for the shoulder angle.

    Args:
        target_x: Target X position
        target_y: Target Y position
        L1: Shoulder to elbow length (> 0)
        L2: Elbow to end-effector length (> 0)
        elbow: Elbow.UP (positive theta2) or Elbow.DOWN (negative theta2)
        eps: Reachability slack, see is_reachable

    Returns:
        IKSolution; is_valid is False if the target is unreachable

    Raises:
        ValueError: If elbow is not 'up' or 'down'

    Example:
        >>> sol = solve_ik(150.0, 100.0, 150.0, 100.0)
        >>> round(sol.theta1, 6), round(sol.theta2, 6)
        (0.0, 90.0)
    """
    elbow = parse_elbow(elbow)

    if not is_reachable(target_x, target_y, L1, L2, eps):
        logger.debug("Target (%.3f, %.3f) unreachable for L1=%s, L2=%s",
                     target_x, target_y, L1, L2)
        return IKSolution.invalid(elbow)

    d_squared = target_x**2 + target_y**2

    # Interior angle between the links; clamp absorbs rounding at the boundary
    cos_beta = (L1**2 + L2**2 - d_squared) / (2 * L1 * L2)
    cos_beta = np.clip(cos_beta, -1.0, 1.0)
    beta = np.arccos(cos_beta)

    theta2 = np.pi - beta

    # sin/cos of theta2 from the clamped cosine: sin is exactly +0.0 for
    # both elbows at full extension and full fold, so both agree there
    sin_t2 = np.sqrt(1.0 - cos_beta**2)
    cos_t2 = -cos_beta
    if elbow is Elbow.DOWN:
        theta2 = -theta2
        if sin_t2 > 0.0:
            sin_t2 = -sin_t2

    # Shoulder angle
    alpha = np.arctan2(target_y, target_x)
    beta2 = np.arctan2(L2 * sin_t2, L1 + L2 * cos_t2)
    theta1 = alpha - beta2

    return IKSolution(
        normalize_angle_degrees(rad_to_deg(theta1)),
        normalize_angle_degrees(rad_to_deg(theta2)),
        True,
        elbow,
    )


def solve_ik_both(target_x: float, target_y: float, L1: float, L2: float,
                  eps: float = REACH_EPSILON) -> Tuple[IKSolution, IKSolution]:
    """Elbow-up and elbow-down solutions for the same target."""
    return (solve_ik(target_x, target_y, L1, L2, Elbow.UP, eps),
            solve_ik(target_x, target_y, L1, L2, Elbow.DOWN, eps))


def verify_ik(theta1: float, theta2: float, L1: float, L2: float) -> Point:
    """End-effector position a proposed (theta1, theta2) in degrees actually reaches."""
    return forward_kinematics(theta1, theta2, L1, L2).end_effector


def ik_error(solution: IKSolution, target_x: float, target_y: float,
             L1: float, L2: float) -> float:
    """
    Distance between where a solution puts the end-effector and the target.

    Returns inf for an invalid solution.
    """
    if not solution.is_valid:
        return float('inf')
    x, y = verify_ik(solution.theta1, solution.theta2, L1, L2)
    return float(np.hypot(x - target_x, y - target_y))


class ArmKinematics:
    """Fixed-geometry arm bound to the module-level kinematics functions.

    Joint angles go in and come out in degrees; inverse() returns an
    IKSolution and never raises for an unreachable target.
    """

    def __init__(self, L1: float = DEFAULT_L1, L2: float = DEFAULT_L2):
        """
        Fix the link lengths used by every call.

        Args:
            L1: Base to elbow joint, in the same unit as targets
            L2: Elbow joint to tip

        Raises:
            ValueError: If either length is not positive
        """
        if L1 <= 0 or L2 <= 0:
            raise ValueError(f"Link lengths must be positive, got L1={L1}, L2={L2}")
        self.L1 = L1
        self.L2 = L2

    def forward(self, theta1: float, theta2: float) -> FKResult:
        return forward_kinematics(theta1, theta2, self.L1, self.L2)

    def inverse(self, x: float, y: float,
                elbow: Union[Elbow, str] = Elbow.UP) -> IKSolution:
        return solve_ik(x, y, self.L1, self.L2, elbow)

    def is_reachable(self, x: float, y: float) -> bool:
        return is_reachable(x, y, self.L1, self.L2)

    def verify(self, solution: IKSolution) -> Point:
        return verify_ik(solution.theta1, solution.theta2, self.L1, self.L2)

    def workspace(self, n: int = 256) -> Tuple[np.ndarray, np.ndarray]:
        return workspace_boundary(self.L1, self.L2, n)
