"""Caller-owned state of the arm: joint angles, link lengths, target, path.

The kinematics functions are pure; this is the mutable side a viewer
or control panel holds and feeds into them once per interaction or
animation frame.
"""

import logging
from collections import deque
from typing import Iterator, Optional, Union

import numpy as np

from planar_arm.angles import normalize_angle_degrees
from planar_arm.config import (DEFAULT_L1, DEFAULT_L2, IK_VERIFY_TOLERANCE,
                               TRAJECTORY_CAPACITY)
from planar_arm.kinematics import (Elbow, FKResult, IKSolution, Point,
                                   forward_kinematics, ik_error, parse_elbow,
                                   solve_ik)

logger = logging.getLogger(__name__)


class Trajectory:
    """Bounded history of end-effector positions, oldest dropped first."""

    def __init__(self, capacity: int = TRAJECTORY_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Trajectory capacity must be a positive int, got {capacity!r}")
        self._points = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._points.maxlen

    def append(self, point) -> None:
        x, y = point
        self._points.append(Point(float(x), float(y)))

    def clear(self) -> None:
        self._points.clear()

    @property
    def latest(self) -> Optional[Point]:
        return self._points[-1] if self._points else None

    def as_array(self) -> np.ndarray:
        """(n, 2) array of the stored points, oldest first."""
        if not self._points:
            return np.empty((0, 2))
        return np.array(self._points, dtype=float)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)


class ArmState:
    """Joint angles (degrees), link lengths, IK target and trajectory."""

    def __init__(self, L1: float = DEFAULT_L1, L2: float = DEFAULT_L2,
                 theta1: float = 0.0, theta2: float = 0.0,
                 elbow: Union[Elbow, str] = Elbow.UP,
                 trajectory_capacity: int = TRAJECTORY_CAPACITY):
        self.set_link_lengths(L1, L2)
        self.set_joint_angles(theta1, theta2)
        self.elbow = elbow
        self.target = Point(0.0, 0.0)
        self.trajectory = Trajectory(trajectory_capacity)

    @property
    def elbow(self) -> Elbow:
        return self._elbow

    @elbow.setter
    def elbow(self, value: Union[Elbow, str]) -> None:
        self._elbow = parse_elbow(value)

    def set_link_lengths(self, L1: float, L2: float) -> None:
        """
        Update both link lengths.

        Raises:
            ValueError: If either length is not positive
        """
        if L1 <= 0 or L2 <= 0:
            raise ValueError(f"Link lengths must be positive, got L1={L1}, L2={L2}")
        self.L1 = float(L1)
        self.L2 = float(L2)

    def set_joint_angles(self, theta1: float, theta2: float) -> None:
        self.theta1 = normalize_angle_degrees(theta1)
        self.theta2 = normalize_angle_degrees(theta2)

    def set_target(self, x: float, y: float) -> None:
        self.target = Point(float(x), float(y))

    def positions(self) -> FKResult:
        """Elbow and end-effector positions for the current angles."""
        return forward_kinematics(self.theta1, self.theta2, self.L1, self.L2)

    def step(self, d_theta1: float, d_theta2: float = 0.0) -> FKResult:
        """
        Advance the animation by one frame.

        Args:
            d_theta1: Shoulder increment this frame (degrees)
            d_theta2: Elbow increment this frame (degrees)

        Returns:
            Positions after the step; the end-effector is also appended
            to the trajectory
        """
        self.set_joint_angles(self.theta1 + d_theta1, self.theta2 + d_theta2)
        result = self.positions()
        self.trajectory.append(result.end_effector)
        return result

    def solve_target(self, x: Optional[float] = None,
                     y: Optional[float] = None) -> IKSolution:
        """IK for the given target (or the held one) without touching the angles."""
        if x is None:
            x = self.target.x
        if y is None:
            y = self.target.y
        return solve_ik(x, y, self.L1, self.L2, self.elbow)

    def apply_ik(self, x: Optional[float] = None,
                 y: Optional[float] = None) -> IKSolution:
        """
        Solve for a target and move the arm there if it is reachable.

        Passing x/y also updates the held target. An unreachable target
        leaves the angles and trajectory unchanged.

        Returns:
            The IK solution that was (or could not be) applied
        """
        if x is not None or y is not None:
            self.set_target(self.target.x if x is None else x,
                            self.target.y if y is None else y)

        solution = self.solve_target()
        if not solution.is_valid:
            return solution

        error = ik_error(solution, self.target.x, self.target.y, self.L1, self.L2)
        if error > IK_VERIFY_TOLERANCE:
            logger.warning("IK solution (%.4f, %.4f) misses target (%.3f, %.3f) by %.4f",
                           solution.theta1, solution.theta2,
                           self.target.x, self.target.y, error)

        self.set_joint_angles(solution.theta1, solution.theta2)
        self.trajectory.append(self.positions().end_effector)
        return solution
