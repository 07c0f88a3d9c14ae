"""Planar pose representation and dead-reckoning pose integration."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

# Below this angular displacement the exact-arc radius d_lin / d_ang is
# numerically unusable and the midpoint approximation is used instead.
EXACT_INTEGRATION_ANGULAR_THRESHOLD = 1e-6


def normalize_angle(angle: float) -> float:
    """Wrap an angle to [-pi, pi].

    Intended for display only. Integrated headings stay unwrapped.

    Args:
        angle: Angle in radians

    Returns:
        Equivalent angle in [-pi, pi]
    """
    return float(np.arctan2(np.sin(angle), np.cos(angle)))


@dataclass
class Pose2D:
    """Planar robot pose in the odometry frame.

    Attributes:
        x: Position along the odometry x-axis in meters
        y: Position along the odometry y-axis in meters
        heading: Accumulated yaw in radians (unwrapped, may exceed 2*pi)
    """

    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0

    @classmethod
    def identity(cls) -> Pose2D:
        """Return the pose at the origin facing along +x."""
        return cls()

    def copy(self) -> Pose2D:
        """Return an independent copy of this pose."""
        return Pose2D(x=self.x, y=self.y, heading=self.heading)

    def to_array(self) -> np.ndarray:
        """Return the pose as a (3,) array [x, y, heading]."""
        return np.array([self.x, self.y, self.heading], dtype=np.float64)

    @property
    def position(self) -> np.ndarray:
        """Return the (2,) position [x, y]."""
        return np.array([self.x, self.y], dtype=np.float64)

    @property
    def normalized_heading(self) -> float:
        """Return the heading wrapped to [-pi, pi] (display only)."""
        return normalize_angle(self.heading)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"Pose2D(x={self.x:.3f}, y={self.y:.3f}, heading={self.heading:.3f})"


class PoseIntegrator:
    """Advances a planar pose by linear/angular displacement increments.

    Inputs are displacements over the elapsed interval (meters, radians),
    not velocities. For a meaningful turn the motion is integrated as an
    exact constant-curvature arc:

        r = d_lin / d_ang
        heading_new = heading + d_ang
        x += r * (sin(heading_new) - sin(heading))
        y -= r * (cos(heading_new) - cos(heading))

    The arc radius is a 0/0 limit as d_ang -> 0, so near-zero turns fall
    back to second-order Runge-Kutta (midpoint) integration, which is exact
    for straight-line motion.
    """

    def __init__(self, pose: Pose2D | None = None) -> None:
        """Initialize integrator.

        Args:
            pose: Starting pose (default: origin)
        """
        self._pose = pose.copy() if pose is not None else Pose2D.identity()

    def integrate_runge_kutta2(self, linear: float, angular: float) -> None:
        """Midpoint integration of one displacement increment.

        Args:
            linear: Linear displacement in meters
            angular: Angular displacement in radians
        """
        direction = self._pose.heading + angular * 0.5

        self._pose.x += linear * float(np.cos(direction))
        self._pose.y += linear * float(np.sin(direction))
        self._pose.heading += angular

    def integrate_exact(self, linear: float, angular: float) -> None:
        """Exact-arc integration of one displacement increment.

        Args:
            linear: Linear displacement in meters
            angular: Angular displacement in radians
        """
        if abs(angular) < EXACT_INTEGRATION_ANGULAR_THRESHOLD:
            self.integrate_runge_kutta2(linear, angular)
            return

        heading_old = self._pose.heading
        r = linear / angular
        self._pose.heading += angular
        heading_new = self._pose.heading

        self._pose.x += r * float(np.sin(heading_new) - np.sin(heading_old))
        self._pose.y += -r * float(np.cos(heading_new) - np.cos(heading_old))

    def reset(self) -> None:
        """Move back to the origin."""
        self._pose.x = 0.0
        self._pose.y = 0.0
        self._pose.heading = 0.0

    @property
    def x(self) -> float:
        return self._pose.x

    @property
    def y(self) -> float:
        return self._pose.y

    @property
    def heading(self) -> float:
        return self._pose.heading

    @property
    def pose(self) -> Pose2D:
        """Return a copy of the current pose."""
        return self._pose.copy()
