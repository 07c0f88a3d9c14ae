"""Rerun-based visualization for wheel odometry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import rerun as rr
import rerun.blueprint as rrb

if TYPE_CHECKING:
    from ..estimation.odometry import Odometry
    from ..estimation.pose import Pose2D


class OdometryVisualizer:
    """Rerun visualization of an odometry run.

    Entity hierarchy:
        world/
            robot           - Current pose (transform + heading arrow)
            trajectory      - Accumulated path (yellow)
        velocity/
            linear          - Smoothed linear velocity (m/s)
            angular         - Smoothed angular velocity (rad/s)
    """

    def __init__(self, app_name: str = "wheel-odom", spawn: bool = True) -> None:
        """Initialize Rerun visualization.

        Args:
            app_name: Name for the Rerun application window
            spawn: If True, automatically spawn the Rerun viewer
        """
        rr.init(app_name, spawn=spawn)
        self._positions: list[np.ndarray] = []
        self._setup_coordinate_system()
        self._setup_layout()

    def _setup_coordinate_system(self) -> None:
        """Odometry frame is right-handed with Z up (X forward, Y left)."""
        rr.log("world", rr.ViewCoordinates.RIGHT_HAND_Z_UP, static=True)

    def _setup_layout(self) -> None:
        """Configure the viewer layout"""
        blueprint = rrb.Blueprint(
            rrb.Horizontal(
                contents=[
                    rrb.Spatial3DView(name="Trajectory", origin="world"),
                    rrb.Vertical(
                        contents=[
                            rrb.TimeSeriesView(
                                name="Linear velocity", origin="velocity/linear"
                            ),
                            rrb.TimeSeriesView(
                                name="Angular velocity", origin="velocity/angular"
                            ),
                        ]
                    ),
                ]
            )
        )
        rr.send_blueprint(blueprint)

    def log_odometry(self, odometry: Odometry) -> None:
        """Log the current state of an estimator at its last update time.

        Args:
            odometry: Estimator to read pose and velocity from
        """
        rr.set_time("timestamp", duration=odometry.timestamp)

        pose = odometry.pose
        self.log_pose(pose)
        self.log_velocity(odometry.linear, odometry.angular)

        self._positions.append(np.array([pose.x, pose.y, 0.0]))
        self.log_trajectory(np.array(self._positions, dtype=np.float64))

    def log_pose(self, pose: Pose2D, entity_path: str = "world/robot") -> None:
        """Log a planar pose as a transform and heading arrow.

        Args:
            pose: Pose to log
            entity_path: Rerun entity path for the robot
        """
        rr.log(
            entity_path,
            rr.Transform3D(
                translation=[pose.x, pose.y, 0.0],
                rotation=rr.RotationAxisAngle(axis=[0.0, 0.0, 1.0], radians=pose.heading),
            ),
        )
        rr.log(
            f"{entity_path}/heading",
            rr.Arrows3D(
                origins=[[0.0, 0.0, 0.0]],
                vectors=[[0.3, 0.0, 0.0]],
                colors=[[0, 255, 255]],  # Cyan
            ),
        )

    def log_velocity(self, linear: float, angular: float) -> None:
        """Log smoothed velocities as time series."""
        rr.log("velocity/linear", rr.Scalars(linear))
        rr.log("velocity/angular", rr.Scalars(angular))

    def log_trajectory(
        self,
        positions: np.ndarray,
        entity_path: str = "world/trajectory",
    ) -> None:
        """Log a trajectory as a 3D line strip.

        Args:
            positions: Nx3 (or Nx2, placed at z=0) array of positions
            entity_path: Rerun entity path for the trajectory
        """
        if len(positions) < 2:
            return

        positions = np.asarray(positions, dtype=np.float64)
        if positions.shape[1] == 2:
            positions = np.column_stack([positions, np.zeros(len(positions))])

        rr.log(
            entity_path,
            rr.LineStrips3D(
                [positions],
                colors=[[255, 255, 0]],  # Yellow
                radii=0.01,
            ),
        )
