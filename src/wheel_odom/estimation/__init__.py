"""Odometry estimation core.

Components, leaf to root:
- RollingMeanAccumulator: windowed mean used for velocity smoothing
- Pose2D / PoseIntegrator: exact-arc and midpoint pose integration
- Odometry: converts wheel samples to velocity and pose
"""

from .rolling_mean import RollingMeanAccumulator
from .pose import Pose2D, PoseIntegrator, normalize_angle
from .odometry import Odometry, VelocityState, WheelParams

__all__ = [
    # Smoothing
    "RollingMeanAccumulator",
    # Pose
    "Pose2D",
    "PoseIntegrator",
    "normalize_angle",
    # Odometry
    "Odometry",
    "VelocityState",
    "WheelParams",
]
