"""Wheel odometry - dead-reckoning pose and velocity estimation for wheeled robots."""

__version__ = "0.1.0"

# Re-export main classes for convenient imports
from .config import OdometryConfig
from .estimation import (
    Odometry,
    Pose2D,
    PoseIntegrator,
    RollingMeanAccumulator,
    VelocityState,
    WheelParams,
    normalize_angle,
)
from .io import WheelLogReader, WheelSample
from .visualization import OdometryVisualizer

__all__ = [
    "__version__",
    # Configuration
    "OdometryConfig",
    # Odometry
    "Odometry",
    "VelocityState",
    "WheelParams",
    # Pose
    "Pose2D",
    "PoseIntegrator",
    "normalize_angle",
    # Smoothing
    "RollingMeanAccumulator",
    # I/O
    "WheelLogReader",
    "WheelSample",
    # Visualization
    "OdometryVisualizer",
]
