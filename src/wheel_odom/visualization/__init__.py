"""Visualization of odometry runs."""

from .rerun_visualizer import OdometryVisualizer

__all__ = ["OdometryVisualizer"]
