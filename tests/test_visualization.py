"""Tests for OdometryVisualizer (logging without a viewer)."""

import numpy as np
import pytest

from wheel_odom.estimation.odometry import Odometry
from wheel_odom.visualization.rerun_visualizer import OdometryVisualizer


@pytest.fixture
def visualizer() -> OdometryVisualizer:
    """Visualizer that buffers data instead of spawning the viewer."""
    return OdometryVisualizer(app_name="wheel-odom-test", spawn=False)


class TestOdometryVisualizer:
    """Test suite for OdometryVisualizer class."""

    def test_log_odometry_tracks_trajectory(self, visualizer: OdometryVisualizer):
        """Test that each logged state extends the trajectory."""
        odom = Odometry(velocity_rolling_window_size=2)
        odom.init(0.0)

        for i in range(1, 6):
            odom.update_open_loop(1.0, 0.2, 0.1 * i)
            visualizer.log_odometry(odom)

        assert len(visualizer._positions) == 5
        np.testing.assert_allclose(visualizer._positions[-1][:2], odom.pose.position)

    def test_log_trajectory_accepts_2d(self, visualizer: OdometryVisualizer):
        """Test logging planar positions and short paths."""
        visualizer.log_trajectory(np.array([[0.0, 0.0], [1.0, 0.5]]))
        visualizer.log_trajectory(np.zeros((1, 2)))
