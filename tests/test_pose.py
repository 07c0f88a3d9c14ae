"""Tests for Pose2D and PoseIntegrator."""

import numpy as np
import pytest

from wheel_odom.estimation.pose import Pose2D, PoseIntegrator, normalize_angle


class TestPose2D:
    """Test suite for Pose2D dataclass."""

    def test_identity(self):
        """Test that identity is the origin."""
        pose = Pose2D.identity()
        assert (pose.x, pose.y, pose.heading) == (0.0, 0.0, 0.0)

    def test_copy_is_independent(self):
        """Test that copy does not share state."""
        pose = Pose2D(1.0, 2.0, 0.5)
        other = pose.copy()
        other.x = 5.0

        assert pose.x == 1.0

    def test_to_array(self):
        """Test array conversion."""
        pose = Pose2D(1.0, -2.0, 3.0)
        np.testing.assert_allclose(pose.to_array(), [1.0, -2.0, 3.0])
        np.testing.assert_allclose(pose.position, [1.0, -2.0])

    def test_normalized_heading(self):
        """Test that the display heading is wrapped but the stored one is not."""
        pose = Pose2D(heading=3 * np.pi)

        assert pose.heading == pytest.approx(3 * np.pi)
        assert abs(pose.normalized_heading) == pytest.approx(np.pi)


class TestNormalizeAngle:
    """Test suite for normalize_angle."""

    @pytest.mark.parametrize(
        "angle, expected",
        [
            (0.0, 0.0),
            (np.pi / 2, np.pi / 2),
            (2 * np.pi + 0.1, 0.1),
            (-2 * np.pi - 0.1, -0.1),
            (5 * np.pi / 2, np.pi / 2),
        ],
    )
    def test_wrapping(self, angle, expected):
        """Test wrapping to [-pi, pi]."""
        assert normalize_angle(angle) == pytest.approx(expected)


class TestPoseIntegrator:
    """Test suite for PoseIntegrator class."""

    def test_starts_at_origin(self):
        """Test default starting pose."""
        integrator = PoseIntegrator()
        assert integrator.pose == Pose2D()

    def test_custom_start_pose_is_copied(self):
        """Test that the starting pose is not aliased."""
        start = Pose2D(1.0, 1.0, 0.0)
        integrator = PoseIntegrator(start)
        integrator.integrate_exact(1.0, 0.0)

        assert start.x == 1.0
        assert integrator.x == pytest.approx(2.0)

    def test_zero_motion(self):
        """Test that zero displacement leaves the pose unchanged."""
        integrator = PoseIntegrator(Pose2D(0.3, -0.2, 1.0))
        for _ in range(100):
            integrator.integrate_exact(0.0, 0.0)

        assert integrator.pose == Pose2D(0.3, -0.2, 1.0)

    def test_straight_line_along_heading(self):
        """Test that straight motion follows the constant heading."""
        heading = 0.7
        integrator = PoseIntegrator(Pose2D(heading=heading))
        deltas = [0.1, 0.25, 0.05, 0.4]

        for d in deltas:
            integrator.integrate_exact(d, 0.0)

        total = sum(deltas)
        assert integrator.heading == heading
        assert integrator.x == pytest.approx(total * np.cos(heading))
        assert integrator.y == pytest.approx(total * np.sin(heading))

    def test_straight_line_both_branches_agree(self):
        """Test that the midpoint and exact integrations agree without turning."""
        rk2 = PoseIntegrator(Pose2D(heading=-1.2))
        exact = PoseIntegrator(Pose2D(heading=-1.2))

        for _ in range(10):
            rk2.integrate_runge_kutta2(0.2, 0.0)
            exact.integrate_exact(0.2, 0.0)

        np.testing.assert_allclose(rk2.pose.to_array(), exact.pose.to_array())

    def test_quarter_circle(self):
        """Test a single exact arc of a quarter circle with unit radius."""
        integrator = PoseIntegrator()
        integrator.integrate_exact(np.pi / 2, np.pi / 2)

        assert integrator.x == pytest.approx(1.0)
        assert integrator.y == pytest.approx(1.0)
        assert integrator.heading == pytest.approx(np.pi / 2)

    def test_right_turn(self):
        """Test that a negative turn curves towards -y."""
        integrator = PoseIntegrator()
        integrator.integrate_exact(np.pi / 2, -np.pi / 2)

        assert integrator.x == pytest.approx(1.0)
        assert integrator.y == pytest.approx(-1.0)
        assert integrator.heading == pytest.approx(-np.pi / 2)

    @pytest.mark.parametrize("steps", [4, 16, 100])
    def test_full_loop_closes(self, steps):
        """Test that a full constant-curvature loop returns to the start."""
        radius = 2.0
        d_ang = 2 * np.pi / steps
        integrator = PoseIntegrator()

        for _ in range(steps):
            integrator.integrate_exact(radius * d_ang, d_ang)

        assert integrator.x == pytest.approx(0.0, abs=1e-9)
        assert integrator.y == pytest.approx(0.0, abs=1e-9)
        assert integrator.heading == pytest.approx(2 * np.pi)

    def test_arc_independent_of_step_size(self):
        """Test that exact integration is exact regardless of subdivision."""
        coarse = PoseIntegrator()
        fine = PoseIntegrator()

        coarse.integrate_exact(1.5, 0.9)
        for _ in range(50):
            fine.integrate_exact(1.5 / 50, 0.9 / 50)

        np.testing.assert_allclose(coarse.pose.to_array(), fine.pose.to_array(), atol=1e-12)

    def test_heading_not_wrapped(self):
        """Test that heading accumulates over several revolutions."""
        integrator = PoseIntegrator()
        for _ in range(30):
            integrator.integrate_exact(0.0, np.pi / 5)

        assert integrator.heading == pytest.approx(6 * np.pi)

    def test_continuity_across_threshold(self):
        """Test that results on both sides of the branch threshold agree."""
        d_lin = 0.5
        below = PoseIntegrator(Pose2D(heading=0.3))
        above = PoseIntegrator(Pose2D(heading=0.3))

        below.integrate_exact(d_lin, 1e-7)
        above.integrate_exact(d_lin, 1e-5)

        # Lateral offset of an arc grows like d_lin * d_ang / 2
        np.testing.assert_allclose(below.pose.position, above.pose.position, atol=1e-5)

    def test_continuity_just_around_threshold(self):
        """Test no jump in position right below and right above 1e-6."""
        d_lin = 1.0
        below = PoseIntegrator()
        above = PoseIntegrator()

        below.integrate_exact(d_lin, 0.999e-6)
        above.integrate_exact(d_lin, 1.001e-6)

        np.testing.assert_allclose(below.pose.position, above.pose.position, atol=1e-8)

    def test_reset(self):
        """Test that reset returns to the origin."""
        integrator = PoseIntegrator()
        integrator.integrate_exact(1.0, 0.5)
        integrator.reset()

        assert integrator.pose == Pose2D()
