"""Wheel odometry estimator for differential and skid-steer drives.

Turns periodic, timestamped wheel measurements into an accumulated planar
pose and a smoothed linear/angular velocity. Every update is a bounded,
in-memory computation meant to be called once per control cycle from a
single thread.
"""

from __future__ import annotations

from dataclasses import dataclass

from .pose import Pose2D, PoseIntegrator
from .rolling_mean import RollingMeanAccumulator

# Updates closer together than this (seconds) are rejected by update().
MIN_UPDATE_PERIOD = 1e-4

DEFAULT_VELOCITY_ROLLING_WINDOW_SIZE = 10


@dataclass
class VelocityState:
    """Body-frame velocity estimate.

    Attributes:
        linear: Forward velocity in m/s
        angular: Yaw rate in rad/s
    """

    linear: float = 0.0
    angular: float = 0.0


@dataclass
class WheelParams:
    """Wheel calibration of the drive.

    Attributes:
        wheel_separation: Distance between left and right wheels in meters
        left_wheel_radius: Left wheel radius in meters
        right_wheel_radius: Right wheel radius in meters
    """

    wheel_separation: float = 0.0
    left_wheel_radius: float = 0.0
    right_wheel_radius: float = 0.0

    @property
    def is_valid(self) -> bool:
        """Return True if all values are strictly positive."""
        return (
            self.wheel_separation > 0.0
            and self.left_wheel_radius > 0.0
            and self.right_wheel_radius > 0.0
        )


class Odometry:
    """Dead-reckoning odometry from wheel position or velocity samples.

    Three update paths are provided:

    - ``update``: cumulative position-like signals, differenced against the
      previous sample. Rejects updates with dt < 1e-4 s.
    - ``update_from_velocity``: per-tick values integrated directly and
      divided by dt to feed the velocity rolling means.
    - ``update_open_loop``: commanded velocities, integrated as
      velocity * dt without smoothing.

    ``update_from_wheel_positions`` differences cumulative wheel angles,
    converts the increments with the wheel calibration and then behaves
    like ``update``.

    Example:
        odom = Odometry(velocity_rolling_window_size=5)
        odom.set_wheel_params(0.5, 0.1, 0.1)
        odom.init_from_wheel_positions(t0, left0, right0)
        for left, right, t in samples:
            odom.update_from_wheel_positions(left, right, t)
        print(odom.pose, odom.velocity)
    """

    def __init__(
        self,
        velocity_rolling_window_size: int = DEFAULT_VELOCITY_ROLLING_WINDOW_SIZE,
    ) -> None:
        """Initialize odometry at the origin.

        Args:
            velocity_rolling_window_size: Number of samples in the velocity
                rolling means, >= 1

        Raises:
            ValueError: If velocity_rolling_window_size is smaller than 1
        """
        self._timestamp = 0.0

        self._integrator = PoseIntegrator()
        self._velocity = VelocityState()
        self._wheel_params = WheelParams()

        # Previous cumulative samples, only used for differencing
        self._linear_old_pos = 0.0
        self._angular_old_pos = 0.0
        self._left_wheel_old_pos = 0.0
        self._right_wheel_old_pos = 0.0

        self._velocity_rolling_window_size = int(velocity_rolling_window_size)
        self._linear_accumulator = RollingMeanAccumulator(velocity_rolling_window_size)
        self._angular_accumulator = RollingMeanAccumulator(velocity_rolling_window_size)

    def init(
        self,
        timestamp: float,
        linear_pos: float = 0.0,
        angular_pos: float = 0.0,
    ) -> None:
        """Reset velocity smoothing and set the timestamp baseline.

        Args:
            timestamp: Time of the initial state in seconds
            linear_pos: Cumulative linear travel at ``timestamp`` (baseline
                for the first ``update``)
            angular_pos: Cumulative turn angle at ``timestamp``
        """
        self._reset_accumulators()
        self._timestamp = float(timestamp)
        self._linear_old_pos = float(linear_pos)
        self._angular_old_pos = float(angular_pos)

    def init_from_wheel_positions(
        self, timestamp: float, left_pos: float, right_pos: float
    ) -> None:
        """Like ``init``, with wheel angles as baseline for the first
        ``update_from_wheel_positions``.

        Args:
            timestamp: Time of the initial state in seconds
            left_pos: Cumulative left wheel angle at ``timestamp`` in radians
            right_pos: Cumulative right wheel angle at ``timestamp`` in radians
        """
        self.init(timestamp)
        self._left_wheel_old_pos = float(left_pos)
        self._right_wheel_old_pos = float(right_pos)

    def update(self, linear_pos: float, angular_pos: float, timestamp: float) -> bool:
        """Update from cumulative linear travel and turn angle.

        Args:
            linear_pos: Cumulative linear travel in meters
            angular_pos: Cumulative turn angle in radians
            timestamp: Measurement time in seconds

        Returns:
            False if the update was rejected because less than 1e-4 s elapsed
            since the last update (no state is changed), True otherwise
        """
        dt = timestamp - self._timestamp
        if dt < MIN_UPDATE_PERIOD:
            return False

        linear = linear_pos - self._linear_old_pos
        angular = angular_pos - self._angular_old_pos
        self._linear_old_pos = linear_pos
        self._angular_old_pos = angular_pos

        self.update_from_velocity(linear, angular, timestamp)
        return True

    def update_from_velocity(
        self, linear_vel: float, angular_vel: float, timestamp: float
    ) -> bool:
        """Update from per-tick linear/angular values.

        The values are integrated into the pose as displacements over the
        tick, unscaled by dt, and divided by dt before entering the rolling
        means. Callers feeding true velocities must pre-multiply by the
        tick period; ``update_open_loop`` does the scaling itself.

        Args:
            linear_vel: Linear displacement over the tick in meters
            angular_vel: Angular displacement over the tick in radians
            timestamp: Measurement time in seconds

        Returns:
            Always True
        """
        dt = timestamp - self._timestamp

        self._integrator.integrate_exact(linear_vel, angular_vel)
        self._timestamp = float(timestamp)

        # Non-positive dt has no defined rate; keep the last smoothed velocity
        if dt > 0.0:
            self._linear_accumulator.accumulate(linear_vel / dt)
            self._angular_accumulator.accumulate(angular_vel / dt)
            self._velocity.linear = self._linear_accumulator.get_rolling_mean()
            self._velocity.angular = self._angular_accumulator.get_rolling_mean()

        return True

    def update_open_loop(self, linear: float, angular: float, timestamp: float) -> None:
        """Update from commanded velocities, bypassing smoothing.

        Args:
            linear: Commanded linear velocity in m/s
            angular: Commanded angular velocity in rad/s
            timestamp: Command time in seconds
        """
        self._velocity.linear = float(linear)
        self._velocity.angular = float(angular)

        dt = timestamp - self._timestamp
        self._timestamp = float(timestamp)
        self._integrator.integrate_exact(linear * dt, angular * dt)

    def update_from_wheel_positions(
        self, left_pos: float, right_pos: float, timestamp: float
    ) -> bool:
        """Update from cumulative wheel angles of a differential drive.

        Args:
            left_pos: Cumulative left wheel angle in radians
            right_pos: Cumulative right wheel angle in radians
            timestamp: Measurement time in seconds

        Wheel angles are differenced before applying the calibration, so
        changing the wheel parameters only affects motion after the change.

        Returns:
            False if the update was rejected because less than 1e-4 s elapsed
            since the last update (no state is changed), True otherwise

        Raises:
            ValueError: If the wheel parameters have not been set to
                positive values
        """
        params = self._wheel_params
        if not params.is_valid:
            raise ValueError(f"Wheel parameters must be positive, got {params}")

        dt = timestamp - self._timestamp
        if dt < MIN_UPDATE_PERIOD:
            return False

        left_travel = (left_pos - self._left_wheel_old_pos) * params.left_wheel_radius
        right_travel = (right_pos - self._right_wheel_old_pos) * params.right_wheel_radius
        self._left_wheel_old_pos = float(left_pos)
        self._right_wheel_old_pos = float(right_pos)

        linear = (left_travel + right_travel) * 0.5
        angular = (right_travel - left_travel) / params.wheel_separation

        self.update_from_velocity(linear, angular, timestamp)
        return True

    def reset_odometry(self) -> None:
        """Move the pose back to the origin (velocity and time are kept)."""
        self._integrator.reset()

    def set_wheel_params(
        self,
        wheel_separation: float,
        left_wheel_radius: float,
        right_wheel_radius: float | None = None,
    ) -> None:
        """Store wheel calibration.

        Args:
            wheel_separation: Distance between the wheels in meters
            left_wheel_radius: Left wheel radius in meters
            right_wheel_radius: Right wheel radius in meters (default: left)
        """
        if right_wheel_radius is None:
            right_wheel_radius = left_wheel_radius

        self._wheel_params = WheelParams(
            wheel_separation=float(wheel_separation),
            left_wheel_radius=float(left_wheel_radius),
            right_wheel_radius=float(right_wheel_radius),
        )

    def set_velocity_rolling_window_size(self, velocity_rolling_window_size: int) -> None:
        """Change the rolling mean window size, discarding smoothing history.

        Args:
            velocity_rolling_window_size: New window size, >= 1

        Raises:
            ValueError: If velocity_rolling_window_size is smaller than 1
        """
        if int(velocity_rolling_window_size) < 1:
            raise ValueError(
                "Velocity rolling window size must be >= 1, "
                f"got {velocity_rolling_window_size}"
            )
        self._velocity_rolling_window_size = int(velocity_rolling_window_size)
        self._reset_accumulators()

    def _reset_accumulators(self) -> None:
        """Empty both rolling means at the configured window size."""
        self._linear_accumulator.reset(self._velocity_rolling_window_size)
        self._angular_accumulator.reset(self._velocity_rolling_window_size)

    @property
    def x(self) -> float:
        return self._integrator.x

    @property
    def y(self) -> float:
        return self._integrator.y

    @property
    def heading(self) -> float:
        return self._integrator.heading

    @property
    def linear(self) -> float:
        return self._velocity.linear

    @property
    def angular(self) -> float:
        return self._velocity.angular

    @property
    def timestamp(self) -> float:
        """Return the time of the last accepted update in seconds."""
        return self._timestamp

    @property
    def pose(self) -> Pose2D:
        """Return a copy of the current pose."""
        return self._integrator.pose

    @property
    def velocity(self) -> VelocityState:
        """Return a copy of the current velocity estimate."""
        return VelocityState(linear=self._velocity.linear, angular=self._velocity.angular)

    @property
    def wheel_params(self) -> WheelParams:
        """Return a copy of the wheel calibration."""
        params = self._wheel_params
        return WheelParams(
            wheel_separation=params.wheel_separation,
            left_wheel_radius=params.left_wheel_radius,
            right_wheel_radius=params.right_wheel_radius,
        )

    @property
    def velocity_rolling_window_size(self) -> int:
        return self._velocity_rolling_window_size
