"""Odometry configuration loaded from YAML.

Example file:

    odometry:
      wheel_separation: 0.52
      left_wheel_radius: 0.1
      right_wheel_radius: 0.1
      velocity_rolling_window_size: 10
      open_loop: false

The keys may also be given at the top level of the file.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path

import yaml

from .estimation.odometry import DEFAULT_VELOCITY_ROLLING_WINDOW_SIZE, Odometry


@dataclass
class OdometryConfig:
    """Calibration and smoothing settings for an Odometry estimator."""

    wheel_separation: float = 0.0  # Distance between wheels (m)
    left_wheel_radius: float = 0.0  # Left wheel radius (m)
    right_wheel_radius: float = 0.0  # Right wheel radius (m)
    velocity_rolling_window_size: int = DEFAULT_VELOCITY_ROLLING_WINDOW_SIZE
    open_loop: bool = False  # Integrate commands instead of measurements

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> OdometryConfig:
        """Load configuration from a YAML file.

        Missing keys keep their default values.

        Args:
            yaml_path: Path to the YAML configuration file

        Returns:
            Validated OdometryConfig

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file content or a value is invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Odometry config not found: {yaml_path}")

        with open(path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            print(f"Warning: {yaml_path} is empty, using default odometry config")
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid odometry config in {yaml_path}")

        section = data.get("odometry", data)
        if not isinstance(section, dict):
            raise ValueError(f"Invalid 'odometry' section in {yaml_path}")

        return cls.from_dict(section)

    @classmethod
    def from_dict(cls, data: dict) -> OdometryConfig:
        """Build configuration from a mapping, ignoring unknown keys.

        Raises:
            ValueError: If a value has the wrong type or is out of range
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            print(f"Warning: Ignoring unknown odometry config keys: {unknown}")

        open_loop = data.get("open_loop", False)
        if not isinstance(open_loop, bool):
            raise ValueError(
                f"Invalid odometry config value: open_loop must be true or false, got {open_loop!r}"
            )

        try:
            config = cls(
                wheel_separation=float(data.get("wheel_separation", 0.0)),
                left_wheel_radius=float(data.get("left_wheel_radius", 0.0)),
                right_wheel_radius=float(
                    data.get("right_wheel_radius", data.get("left_wheel_radius", 0.0))
                ),
                velocity_rolling_window_size=int(
                    data.get(
                        "velocity_rolling_window_size",
                        DEFAULT_VELOCITY_ROLLING_WINDOW_SIZE,
                    )
                ),
                open_loop=open_loop,
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid odometry config value: {e}") from e

        config.validate()
        return config

    def validate(self) -> None:
        """Check value ranges.

        Wheel calibration may be left at zero for estimators that are only
        fed linear/angular signals.

        Raises:
            ValueError: If a value is out of range
        """
        if self.velocity_rolling_window_size < 1:
            raise ValueError(
                "velocity_rolling_window_size must be >= 1, "
                f"got {self.velocity_rolling_window_size}"
            )
        for name in ("wheel_separation", "left_wheel_radius", "right_wheel_radius"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

    def create_odometry(self) -> Odometry:
        """Build an Odometry estimator with this configuration."""
        odometry = Odometry(velocity_rolling_window_size=self.velocity_rolling_window_size)
        odometry.set_wheel_params(
            self.wheel_separation, self.left_wheel_radius, self.right_wheel_radius
        )
        return odometry

    def to_dict(self) -> dict:
        """Return the configuration as a plain dictionary."""
        return asdict(self)
