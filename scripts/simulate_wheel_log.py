#!/usr/bin/env python3
"""Generate a synthetic wheel log for a differential-drive robot.

The robot follows a sequence of constant wheel-speed segments (straight,
left arc, spin in place, right arc). Wheel angles are sampled at a fixed
rate, optionally quantized to encoder ticks, and written in the CSV format
read by WheelLogReader.

Usage:
    uv run python scripts/simulate_wheel_log.py --output data/wheels.csv
    uv run python scripts/simulate_wheel_log.py --rate 20 --ticks-per-rev 1024
"""

import argparse
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from wheel_odom import OdometryConfig

# (duration [s], left wheel speed [rad/s], right wheel speed [rad/s])
DEFAULT_SEGMENTS = [
    (2.0, 5.0, 5.0),
    (3.0, 3.0, 6.0),
    (1.5, -2.0, 2.0),
    (3.0, 6.0, 3.0),
    (2.0, 5.0, 5.0),
]


def simulate_wheel_angles(
    segments: list[tuple[float, float, float]],
    rate_hz: float,
    ticks_per_rev: int | None = None,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Sample cumulative wheel angles for piecewise-constant wheel speeds.

    Args:
        segments: List of (duration, left speed, right speed)
        rate_hz: Sampling rate in Hz
        ticks_per_rev: Encoder resolution; angles are quantized if given

    Returns:
        Tuple of (timestamps_s, left_angles, right_angles)
    """
    boundaries = np.concatenate([[0.0], np.cumsum([s[0] for s in segments])])
    timestamps = np.arange(0.0, boundaries[-1] + 1e-9, 1.0 / rate_hz)

    left = np.zeros_like(timestamps)
    right = np.zeros_like(timestamps)
    left_start = 0.0
    right_start = 0.0

    for (duration, left_speed, right_speed), t0 in zip(segments, boundaries[:-1]):
        mask = (timestamps >= t0) & (timestamps <= t0 + duration)
        left[mask] = left_start + left_speed * (timestamps[mask] - t0)
        right[mask] = right_start + right_speed * (timestamps[mask] - t0)
        left_start += left_speed * duration
        right_start += right_speed * duration

    if ticks_per_rev is not None:
        resolution = 2 * np.pi / ticks_per_rev
        left = np.floor(left / resolution) * resolution
        right = np.floor(right / resolution) * resolution

    return timestamps, left, right


def true_final_pose(
    segments: list[tuple[float, float, float]],
    config: OdometryConfig,
) -> np.ndarray:
    """Closed-form final pose [x, y, heading] after all segments."""
    x, y, heading = 0.0, 0.0, 0.0

    for duration, left_speed, right_speed in segments:
        v_left = left_speed * config.left_wheel_radius
        v_right = right_speed * config.right_wheel_radius
        v = 0.5 * (v_left + v_right)
        w = (v_right - v_left) / config.wheel_separation

        if abs(w) < 1e-12:
            x += v * duration * np.cos(heading)
            y += v * duration * np.sin(heading)
            continue

        heading_new = heading + w * duration
        x += v / w * (np.sin(heading_new) - np.sin(heading))
        y -= v / w * (np.cos(heading_new) - np.cos(heading))
        heading = heading_new

    return np.array([x, y, heading])


def write_log(
    path: Path,
    timestamps: np.ndarray,
    left: np.ndarray,
    right: np.ndarray,
    start_ns: int,
) -> None:
    """Write samples in WheelLogReader CSV format."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        f.write("#timestamp [ns],left [rad],right [rad]\n")
        for t, l, r in zip(timestamps, left, right):
            f.write(f"{start_ns + int(round(t * 1e9))},{l:.9f},{r:.9f}\n")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic differential-drive wheel log",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("data/wheels.csv"),
        help="Output CSV log (default: data/wheels.csv)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Odometry YAML config for wheel calibration (default: built-in robot)",
    )
    parser.add_argument(
        "--rate",
        type=float,
        default=50.0,
        help="Sampling rate in Hz (default: 50)",
    )
    parser.add_argument(
        "--ticks-per-rev",
        type=int,
        default=None,
        help="Quantize angles to this encoder resolution (default: no quantization)",
    )
    args = parser.parse_args()

    if args.config is not None:
        config = OdometryConfig.from_yaml(args.config)
    else:
        config = OdometryConfig(
            wheel_separation=0.5, left_wheel_radius=0.1, right_wheel_radius=0.1
        )

    timestamps, left, right = simulate_wheel_angles(
        DEFAULT_SEGMENTS, args.rate, args.ticks_per_rev
    )
    write_log(args.output, timestamps, left, right, start_ns=1_700_000_000_000_000_000)

    x, y, heading = true_final_pose(DEFAULT_SEGMENTS, config)
    print(f"Wrote {len(timestamps)} samples to {args.output}")
    print(f"Duration:        {timestamps[-1]:.2f} s at {args.rate:.0f} Hz")
    print(f"True final pose: x={x:.4f} m, y={y:.4f} m, heading={heading:.4f} rad")


if __name__ == "__main__":
    main()
