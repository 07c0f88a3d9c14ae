#!/usr/bin/env python3
"""Demo script for wheel odometry replay.

Replays a recorded (or simulated) wheel log through the odometry estimator
(wheel angles, or commanded velocities when the config sets open_loop),
prints the pose and smoothed velocity, and optionally streams the run to
the Rerun viewer.

Usage:
    uv run python scripts/simulate_wheel_log.py --output data/wheels.csv
    uv run python examples/odometry_demo.py
    uv run python examples/odometry_demo.py --config config/odometry.yaml --rerun
"""

import argparse
from pathlib import Path

import numpy as np

from wheel_odom import Odometry, OdometryConfig, OdometryVisualizer, WheelLogReader


def main() -> None:
    """Run the odometry replay demo."""
    parser = argparse.ArgumentParser(description="Replay a wheel log through odometry")
    parser.add_argument("--log", type=Path, default=Path("data/wheels.csv"))
    parser.add_argument("--config", type=Path, default=Path("config/odometry.yaml"))
    parser.add_argument("--rerun", action="store_true", help="Stream to the Rerun viewer")
    args = parser.parse_args()

    # Initialize
    print("Initializing wheel odometry...")
    print("=" * 80)
    config = OdometryConfig.from_yaml(args.config)
    odom: Odometry = config.create_odometry()
    reader = WheelLogReader(args.log)
    visualizer = OdometryVisualizer() if args.rerun else None

    params = odom.wheel_params
    print(f"Loaded {len(reader)} wheel samples from {args.log}")
    print(f"  Wheel separation: {params.wheel_separation:.3f} m")
    print(f"  Wheel radii:      {params.left_wheel_radius:.3f} / {params.right_wheel_radius:.3f} m")
    print(f"  Rolling window:   {odom.velocity_rolling_window_size}")
    print()

    # Column headers
    print(
        f"{'Sample':>6} | {'Time':>7} | "
        f"{'Position':^22} | {'Heading':>8} | "
        f"{'Linear':>8} {'Angular':>8}"
    )
    print("-" * 80)

    # The first sample is the baseline for differencing
    first = reader[0]
    if config.open_loop:
        odom.init(first.timestamp)
    else:
        odom.init_from_wheel_positions(first.timestamp, first.left, first.right)
    rejected = 0
    headings: list[float] = [odom.heading]

    for i in range(1, len(reader)):
        sample = reader[i]
        if config.open_loop:
            # Log columns are commanded linear/angular velocities
            odom.update_open_loop(sample.left, sample.right, sample.timestamp)
        elif not odom.update_from_wheel_positions(sample.left, sample.right, sample.timestamp):
            rejected += 1
            continue

        headings.append(odom.heading)
        if visualizer is not None:
            visualizer.log_odometry(odom)

        # Print progress every 50 samples
        if i % 50 == 0:
            elapsed = sample.timestamp - first.timestamp
            print(
                f"{i:6d} | {elapsed:6.2f}s | "
                f"[{odom.x:9.3f}, {odom.y:9.3f}] | {odom.heading:8.3f} | "
                f"{odom.linear:8.3f} {odom.angular:8.3f}"
            )

    # Final statistics
    pose = odom.pose
    duration = (reader.end_timestamp_ns - reader.start_timestamp_ns) * 1e-9
    print()
    print("=" * 80)
    print("SUMMARY")
    print("=" * 80)
    print(f"Log duration:       {duration:.2f} s")
    print(f"Samples processed:  {len(reader) - 1 - rejected} (+1 baseline)")
    print(f"Samples rejected:   {rejected} (dt < 0.1 ms)")
    print(f"Final position:     [{pose.x:.4f}, {pose.y:.4f}] m")
    print(f"Final heading:      {pose.heading:.4f} rad (display: {pose.normalized_heading:.4f})")
    print(f"Total turned:       {np.sum(np.abs(np.diff(headings))):.3f} rad")
    print(f"Final velocity:     {odom.linear:.3f} m/s, {odom.angular:.3f} rad/s")


if __name__ == "__main__":
    main()
