#!/usr/bin/env python3
"""Compare pose integration schemes on a constant-curvature loop.

Drives one full circle at a range of update rates and reports how far each
integration scheme ends from the start:

- naive: straight segment along the old heading (Euler)
- midpoint: second-order Runge-Kutta only
- exact: exact arc with midpoint fallback near zero turn rate

Usage:
    uv run python examples/integration_demo.py
"""

import numpy as np

from wheel_odom import Pose2D, PoseIntegrator


def integrate_euler(pose: Pose2D, linear: float, angular: float) -> None:
    """First-order update, for comparison only."""
    pose.x += linear * np.cos(pose.heading)
    pose.y += linear * np.sin(pose.heading)
    pose.heading += angular


def main() -> None:
    """Run the integration comparison."""
    radius = 1.0
    angular_speed = 0.5  # rad/s
    linear_speed = radius * angular_speed
    loop_time = 2 * np.pi / angular_speed

    print(f"Full circle of radius {radius:.1f} m in {loop_time:.1f} s")
    print("=" * 64)
    print(f"{'Rate':>8} | {'Naive':>14} | {'Midpoint':>14} | {'Exact':>14}")
    print("-" * 64)

    for rate_hz in [1.0, 2.0, 5.0, 10.0, 50.0, 200.0]:
        steps = int(round(loop_time * rate_hz))
        dt = loop_time / steps
        d_lin = linear_speed * dt
        d_ang = angular_speed * dt

        naive = Pose2D()
        midpoint = PoseIntegrator()
        exact = PoseIntegrator()

        for _ in range(steps):
            integrate_euler(naive, d_lin, d_ang)
            midpoint.integrate_runge_kutta2(d_lin, d_ang)
            exact.integrate_exact(d_lin, d_ang)

        errors = [
            float(np.linalg.norm(p.position))
            for p in (naive, midpoint.pose, exact.pose)
        ]
        print(
            f"{rate_hz:6.0f}Hz | {errors[0]:12.3e} m | "
            f"{errors[1]:12.3e} m | {errors[2]:12.3e} m"
        )

    print()
    print("Exact arc integration closes the loop at any rate; the approximations")
    print("only converge as the update rate grows.")


if __name__ == "__main__":
    main()
