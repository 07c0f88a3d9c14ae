"""Reader for recorded wheel measurement logs.

CSV format (one sample per line, comment lines start with '#'):

    #timestamp [ns],left,right
    1403636579763555584,0.000,0.000
    1403636579773555584,0.012,0.013

``left``/``right`` are cumulative wheel angles (rad) for position logs or
wheel-derived linear/angular values for velocity logs; the reader does not
interpret them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator


@dataclass
class WheelSample:
    """Single timestamped wheel measurement.

    Attributes:
        timestamp_ns: Measurement timestamp in nanoseconds
        left: Left channel value
        right: Right channel value
    """

    timestamp_ns: int
    left: float
    right: float

    @property
    def timestamp(self) -> float:
        """Return the timestamp in seconds."""
        return self.timestamp_ns * 1e-9


class WheelLogReader:
    """Loads a wheel log CSV into memory and iterates over its samples.

    Example usage:
        reader = WheelLogReader("data/run_01/wheels.csv")
        for sample in reader:
            odom.update_from_wheel_positions(sample.left, sample.right, sample.timestamp)
    """

    def __init__(self, log_path: str | Path) -> None:
        """Initialize reader.

        Args:
            log_path: Path to the CSV log

        Raises:
            FileNotFoundError: If the log doesn't exist
            ValueError: If the log has no samples or a row is malformed
        """
        self.log_path = Path(log_path)
        if not self.log_path.exists():
            raise FileNotFoundError(f"Wheel log not found: {self.log_path}")

        self._samples = self._load_samples()
        if not self._samples:
            raise ValueError(f"No samples found in {self.log_path}")

    def _load_samples(self) -> list[WheelSample]:
        """Parse every data row of the log."""
        samples: list[WheelSample] = []

        with open(self.log_path, "r") as f:
            for line_no, line in enumerate(f, start=1):
                line = line.strip()
                if not line or line.startswith("#"):
                    continue

                parts = [p.strip() for p in line.split(",")]
                if len(parts) < 3:
                    raise ValueError(
                        f"Invalid row at {self.log_path}:{line_no}: "
                        f"expected 3 columns, got {len(parts)}"
                    )

                try:
                    sample = WheelSample(
                        timestamp_ns=int(parts[0]),
                        left=float(parts[1]),
                        right=float(parts[2]),
                    )
                except ValueError as e:
                    raise ValueError(
                        f"Invalid row at {self.log_path}:{line_no}: {e}"
                    ) from e
                samples.append(sample)

        return samples

    @property
    def start_timestamp_ns(self) -> int:
        """First timestamp in nanoseconds."""
        return self._samples[0].timestamp_ns

    @property
    def end_timestamp_ns(self) -> int:
        """Last timestamp in nanoseconds."""
        return self._samples[-1].timestamp_ns

    def __getitem__(self, idx: int) -> WheelSample:
        return self._samples[idx]

    def __len__(self) -> int:
        """Number of samples in the log."""
        return len(self._samples)

    def __iter__(self) -> Iterator[WheelSample]:
        return iter(self._samples)
