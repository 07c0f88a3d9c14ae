"""Fixed-capacity rolling mean over a stream of scalar samples.

Used to smooth the discrete-time velocity estimates produced by the
odometry differencing step. Storage is a preallocated numpy ring buffer,
so accumulating never allocates.
"""

from __future__ import annotations

import numpy as np


class RollingMeanAccumulator:
    """Windowed mean of the most recent ``capacity`` samples.

    The running sum always equals the sum of the samples currently held.
    Once the buffer is full, each new sample evicts the oldest one (FIFO).

    Example:
        >>> acc = RollingMeanAccumulator(3)
        >>> for s in [1.0, 2.0, 3.0, 4.0]:
        ...     acc.accumulate(s)
        >>> acc.get_rolling_mean()
        3.0
    """

    def __init__(self, capacity: int) -> None:
        """Initialize an empty accumulator.

        Args:
            capacity: Window size (number of samples averaged), >= 1

        Raises:
            ValueError: If capacity is smaller than 1
        """
        self._buffer = np.zeros(0, dtype=np.float64)
        self._sum = 0.0
        self._count = 0
        self._next_idx = 0
        self.reset(capacity)

    def accumulate(self, sample: float) -> None:
        """Insert a sample, evicting the oldest one if the window is full.

        Args:
            sample: New scalar sample
        """
        sample = float(sample)
        capacity = len(self._buffer)

        if self._count == capacity:
            self._sum -= self._buffer[self._next_idx]
        else:
            self._count += 1

        self._buffer[self._next_idx] = sample
        self._sum += sample
        self._next_idx = (self._next_idx + 1) % capacity

    def get_rolling_mean(self) -> float:
        """Return the mean of the samples in the window (0.0 when empty)."""
        if self._count == 0:
            return 0.0
        return float(self._sum / self._count)

    def reset(self, capacity: int | None = None) -> None:
        """Discard all samples, optionally changing the window size.

        Args:
            capacity: New window size; keeps the current one if None

        Raises:
            ValueError: If capacity is smaller than 1
        """
        if capacity is not None:
            capacity = int(capacity)
            if capacity < 1:
                raise ValueError(f"Rolling window capacity must be >= 1, got {capacity}")
            if capacity != len(self._buffer):
                self._buffer = np.zeros(capacity, dtype=np.float64)

        self._buffer.fill(0.0)
        self._sum = 0.0
        self._count = 0
        self._next_idx = 0

    def values(self) -> np.ndarray:
        """Return the samples in the window, oldest first."""
        if self._count < len(self._buffer):
            return self._buffer[: self._count].copy()
        return np.roll(self._buffer, -self._next_idx)

    @property
    def capacity(self) -> int:
        """Return the window size."""
        return len(self._buffer)

    @property
    def is_full(self) -> bool:
        """Return True once ``capacity`` samples have been accumulated."""
        return self._count == len(self._buffer)

    def __len__(self) -> int:
        """Return the number of samples currently in the window."""
        return self._count

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"RollingMeanAccumulator(capacity={self.capacity}, "
            f"count={self._count}, mean={self.get_rolling_mean():.4f})"
        )
