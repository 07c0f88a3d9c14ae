"""I/O utilities for recorded wheel data."""

from .wheel_log import WheelLogReader, WheelSample

__all__ = [
    "WheelLogReader",
    "WheelSample",
]
