"""Common utility functions and helpers for the darksky package."""

from darksky.utils.time import TimeUtils

__all__ = ["TimeUtils"]
