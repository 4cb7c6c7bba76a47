# src/darksky/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime


class TimeUtils:
    """Conversions between epoch seconds and timezone-aware datetimes.

    The API speaks epoch seconds in both directions: time machine paths
    carry one and every data point is stamped with one.
    """

    @staticmethod
    def datetime_to_epoch(dt: datetime) -> int:
        """Convert datetime to epoch seconds.

        Args:
            dt: Datetime object (assumes UTC timezone if not specified)

        Returns:
            Epoch seconds as integer
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return int(dt.timestamp())

    @staticmethod
    def epoch_to_datetime(timestamp: int) -> datetime:
        """Convert UNIX timestamp to UTC datetime with timezone information.

        Args:
            timestamp: UNIX timestamp (seconds since epoch)

        Returns:
            Timezone-aware datetime object in UTC
        """
        return datetime.fromtimestamp(timestamp, tz=UTC)

    @classmethod
    def to_epoch(cls, when: datetime | int) -> int:
        """Normalize a datetime or epoch value to epoch seconds."""
        if isinstance(when, datetime):
            return cls.datetime_to_epoch(when)
        return int(when)
