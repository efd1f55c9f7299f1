"""Common types used across dampertest modules.

Type Aliases:
    SessionId: Identifies a test session.
    ProjectId: Identifies an external project a session belongs to.
    IdGenerator: Callable returning a fresh unique identifier string.
    Clock: Callable returning the current Timestamp.

Classes:
    Timestamp: High-resolution timestamp with nanosecond precision.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Callable, NewType

SessionId = NewType("SessionId", str)
"""Type alias for test session identifiers."""

ProjectId = NewType("ProjectId", str)
"""Type alias for external project identifiers."""

IdGenerator = Callable[[], str]
"""Factory for fresh session identifiers; injectable for deterministic tests."""


@dataclass(frozen=True)
class Timestamp:
    """High-resolution timestamp with nanosecond precision.

    Timestamps are stored as nanoseconds since the Unix epoch (1970-01-01 00:00:00 UTC).

    Attributes:
        unix_ns: Nanoseconds since Unix epoch.

    Example:
        >>> ts = Timestamp.now()
        >>> print(ts.format("%Y-%m-%d"))
    """

    unix_ns: int

    @classmethod
    def now(cls) -> Timestamp:
        """Create a timestamp for the current time.

        Returns:
            A new Timestamp with the current time.
        """
        return cls(unix_ns=time.time_ns())

    def to_datetime(self) -> datetime:
        """Convert to a timezone-aware datetime object in UTC.

        Returns:
            A datetime object in UTC timezone.
        """
        return datetime.fromtimestamp(self.unix_ns / 1_000_000_000, tz=timezone.utc)

    def format(self, fmt: str, tz: tzinfo | None = None) -> str:
        """Format the timestamp with a strftime pattern.

        Args:
            fmt: strftime format string, e.g. ``"%Y-%m-%d"``.
            tz: Zone to render in. Defaults to the local zone of the host,
                so dates match the operator's calendar.

        Returns:
            The formatted string.
        """
        return self.to_datetime().astimezone(tz).strftime(fmt)


Clock = Callable[[], Timestamp]
"""Source of creation timestamps; injectable for deterministic tests."""
