"""
Common Schema Types

Small value types shared by several resource schemas and by the
response envelope.
"""

from dataclasses import dataclass
from datetime import datetime


class Timestamp(int):
    """
    Unix timestamp (seconds since epoch) as used throughout the ChatWork API.

    Behaves like a plain ``int`` on the wire and in arithmetic, and adds
    conversion to a displayable local ``datetime``.

    Example:
        >>> ts = Timestamp(1609459200)
        >>> int(ts.to_datetime().timestamp())
        1609459200
    """

    def to_datetime(self) -> datetime:
        """Convert to a naive ``datetime`` in the local timezone."""
        return datetime.fromtimestamp(int(self))

    def __str__(self) -> str:
        return str(self.to_datetime())

    def __repr__(self) -> str:
        return f"Timestamp({int(self)})"


@dataclass(frozen=True)
class RateLimit:
    """
    Rate limit information attached to every response envelope.

    ChatWork does not document rate limit headers, so the values are never
    populated and stay at zero.

    Attributes:
        limit: Maximum number of requests in the current window
        remaining: Requests remaining in the current window
        reset: Unix time at which the window resets
    """

    limit: int = 0
    remaining: int = 0
    reset: int = 0
