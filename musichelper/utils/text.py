"""
Text utilities for Music Helper

Display formatting used by track lists: compact track lengths and simple
string joining.
"""

import numbers
from typing import Optional, Iterable, Any

from ..core.exceptions import InvalidArgumentError


MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

NOT_AVAILABLE = "N/A"


def format_track_length(time_ms: int) -> str:
    """
    Format milliseconds into a human-readable track length

    Examples:
        01:48:24 for 1 hour, 48 minutes, 24 seconds
        24:02 for 24 minutes, 2 seconds
        52s for 52 seconds
        N/A for anything under one second

    Args:
        time_ms: Track length in milliseconds

    Returns:
        Formatted track length

    Raises:
        InvalidArgumentError: If time_ms is negative or not an integer
    """
    if isinstance(time_ms, bool) or not isinstance(time_ms, numbers.Integral):
        raise InvalidArgumentError("Track length must be an integer number of milliseconds",
                                   details=f"got {type(time_ms).__name__}")
    if time_ms < 0:
        raise InvalidArgumentError("Track length cannot be negative", details=f"got {time_ms} ms")

    time_ms = int(time_ms)
    hours, remainder = divmod(time_ms, MS_PER_HOUR)
    minutes, remainder = divmod(remainder, MS_PER_MINUTE)
    seconds = remainder // MS_PER_SECOND

    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    elif minutes > 0:
        return f"{minutes:02d}:{seconds:02d}"
    elif seconds > 0:
        return f"{seconds:02d}s"
    else:
        return NOT_AVAILABLE


def implode(elements: Optional[Iterable[Any]], separator: str) -> Optional[str]:
    """
    Join elements with a separator

    Args:
        elements: Values to join, converted with str()
        separator: Separator placed between consecutive elements

    Returns:
        The joined string, "" for no elements, or None if elements is None
    """
    if elements is None:
        return None
    return separator.join(str(element) for element in elements)


__all__ = [
    'format_track_length',
    'implode',
    'MS_PER_SECOND',
    'MS_PER_MINUTE',
    'MS_PER_HOUR',
    'NOT_AVAILABLE'
]
