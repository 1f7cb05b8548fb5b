"""Parsing and formatting of human-readable sizes, durations and timestamps.

Parsing is deliberately lenient: any string that does not match the accepted grammar
yields ``0`` instead of raising, so that preset values never abort a scan.
"""

import re
from datetime import datetime, timezone
from typing import Optional

from humanfriendly import InvalidSize
from humanfriendly import parse_size as _humanfriendly_parse_size

KIB = 1024
MIB = 1024**2
GIB = 1024**3

_SIZE_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)\s*(B|KB|MB|GB)?$", re.IGNORECASE)
_DURATION_PATTERN = re.compile(r"^(\d+)([hdwm])$")

# A month is a fixed 30 days; durations are not calendar aware.
DURATION_UNITS_MS = {
    "h": 3_600_000,
    "d": 86_400_000,
    "w": 604_800_000,
    "m": 2_592_000_000,
}


def parse_size(size_str: str) -> int:
    """Parse a human-readable size to bytes using binary (1024-based) multipliers.

    Accepted units are ``B``, ``KB``, ``MB`` and ``GB`` (case-insensitive); a bare number
    is taken as bytes.

    Args:
        size_str: Size string like '500MB', '2.5 kb' or '1024'.

    Returns:
        Size in bytes, or 0 if the string is not a valid size.

    Example:
        >>> parse_size("2.5MB")
        2621440
        >>> parse_size("1kb")
        1024
        >>> parse_size("abc")
        0
    """
    if not isinstance(size_str, str):
        return 0
    text = size_str.strip()
    if not _SIZE_PATTERN.match(text):
        return 0
    try:
        return int(_humanfriendly_parse_size(text, binary=True))
    except InvalidSize:
        return 0


def parse_duration(duration_str: str) -> int:
    """Parse a duration like '7d' to milliseconds.

    The number must be an integer followed by exactly one unit letter: ``h`` (hour),
    ``d`` (day), ``w`` (week) or ``m`` (month, approximated as 30 days).

    Args:
        duration_str: Duration string.

    Returns:
        Duration in milliseconds, or 0 if the string is not a valid duration.

    Example:
        >>> parse_duration("7d")
        604800000
        >>> parse_duration("7")
        0
        >>> parse_duration("7y")
        0
    """
    if not isinstance(duration_str, str):
        return 0
    match = _DURATION_PATTERN.match(duration_str)
    if not match:
        return 0
    amount, unit = match.groups()
    return int(amount) * DURATION_UNITS_MS[unit]


def format_size(num_bytes: int) -> str:
    """Format a byte count for display.

    Example:
        >>> format_size(999)
        '999 B'
        >>> format_size(1024)
        '1.0 KB'
        >>> format_size(1048576)
        '1.0 MB'
    """
    if num_bytes < KIB:
        return f"{num_bytes} B"
    if num_bytes < MIB:
        return f"{num_bytes / KIB:.1f} KB"
    if num_bytes < GIB:
        return f"{num_bytes / MIB:.1f} MB"
    return f"{num_bytes / GIB:.1f} GB"


def format_relative_age(timestamp: datetime, now: Optional[datetime] = None) -> str:
    """Describe how long ago a timestamp was.

    Args:
        timestamp: Timezone-aware moment to describe.
        now: Reference time. Defaults to the current UTC time.

    Returns:
        'just now', 'Nm ago', 'Nh ago', 'Nd ago', or the locale date for anything
        30 days or older.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elapsed_ms = (now - timestamp).total_seconds() * 1000

    minutes = int(elapsed_ms // 60_000)
    hours = int(elapsed_ms // 3_600_000)
    days = int(elapsed_ms // 86_400_000)

    if minutes < 1:
        return "just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 30:
        return f"{days}d ago"
    return timestamp.astimezone().strftime("%x")


def format_timestamp(timestamp: datetime) -> str:
    """Format a timestamp in the fixed form used by structured output.

    Example:
        >>> format_timestamp(datetime(2024, 1, 2, 3, 4, 5, 678900, tzinfo=timezone.utc))
        '2024-01-02T03:04:05.678Z'
    """
    utc = timestamp.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
