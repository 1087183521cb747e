"""Timestamp utilities. Portfolio timestamps are epoch milliseconds."""

import time
from datetime import datetime


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return time.time_ns() // 1_000_000


def format_timestamp(epoch_ms: int, relative: bool = False) -> str:
    """
    Format an epoch-milliseconds timestamp.

    Args:
        epoch_ms: Milliseconds since the epoch
        relative: If True, show relative time (e.g., "2h ago")
                 If False, show absolute time (e.g., "2025-11-13 18:45:40")

    Returns:
        Human-readable timestamp

    Examples:
        format_timestamp(1763059540572)
        # "2025-11-13 18:45:40"

        format_timestamp(now_ms() - 7_200_000, relative=True)
        # "2h ago"
    """
    try:
        dt = datetime.fromtimestamp(epoch_ms / 1000)
    except (TypeError, ValueError, OverflowError, OSError):
        return str(epoch_ms)

    if relative:
        return _format_relative_time(dt)
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def _format_relative_time(dt: datetime) -> str:
    """
    Format datetime as relative time in compact format.

    - Seconds: "30s ago"
    - Minutes: "15m ago"
    - Hours: "2h ago"
    - Days: "5d ago"
    """
    diff = datetime.now() - dt

    if diff.total_seconds() < 0:
        diff = -diff
        suffix = "from now"
    else:
        suffix = "ago"

    seconds = int(diff.total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = diff.days

    if seconds < 60:
        return f"{seconds}s {suffix}"
    elif minutes < 60:
        return f"{minutes}m {suffix}"
    elif hours < 24:
        return f"{hours}h {suffix}"
    else:
        return f"{days}d {suffix}"
