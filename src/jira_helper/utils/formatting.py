"""Formatting utilities for logged time."""

HOURS_PER_DAY = 8
DAYS_PER_WEEK = 5


def fmt_work_time(seconds: float) -> str:
    """Jira work notation: 1d = 8h, 1w = 5d. Zero components are omitted.

    e.g. 178200 -> '1w 1d 1h 30m', 0 -> '0m'
    """
    total_minutes = max(int(seconds), 0) // 60
    total_hours, minutes = divmod(total_minutes, 60)
    total_days, hours = divmod(total_hours, HOURS_PER_DAY)
    weeks, days = divmod(total_days, DAYS_PER_WEEK)

    units = ((weeks, "w"), (days, "d"), (hours, "h"), (minutes, "m"))
    parts = [f"{n}{unit}" for n, unit in units if n]
    return " ".join(parts) if parts else "0m"


def fmt_clock(seconds: float) -> str:
    """Plain hours and minutes, both always shown: 5400 -> '1h 30m'."""
    hours, remainder = divmod(max(int(seconds), 0), 3600)
    return f"{hours}h {remainder // 60}m"


def truncate(text: str, limit: int) -> str:
    """Cut to limit chars, ending in '...' when shortened."""
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."
