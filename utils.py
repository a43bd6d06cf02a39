import math
from datetime import datetime


def parse_date(date_str: str) -> datetime:
    """Parse a date string into a datetime object."""
    try:
        return datetime.fromisoformat(date_str)
    except ValueError:
        return datetime.strptime(date_str, "%Y-%m-%d %H:%M")


def combine_date_time(date_str: str, time_str: str) -> datetime:
    """Join the separate date and HH:MM fields of the event form."""
    return parse_date(f"{date_str}T{time_str or '00:00'}")


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def percentage(part: float, whole: float) -> int:
    """Whole-number percentage, 0 when there is nothing to divide by."""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def average(values: list[float]) -> int:
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))
