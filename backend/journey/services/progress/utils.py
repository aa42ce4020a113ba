"""
Progress Calculation Utilities

Date parsing and rounding helpers shared by the domain calculators, the
streak calculator and the completion scorer.

Raw date values come from several client versions: ISO dates
("2026-10-17"), ISO timestamps with or without offsets
("2026-10-17T08:30:00.000Z") and the occasional display string
("Sat Oct 17 2026"). Anything else is treated as missing.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Union
from zoneinfo import ZoneInfo

from journey.config import settings

DateLike = Union[str, date, datetime, None]

# Fallback formats for non-ISO values written by older clients
_LEGACY_FORMATS = ("%a %b %d %Y", "%Y/%m/%d", "%m/%d/%Y")


def parse_timestamp(value: DateLike) -> Optional[datetime]:
    """
    Parse a raw date or timestamp value.

    Args:
        value: Raw value from a record (string, date, datetime or None).

    Returns:
        Parsed datetime (naive or aware, as written), or None if the value
        is empty or unparsable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in _LEGACY_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    return None


def _local(dt: datetime, tz: Optional[str]) -> datetime:
    """Express dt as a naive datetime in the evaluation timezone."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(ZoneInfo(tz or settings.TIMEZONE)).replace(tzinfo=None)


def to_calendar_day(value: DateLike, tz: Optional[str] = None) -> Optional[date]:
    """
    Normalize a raw value to a calendar day, discarding time of day.

    Offset-aware timestamps are converted to the evaluation timezone
    (settings.TIMEZONE unless tz is given) before the day is taken; naive
    values are taken as already local.

    Returns:
        The calendar day, or None if the value is empty or unparsable.
    """
    dt = parse_timestamp(value)
    if dt is None:
        return None
    return _local(dt, tz).date()


def timestamp_key(value: DateLike, tz: Optional[str] = None) -> datetime:
    """
    Sort key for raw date values.

    Missing and unparsable values sort before everything else.
    """
    dt = parse_timestamp(value)
    if dt is None:
        return datetime.min
    return _local(dt, tz)


def latest_value(values: Iterable[DateLike], tz: Optional[str] = None) -> Optional[str]:
    """
    Return the raw value with the latest timestamp.

    Unparsable values are skipped. On ties the first value wins.

    Returns:
        The winning raw value as a string, or None if nothing parses.
    """
    best: Optional[DateLike] = None
    best_dt: Optional[datetime] = None
    for value in values:
        dt = parse_timestamp(value)
        if dt is None:
            continue
        dt = _local(dt, tz)
        if best_dt is None or dt > best_dt:
            best, best_dt = value, dt

    if best is None:
        return None
    return best if isinstance(best, str) else best.isoformat()


def today_in_timezone(tz: Optional[str] = None) -> date:
    """Today's calendar day in the evaluation timezone."""
    return datetime.now(ZoneInfo(tz or settings.TIMEZONE)).date()


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round with halves going up, the way the dashboards display numbers.

    Python's round() uses banker's rounding, which would show 2.5 as 2.

    Returns:
        An int when ndigits is 0, otherwise a float.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return int(rounded) if ndigits == 0 else float(rounded)


def clamp_percent(value: float) -> float:
    """Clamp a percentage to [0, 100]."""
    return max(0.0, min(100.0, value))


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, defining any ratio over a zero denominator as 0."""
    if not denominator:
        return 0.0
    return numerator / denominator
