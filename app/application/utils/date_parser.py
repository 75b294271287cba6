from __future__ import annotations

from datetime import date, timedelta

DATE_FORMAT = "%Y-%m-%d"

WEEKDAY_NAMES = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

MONTH_ABBREVIATIONS = (
    "jan",
    "feb",
    "mar",
    "apr",
    "may",
    "jun",
    "jul",
    "aug",
    "sep",
    "oct",
    "nov",
    "dec",
)


def resolve_date_phrase(phrase: str, reference_date: date) -> date:
    """
    Resolve a matched day phrase to a calendar date.

    Only "tomorrow" moves the date. Weekday names and numeric days such as
    "12th dec" are recognized by the extractor but still resolve to the
    reference date.
    """
    normalized = phrase.lower().strip()
    if normalized == "tomorrow":
        return reference_date + timedelta(days=1)
    return reference_date


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def to_24h_time(hour: int, minutes: str | None, period: str | None) -> str:
    """Convert a matched clock time to zero-padded HH:MM."""
    am_pm = period.lower() if period else None
    if am_pm == "pm" and hour < 12:
        hour += 12
    elif am_pm == "am" and hour == 12:
        hour = 0
    return f"{hour:02d}:{minutes or '00'}"


def normalize_duration(amount: str, unit: str) -> str:
    unit = unit.lower()
    if unit.startswith("hour") or unit == "hr":
        return f"{amount} hours"
    return f"{amount} minutes"
