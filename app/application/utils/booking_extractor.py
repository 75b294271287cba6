from __future__ import annotations

import re
from datetime import date

from app.application.utils.date_parser import (
    MONTH_ABBREVIATIONS,
    WEEKDAY_NAMES,
    format_date,
    normalize_duration,
    resolve_date_phrase,
    to_24h_time,
)
from app.domain.entities.booking import BookingDraft

NAME_PATTERN = re.compile(
    r"(?:name is|I'm|I am|my name's)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)",
    re.IGNORECASE,
)

EMAIL_PATTERN = re.compile(r"([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})")

DATE_PATTERN = re.compile(
    r"(?:on|for)\s+("
    r"tomorrow|today|" + "|".join(WEEKDAY_NAMES) + r"|"
    r"\d{1,2}(?:st|nd|rd|th)?(?:\s+(?:" + "|".join(MONTH_ABBREVIATIONS) + r")[a-z]*)?"
    r")",
    re.IGNORECASE,
)

TIME_PATTERN = re.compile(r"(?:at|@)\s*(\d{1,2})(?::(\d{2}))?\s*(am|pm)?", re.IGNORECASE)

DURATION_PATTERN = re.compile(r"(?:for)\s+(\d+)\s*(hour|hr|minute|min)s?", re.IGNORECASE)

PURPOSE_PATTERN = re.compile(
    r"(?:for|purpose:|reason:)\s+([a-z\s]+(?:meeting|interview|work|discussion|presentation))",
    re.IGNORECASE,
)


def extract_booking_info(text: str, reference_date: date) -> BookingDraft | None:
    """
    Pull booking fields out of free text.

    Every field has its own pattern and the first match in the text wins, so
    details given early in a conversation take precedence over later ones.
    Returns None when no field matched at all.
    """
    name = None
    name_match = NAME_PATTERN.search(text)
    if name_match:
        name = name_match.group(1)

    email = None
    email_match = EMAIL_PATTERN.search(text)
    if email_match:
        email = email_match.group(1)

    resolved_date = None
    date_phrase = None
    date_match = DATE_PATTERN.search(text)
    if date_match:
        date_phrase = date_match.group(1)
        resolved_date = format_date(resolve_date_phrase(date_phrase, reference_date))

    time = None
    time_match = TIME_PATTERN.search(text)
    if time_match:
        time = to_24h_time(int(time_match.group(1)), time_match.group(2), time_match.group(3))

    duration = None
    duration_match = DURATION_PATTERN.search(text)
    if duration_match:
        duration = normalize_duration(duration_match.group(1), duration_match.group(2))

    purpose = None
    purpose_match = PURPOSE_PATTERN.search(text)
    if purpose_match:
        purpose = purpose_match.group(1).strip()

    draft = BookingDraft(
        name=name,
        email=email,
        date=resolved_date,
        date_phrase=date_phrase,
        time=time,
        duration=duration,
        purpose=purpose,
    )
    return None if draft.is_empty() else draft
