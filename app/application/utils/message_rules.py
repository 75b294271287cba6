from __future__ import annotations

AVAILABILITY_KEYWORDS = (
    "available",
    "availability",
    "free seat",
)

BOOKING_KEYWORDS = (
    "book",
    "reserve",
    "schedule",
)

CANCEL_OR_MODIFY_KEYWORDS = (
    "cancel",
    "modify",
    "change",
)

VIEW_BOOKINGS_KEYWORDS = (
    "my booking",
    "show booking",
    "view booking",
)

HELP_KEYWORDS = (
    "help",
    "how",
    "what can",
)

GREETING_KEYWORDS = (
    "hello",
    "hi",
    "hey",
)


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    # Plain substring containment: "hi" also fires inside "this" or "which".
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def is_availability_query(text: str) -> bool:
    return _contains_any(text, AVAILABILITY_KEYWORDS)


def is_booking_request(text: str) -> bool:
    """
    Check if user asks to book, reserve or schedule.
    Also true for "booking", so view-bookings phrasing must be ranked after this.
    """
    return _contains_any(text, BOOKING_KEYWORDS)


def is_cancel_or_modify_request(text: str) -> bool:
    return _contains_any(text, CANCEL_OR_MODIFY_KEYWORDS)


def is_view_bookings_request(text: str) -> bool:
    return _contains_any(text, VIEW_BOOKINGS_KEYWORDS)


def is_help_request(text: str) -> bool:
    return _contains_any(text, HELP_KEYWORDS)


def is_greeting(text: str) -> bool:
    return _contains_any(text, GREETING_KEYWORDS)
