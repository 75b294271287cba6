from __future__ import annotations

from app.application.use_cases.booking import BookingResult
from app.domain.entities.booking import Booking


MISSING_FIELD_PROMPTS = {
    "name": "Your full name",
    "email": "Your email address",
    "date": "Preferred date (e.g., today, tomorrow, or a specific date)",
    "time": "Preferred time (e.g., 2:00 PM)",
}

CANCEL_OR_MODIFY_TEXT = (
    "I can help you cancel or modify your booking. "
    "Could you please provide your booking ID or email address?"
)

HELP_TEXT = (
    "I can assist you with:\n\n"
    "✓ Booking a seat - Just tell me when you'd like to book\n"
    "✓ Checking seat availability\n"
    "✓ Viewing your bookings\n"
    "✓ Modifying or canceling bookings\n"
    "✓ Answering questions about our facilities\n\n"
    "Our seats are available from 9:00 AM to 6:00 PM, Monday through Friday. "
    "How can I help you today?"
)

DEFAULT_TEXT = (
    "I'm here to help you with seat bookings and scheduling. You can ask me to:\n"
    "- Book a seat\n"
    "- Check availability\n"
    "- View your bookings\n"
    "- Modify or cancel a reservation\n\n"
    "What would you like to do?"
)


class ReplyComposer:
    def __init__(self, business_name: str, preview_limit: int = 10) -> None:
        self._business_name = business_name
        self._preview_limit = preview_limit

    def availability(self, free_seats: list[str]) -> str:
        if not free_seats:
            return "All of our seats are booked at the moment. Would you like help with anything else?"
        preview = ", ".join(free_seats[: self._preview_limit])
        more = "..." if len(free_seats) > self._preview_limit else ""
        return f"We have {len(free_seats)} seats available: {preview}{more}. Would you like to book one?"

    def booking(self, result: BookingResult) -> str:
        if result.booking is None:
            return _missing_details(result.missing_fields)
        return _confirmation(result.booking)

    def cancel_or_modify(self) -> str:
        return CANCEL_OR_MODIFY_TEXT

    def view_bookings(self, booking_count: int) -> str:
        if booking_count == 0:
            return "You don't have any active bookings at the moment. Would you like to book a seat?"
        return (
            f"You have {booking_count} active booking(s). "
            "You can see them in the bookings panel on the right. Would you like to modify any of them?"
        )

    def help(self) -> str:
        return HELP_TEXT

    def greeting(self) -> str:
        return (
            f"Hello! Welcome to our {self._business_name} service. "
            "I'm here to help you book a seat or manage your schedule. What would you like to do today?"
        )

    def default(self) -> str:
        return DEFAULT_TEXT


def _missing_details(missing_fields: tuple[str, ...]) -> str:
    lines = ["I'd be happy to help you book a seat! I need a few more details:"]
    lines.extend(f"- {MISSING_FIELD_PROMPTS[field]}" for field in missing_fields)
    lines.append("Could you provide these details?")
    return "\n".join(lines)


def _confirmation(booking: Booking) -> str:
    return (
        f"Perfect! I've successfully booked seat {booking.seat_number} for you.\n\n"
        "📋 Booking Details:\n"
        f"- Name: {booking.name}\n"
        f"- Email: {booking.email}\n"
        f"- Seat: {booking.seat_number}\n"
        f"- Date: {booking.date}\n"
        f"- Time: {booking.time}\n"
        f"- Duration: {booking.duration}\n"
        f"- Purpose: {booking.purpose}\n\n"
        f"A confirmation email will be sent to {booking.email}. "
        "Is there anything else I can help you with?"
    )
