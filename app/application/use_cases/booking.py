from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable
from zoneinfo import ZoneInfo

from app.application.ports.seat_inventory import SeatInventoryPort
from app.application.utils.booking_extractor import extract_booking_info
from app.domain.entities.booking import Booking, BookingDraft
from app.domain.entities.message import Message

REQUIRED_FIELDS = ("name", "email", "date", "time")


@dataclass(frozen=True)
class BookingResult:
    action: str  # "ask_details" | "booked"
    draft: BookingDraft | None
    missing_fields: tuple[str, ...] = ()
    booking: Booking | None = None


class BookingUseCase:
    def __init__(
        self,
        inventory: SeatInventoryPort,
        timezone: ZoneInfo,
        default_duration: str = "2 hours",
        default_purpose: str = "General booking",
        id_prefix: str = "BK",
        clock: Callable[[ZoneInfo], datetime] | None = None,
    ) -> None:
        self._inventory = inventory
        self._timezone = timezone
        self._default_duration = default_duration
        self._default_purpose = default_purpose
        self._id_prefix = id_prefix
        self._clock = clock or datetime.now
        self._logger = logging.getLogger(__name__)

    def process_booking_request(
        self,
        user_text: str,
        history: list[Message],
        bookings: list[Booking],
    ) -> BookingResult:
        """
        Re-scan the whole transcript for booking details.

        Nothing is remembered between requests: the fields are derived again
        from the prior messages plus the latest one every time.
        """
        now = self._clock(self._timezone)
        conversation = " ".join(m.content for m in history) + " " + user_text
        draft = extract_booking_info(conversation, reference_date=now.date())

        missing = tuple(f for f in REQUIRED_FIELDS if draft is None or getattr(draft, f) is None)
        if missing:
            self._logger.info("Booking details incomplete", extra={"missing_fields": ",".join(missing)})
            return BookingResult(action="ask_details", draft=draft, missing_fields=missing)

        seat = self._allocate_seat(bookings)
        booking = Booking(
            id=f"{self._id_prefix}{int(now.timestamp() * 1000)}",
            name=draft.name,
            email=draft.email,
            seat_number=seat,
            date=draft.date,
            time=draft.time,
            duration=draft.duration or self._default_duration,
            purpose=draft.purpose or self._default_purpose,
        )
        self._logger.info(
            "Booking created",
            extra={"booking_id": booking.id, "seat_number": booking.seat_number},
        )
        return BookingResult(action="booked", draft=draft, booking=booking)

    def _allocate_seat(self, bookings: list[Booking]) -> str:
        # Not atomic: two concurrent callers holding the same list get the same seat.
        seat = self._inventory.first_free_seat(bookings)
        if seat is None:
            seat = self._inventory.fallback_seat()
            self._logger.warning(
                "No free seat left, using fallback seat",
                extra={"seat_number": seat, "reason": "inventory_exhausted"},
            )
        return seat
