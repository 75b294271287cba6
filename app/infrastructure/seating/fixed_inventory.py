from __future__ import annotations

from typing import Iterable

from app.application.ports.seat_inventory import SeatInventoryPort
from app.domain.entities.booking import Booking


class FixedSeatInventory(SeatInventoryPort):
    def __init__(self, rows: str = "AB", seats_per_row: int = 10) -> None:
        if not rows or seats_per_row < 1:
            raise ValueError("Seat inventory needs at least one row and one seat per row.")
        self._seats = [f"{row}{number}" for row in rows for number in range(1, seats_per_row + 1)]

    def all_seats(self) -> list[str]:
        return list(self._seats)

    def free_seats(self, bookings: Iterable[Booking]) -> list[str]:
        booked = {booking.seat_number for booking in bookings}
        return [seat for seat in self._seats if seat not in booked]

    def first_free_seat(self, bookings: Iterable[Booking]) -> str | None:
        free = self.free_seats(bookings)
        return free[0] if free else None

    def fallback_seat(self) -> str:
        return self._seats[0]
