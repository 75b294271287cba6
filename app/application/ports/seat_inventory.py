from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from app.domain.entities.booking import Booking


class SeatInventoryPort(ABC):
    @abstractmethod
    def all_seats(self) -> list[str]:
        """Return every bookable seat code in allocation order."""
        raise NotImplementedError

    @abstractmethod
    def free_seats(self, bookings: Iterable[Booking]) -> list[str]:
        """Return seats not referenced by any booking, in allocation order."""
        raise NotImplementedError

    @abstractmethod
    def first_free_seat(self, bookings: Iterable[Booking]) -> str | None:
        """Return the first free seat, or None when the inventory is exhausted."""
        raise NotImplementedError

    @abstractmethod
    def fallback_seat(self) -> str:
        """Seat handed out when nothing is free."""
        raise NotImplementedError
