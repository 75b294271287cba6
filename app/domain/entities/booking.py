from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Booking:
    id: str
    name: str
    email: str
    seat_number: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM, 24h
    duration: str
    purpose: str


@dataclass(frozen=True)
class BookingDraft:
    name: str | None = None
    email: str | None = None
    date: str | None = None
    date_phrase: str | None = None  # raw matched text, e.g. "friday" or "12th dec"
    time: str | None = None
    duration: str | None = None
    purpose: str | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))
