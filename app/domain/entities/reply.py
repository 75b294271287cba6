from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.booking import Booking
from app.domain.entities.intent import Intent


@dataclass(frozen=True)
class ChatReply:
    text: str
    intent: Intent
    booking: Booking | None = None
