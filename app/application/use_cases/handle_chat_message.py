from __future__ import annotations

import logging
from typing import Callable

from app.application.exceptions import InvalidChatRequestError
from app.application.ports.seat_inventory import SeatInventoryPort
from app.application.use_cases.booking import BookingUseCase
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.reply_composer import ReplyComposer
from app.domain.entities.booking import Booking
from app.domain.entities.intent import Intent
from app.domain.entities.message import Message
from app.domain.entities.reply import ChatReply


class HandleChatMessageUseCase:
    def __init__(
        self,
        classify_intent: ClassifyIntentUseCase,
        booking_use_case: BookingUseCase,
        inventory: SeatInventoryPort,
        composer: ReplyComposer,
    ) -> None:
        self._classify_intent = classify_intent
        self._booking_use_case = booking_use_case
        self._inventory = inventory
        self._composer = composer
        self._handlers: dict[Intent, Callable[[str, list[Message], list[Booking]], ChatReply]] = {
            Intent.availability: self._handle_availability,
            Intent.booking: self._handle_booking,
            Intent.cancel_or_modify: self._handle_cancel_or_modify,
            Intent.view_bookings: self._handle_view_bookings,
            Intent.help: self._handle_help,
            Intent.greeting: self._handle_greeting,
            Intent.default: self._handle_default,
        }
        self._logger = logging.getLogger(__name__)

    def execute(self, messages: list[Message], bookings: list[Booking]) -> ChatReply:
        if not messages:
            raise InvalidChatRequestError("Conversation has no messages.")

        user_text = messages[-1].content
        if not isinstance(user_text, str):
            raise InvalidChatRequestError("Latest message has no readable content.")
        history = messages[:-1]

        intent = self._classify_intent.execute(user_text)
        self._logger.info(
            "Chat message classified",
            extra={"intent": intent.value, "message_count": len(messages)},
        )
        return self._handlers[intent](user_text, history, bookings)

    def _handle_availability(self, user_text: str, history: list[Message], bookings: list[Booking]) -> ChatReply:
        free_seats = self._inventory.free_seats(bookings)
        return ChatReply(text=self._composer.availability(free_seats), intent=Intent.availability)

    def _handle_booking(self, user_text: str, history: list[Message], bookings: list[Booking]) -> ChatReply:
        result = self._booking_use_case.process_booking_request(user_text, history, bookings)
        return ChatReply(text=self._composer.booking(result), intent=Intent.booking, booking=result.booking)

    def _handle_cancel_or_modify(self, user_text: str, history: list[Message], bookings: list[Booking]) -> ChatReply:
        # Acknowledged only: no lookup or change happens whatever the user sends next.
        return ChatReply(text=self._composer.cancel_or_modify(), intent=Intent.cancel_or_modify)

    def _handle_view_bookings(self, user_text: str, history: list[Message], bookings: list[Booking]) -> ChatReply:
        return ChatReply(text=self._composer.view_bookings(len(bookings)), intent=Intent.view_bookings)

    def _handle_help(self, user_text: str, history: list[Message], bookings: list[Booking]) -> ChatReply:
        return ChatReply(text=self._composer.help(), intent=Intent.help)

    def _handle_greeting(self, user_text: str, history: list[Message], bookings: list[Booking]) -> ChatReply:
        return ChatReply(text=self._composer.greeting(), intent=Intent.greeting)

    def _handle_default(self, user_text: str, history: list[Message], bookings: list[Booking]) -> ChatReply:
        return ChatReply(text=self._composer.default(), intent=Intent.default)
