from __future__ import annotations

from typing import Callable

from app.application.utils.message_rules import (
    is_availability_query,
    is_booking_request,
    is_cancel_or_modify_request,
    is_greeting,
    is_help_request,
    is_view_bookings_request,
)
from app.domain.entities.intent import Intent

# Evaluated top to bottom; the first matching rule decides the intent.
INTENT_RULES: tuple[tuple[Intent, Callable[[str], bool]], ...] = (
    (Intent.availability, is_availability_query),
    (Intent.booking, is_booking_request),
    (Intent.cancel_or_modify, is_cancel_or_modify_request),
    (Intent.view_bookings, is_view_bookings_request),
    (Intent.help, is_help_request),
    (Intent.greeting, is_greeting),
)


class ClassifyIntentUseCase:
    def __init__(self, rules: tuple[tuple[Intent, Callable[[str], bool]], ...] = INTENT_RULES) -> None:
        self._rules = rules

    def execute(self, text: str) -> Intent:
        for intent, matches in self._rules:
            if matches(text):
                return intent
        return Intent.default
