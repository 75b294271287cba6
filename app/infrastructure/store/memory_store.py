from __future__ import annotations

from app.application.ports.conversation_store import ConversationStorePort
from app.domain.entities.booking import Booking
from app.domain.entities.message import Message


class MemoryConversationStore(ConversationStorePort):
    def __init__(self, history_limit: int = 200) -> None:
        self._threads: dict[str, list[Message]] = {}
        self._bookings: dict[str, list[Booking]] = {}
        self._history_limit = history_limit

    def get_history(self, thread_id: str) -> list[Message]:
        return list(self._threads.get(thread_id, []))

    def append_message(self, thread_id: str, role: str, text: str) -> None:
        self._threads.setdefault(thread_id, [])
        self._threads[thread_id].append(Message(role=role, content=text))
        if len(self._threads[thread_id]) > self._history_limit:
            self._threads[thread_id] = self._threads[thread_id][-self._history_limit :]

    def get_bookings(self, thread_id: str) -> list[Booking]:
        return list(self._bookings.get(thread_id, []))

    def add_booking(self, thread_id: str, booking: Booking) -> None:
        self._bookings.setdefault(thread_id, []).append(booking)

    def reset(self, thread_id: str) -> None:
        self._threads.pop(thread_id, None)
        self._bookings.pop(thread_id, None)

    def get_recent_messages(self, thread_id: str, limit: int = 10) -> list[Message]:
        messages = self.get_history(thread_id)
        return messages[-limit:] if messages else []
