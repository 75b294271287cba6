from abc import ABC, abstractmethod

from app.domain.entities.booking import Booking
from app.domain.entities.message import Message


class ConversationStorePort(ABC):
    """
    Client-side session state: the transcript and bookings that get sent
    along with every chat request. The chat engine itself never reads it.
    """

    @abstractmethod
    def get_history(self, thread_id: str) -> list[Message]:
        raise NotImplementedError

    @abstractmethod
    def append_message(self, thread_id: str, role: str, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_bookings(self, thread_id: str) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def add_booking(self, thread_id: str, booking: Booking) -> None:
        raise NotImplementedError

    @abstractmethod
    def reset(self, thread_id: str) -> None:
        """Drop transcript and bookings for the thread, like a page reload."""
        raise NotImplementedError

    @abstractmethod
    def get_recent_messages(self, thread_id: str, limit: int = 10) -> list[Message]:
        """
        Get recent messages for display.
        Returns the last N messages from the thread history.
        """
        raise NotImplementedError
