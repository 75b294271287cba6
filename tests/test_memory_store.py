"""
Tests for the in-memory conversation store used by the local harness.
"""

from __future__ import annotations

from app.domain.entities.booking import Booking
from app.infrastructure.store.memory_store import MemoryConversationStore


def test_history_is_kept_per_thread():
    store = MemoryConversationStore()
    store.append_message("t1", role="user", text="hello")
    store.append_message("t1", role="assistant", text="Hello! Welcome.")
    store.append_message("t2", role="user", text="other thread")

    history = store.get_history("t1")
    assert [(m.role, m.content) for m in history] == [("user", "hello"), ("assistant", "Hello! Welcome.")]
    assert len(store.get_history("t2")) == 1
    assert store.get_history("missing") == []


def test_history_limit_drops_oldest():
    store = MemoryConversationStore(history_limit=3)
    for i in range(5):
        store.append_message("t1", role="user", text=f"m{i}")

    assert [m.content for m in store.get_history("t1")] == ["m2", "m3", "m4"]
    assert [m.content for m in store.get_recent_messages("t1", limit=2)] == ["m3", "m4"]


def test_bookings_and_reset():
    store = MemoryConversationStore()
    booking = Booking(
        id="BK1",
        name="Jane Doe",
        email="jane@example.com",
        seat_number="A1",
        date="2026-03-10",
        time="10:00",
        duration="2 hours",
        purpose="General booking",
    )
    store.append_message("t1", role="user", text="book")
    store.add_booking("t1", booking)

    assert store.get_bookings("t1") == [booking]

    store.reset("t1")
    assert store.get_bookings("t1") == []
    assert store.get_history("t1") == []
