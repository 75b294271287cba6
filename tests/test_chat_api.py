from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

import app.api.chat as chat_api
from app.application.use_cases.booking import BookingUseCase
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from app.application.use_cases.reply_composer import ReplyComposer
from app.infrastructure.seating.fixed_inventory import FixedSeatInventory
from app.main import app

ERROR_BODY = {"message": "I apologize, but I encountered an error. Please try again."}

client = TestClient(app)


@pytest.fixture(autouse=True)
def fixed_clock(monkeypatch):
    inventory = FixedSeatInventory()
    use_case = HandleChatMessageUseCase(
        classify_intent=ClassifyIntentUseCase(),
        booking_use_case=BookingUseCase(
            inventory=inventory,
            timezone=ZoneInfo("UTC"),
            clock=lambda tz: datetime(2026, 3, 10, 14, 30, tzinfo=tz),
        ),
        inventory=inventory,
        composer=ReplyComposer(business_name="AI Receptionist"),
    )
    monkeypatch.setattr(chat_api, "get_handle_chat_message_use_case", lambda: use_case)


def _booking_json(seat: str) -> dict:
    return {
        "id": f"BK_{seat}",
        "name": "Someone",
        "email": "someone@example.com",
        "seatNumber": seat,
        "date": "2026-03-10",
        "time": "10:00",
        "duration": "2 hours",
        "purpose": "General booking",
    }


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_booking_round_trip():
    payload = {
        "messages": [
            {"role": "user", "content": "My name is John Smith, john.smith@example.com"},
            {"role": "assistant", "content": "Thanks John!"},
            {"role": "user", "content": "Please book for tomorrow at 3pm for 2 hours for a meeting"},
        ],
        "bookings": [_booking_json("A1")],
    }
    response = client.post("/api/chat", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert "successfully booked seat A2" in data["message"]
    booking = data["booking"]
    assert booking["seatNumber"] == "A2"
    assert booking["name"] == "John Smith"
    assert booking["email"] == "john.smith@example.com"
    assert booking["date"] == "2026-03-11"
    assert booking["time"] == "15:00"
    assert booking["duration"] == "2 hours"
    assert booking["purpose"] == "a meeting"
    assert booking["id"].startswith("BK")
    assert set(booking) == {"id", "name", "email", "seatNumber", "date", "time", "duration", "purpose"}


def test_reply_without_booking_omits_key():
    response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hello"}]})

    assert response.status_code == 200
    assert set(response.json()) == {"message"}


def test_null_bookings_treated_as_empty():
    response = client.post(
        "/api/chat",
        json={"messages": [{"role": "user", "content": "what is available"}], "bookings": None},
    )

    assert response.status_code == 200
    assert response.json()["message"].startswith("We have 20 seats available: A1, ")


def test_booked_seats_excluded_from_availability():
    response = client.post(
        "/api/chat",
        json={
            "messages": [{"role": "user", "content": "free seat?"}],
            "bookings": [_booking_json("A1"), _booking_json("A2")],
        },
    )

    assert response.json()["message"].startswith("We have 18 seats available: A3, A4,")


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        "null",
        "{}",
        '{"messages": []}',
        '{"messages": "hello"}',
        '{"messages": [{"role": "user"}]}',
        '{"messages": [{"role": "user", "content": "hi"}], "bookings": [{"id": "x"}]}',
    ],
)
def test_malformed_requests_get_generic_error(body):
    response = client.post("/api/chat", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 500
    assert response.json() == ERROR_BODY
