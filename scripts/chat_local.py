#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP).

Usage:
  python3 scripts/chat_local.py

What it does:
- Keeps the transcript and bookings for the session in a MemoryConversationStore,
  the same way the browser tab does for the web endpoint
- Sends the full transcript and bookings through HandleChatMessageUseCase on every turn
- Prints the classified intent, any booking created, and the reply text
"""
from __future__ import annotations

import os
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv()

from app.wiring.dependencies import get_container


def _print_header(thread_id: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"thread_id: {thread_id}")
    print("Type your message and press Enter.")
    print("Commands: /new (new thread), /history, /bookings, /quit, /help")
    print("-" * 60)


def main() -> None:
    thread_id = os.getenv("CHAT_THREAD_ID", "local_user_1")
    container = get_container()
    use_case = container["use_case"]
    store = container["store"]
    _print_header(thread_id)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /new  -> start a new thread_id (drops transcript and bookings)")
            print("  /history -> show last 10 messages")
            print("  /bookings -> show bookings made in this thread")
            print("  /quit -> exit")
            continue
        if cmd == "/new":
            store.reset(thread_id)
            thread_id = f"local_user_{int(time.time())}"
            print(f"New thread_id: {thread_id}")
            continue
        if cmd == "/history":
            print("\n--- History (last 10) ---")
            for item in store.get_recent_messages(thread_id, limit=10):
                print(f"{item.role}: {item.content}")
            continue
        if cmd == "/bookings":
            bookings = store.get_bookings(thread_id)
            if not bookings:
                print("(no bookings)")
            for b in bookings:
                print(f"{b.id}  seat={b.seat_number}  {b.date} {b.time}  {b.name} <{b.email}>  {b.duration}  {b.purpose}")
            continue

        store.append_message(thread_id, role="user", text=user_text)
        try:
            reply = use_case.execute(
                messages=store.get_history(thread_id),
                bookings=store.get_bookings(thread_id),
            )
        except Exception as e:
            print(f"ERROR: {e}")
            continue

        store.append_message(thread_id, role="assistant", text=reply.text)
        if reply.booking:
            store.add_booking(thread_id, reply.booking)

        print("\n--- Decision ---")
        print(f"intent: {reply.intent.value}")
        if reply.booking:
            print(f"booking: {reply.booking.id} seat={reply.booking.seat_number}")

        print("\n--- Reply ---")
        print(reply.text.strip())
        print("-" * 60)


if __name__ == "__main__":
    main()
