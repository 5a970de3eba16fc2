#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP server).

Usage:
  python3 scripts/chat_local.py

What it does:
- Keeps one ChatSession for the run (/new starts another)
- Sends typed messages through HandleUserTurnUseCase
- Switches to name/email prompts when the booking form opens
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from coach_chat.core.logging_setup import configure_logging
from coach_chat.application.exceptions import InvalidBookingDetailsError
from coach_chat.domain.entities.chat_session import ChatSession
from coach_chat.wiring.dependencies import close_assistant_api_client, get_container


def _print_header(session: ChatSession) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"session_id: {session.id}")
    print("Type your message and press Enter.")
    print("Commands: /new, /history, /progress, /cancel, /quit, /help")
    print("-" * 60)
    for message in session.message_log:
        print(f"(assistant) {message.text}")


def _print_history(session: ChatSession) -> None:
    print("\n--- History (last 10) ---")
    for message in session.message_log.snapshot()[-10:]:
        role = "assistant" if message.is_from_bot else "you"
        print(f"[{message.sent_at:%H:%M}] {role}: {message.text}")


def _read(prompt: str) -> str | None:
    try:
        return input(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        return None


def main() -> None:
    configure_logging("WARNING")
    container = get_container()
    store = container["store"]
    handle_user_turn = container["handle_user_turn"]
    submit_booking = container["submit_booking"]
    abandon_booking = container["abandon_booking"]

    loop = asyncio.new_event_loop()
    session = store.create()
    _print_header(session)

    try:
        while True:
            if session.booking_form_open:
                name = _read("\nYour name (/cancel to skip): ")
                if name is None:
                    print("\nBye!")
                    return
                if name == "/cancel":
                    abandon_booking.execute(session)
                    print("Booking form closed.")
                    continue
                email = _read("Your email: ")
                if email is None:
                    print("\nBye!")
                    return
                try:
                    outcome = loop.run_until_complete(submit_booking.execute(session, name=name, email=email))
                except InvalidBookingDetailsError:
                    print("Please enter both your name and email.")
                    continue
                print(f"(assistant) {outcome.reply.text}")
                continue

            user_text = _read("\n> ")
            if user_text is None:
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
                print("  /new      -> start a new session")
                print("  /history  -> show last 10 messages")
                print("  /progress -> show booking questionnaire flags")
                print("  /quit     -> exit")
                continue
            if cmd == "/new":
                store.delete(session.id)
                session = store.create()
                _print_header(session)
                continue
            if cmd == "/history":
                _print_history(session)
                continue
            if cmd == "/progress":
                for flag, value in session.progress.as_flags().items():
                    print(f"  {flag}: {value}")
                print(f"  dialogue_state: {session.dialogue_state.value}")
                continue

            result = loop.run_until_complete(handle_user_turn.execute(session, user_text))
            if result.reply is not None:
                print(f"(assistant) {result.reply.text}")
    finally:
        loop.run_until_complete(close_assistant_api_client())
        loop.close()


if __name__ == "__main__":
    main()
