from __future__ import annotations

import logging

from coach_chat.application.ports.booking_backend import BookingBackendPort
from coach_chat.application.ports.chat_backend import ChatBackendPort


class MockChatBackend(ChatBackendPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def reply(self, message: str) -> str:
        self._logger.info("Mock chat reply", extra={"text_length": len(message)})
        return (
            "Our coaches work one-on-one with you on career, leadership and personal "
            "goals. Just say the word if you'd like to book a consultation."
        )


class MockBookingBackend(BookingBackendPort):
    def __init__(self) -> None:
        self.bookings: list[tuple[str, str]] = []
        self._logger = logging.getLogger(__name__)

    async def book_meeting(self, name: str, email: str) -> str:
        self.bookings.append((name, email))
        self._logger.info("Mock booking created", extra={"booking_count": len(self.bookings)})
        return f"A booking link has been sent to {email}."
