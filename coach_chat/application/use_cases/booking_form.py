from __future__ import annotations

import logging

from coach_chat.application.exceptions import BookingFormClosedError, SessionBusyError
from coach_chat.domain.entities.chat_session import ChatSession, UIMode


class UpdateBookingDraftUseCase:
    def execute(
        self,
        session: ChatSession,
        name: str | None = None,
        email: str | None = None,
    ) -> ChatSession:
        if not session.booking_form_open:
            raise BookingFormClosedError(session.id)
        if name is not None:
            session.draft.name = name
        if email is not None:
            session.draft.email = email
        return session


class AbandonBookingUseCase:
    """Close the booking form without booking. Progress is kept."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def execute(self, session: ChatSession) -> ChatSession:
        if session.busy:
            raise SessionBusyError(session.id)
        if session.booking_form_open:
            session.ui_mode = UIMode.CONVERSING
            session.draft.clear()
            self._logger.info("Booking form abandoned", extra={"session_id": session.id})
        return session
