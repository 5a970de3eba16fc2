from __future__ import annotations

import logging
from dataclasses import dataclass

from coach_chat.application.exceptions import (
    BackendError,
    BookingFormClosedError,
    InvalidBookingDetailsError,
    SessionBusyError,
)
from coach_chat.application.ports.booking_backend import BookingBackendPort
from coach_chat.application.utils.scripted_replies import BOOKING_FAILED, booking_confirmed
from coach_chat.domain.entities.chat_message import ChatMessage
from coach_chat.domain.entities.chat_session import ChatSession, UIMode
from coach_chat.domain.entities.conversation_progress import ConversationProgress


@dataclass(frozen=True)
class BookingOutcome:
    success: bool
    reply: ChatMessage
    backend_message: str | None = None


class SubmitBookingUseCase:
    def __init__(self, booking_backend: BookingBackendPort) -> None:
        self._booking_backend = booking_backend
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        session: ChatSession,
        name: str | None = None,
        email: str | None = None,
    ) -> BookingOutcome:
        """
        Submit the booking form once.

        Explicit name/email overwrite the draft; otherwise the draft is used.
        On failure the form stays open with the draft and progress untouched so
        the visitor can resubmit.
        """
        if not session.booking_form_open:
            raise BookingFormClosedError(session.id)
        if session.busy:
            raise SessionBusyError(session.id)

        name = (name if name is not None else session.draft.name).strip()
        email = (email if email is not None else session.draft.email).strip()
        if not name or not email:
            raise InvalidBookingDetailsError("name and email are required")
        session.draft.name = name
        session.draft.email = email

        session.busy = True
        try:
            backend_message = await self._booking_backend.book_meeting(name=name, email=email)
        except BackendError as e:
            self._logger.error(
                "Booking failed",
                extra={"session_id": session.id, "error": str(e)},
            )
            reply = session.message_log.append(ChatMessage.from_bot(BOOKING_FAILED))
            return BookingOutcome(success=False, reply=reply)
        finally:
            session.busy = False

        reply = session.message_log.append(ChatMessage.from_bot(booking_confirmed(backend_message)))
        session.draft.clear()
        session.progress = ConversationProgress()
        session.ui_mode = UIMode.CONVERSING
        self._logger.info("Booking submitted", extra={"session_id": session.id})
        return BookingOutcome(success=True, reply=reply, backend_message=backend_message)
