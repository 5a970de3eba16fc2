from __future__ import annotations

import logging
from dataclasses import dataclass

from coach_chat.application.exceptions import BackendError, SessionBusyError
from coach_chat.application.ports.chat_backend import ChatBackendPort
from coach_chat.application.use_cases.conversation_flow import advance, next_prompt, start_interest
from coach_chat.application.utils.message_rules import mentions_booking_intent
from coach_chat.application.utils.scripted_replies import BOOKING_FORM_PROMPT, CHAT_FALLBACK
from coach_chat.domain.entities.chat_message import ChatMessage
from coach_chat.domain.entities.chat_session import ChatSession, DialogueState, UIMode


@dataclass(frozen=True)
class TurnResult:
    route: str  # "ignored", "questionnaire", "booking_form", "chat", "chat_fallback"
    reply: ChatMessage | None


class HandleUserTurnUseCase:
    def __init__(self, chat_backend: ChatBackendPort) -> None:
        self._chat_backend = chat_backend
        self._logger = logging.getLogger(__name__)

    async def execute(self, session: ChatSession, text: str) -> TurnResult:
        user_text = text.strip()
        if not user_text:
            return TurnResult(route="ignored", reply=None)
        if session.busy:
            raise SessionBusyError(session.id)

        session.message_log.append(ChatMessage.from_user(user_text))
        session.busy = True
        try:
            route, reply_text = await self._route(session, user_text)
        finally:
            session.busy = False

        reply = session.message_log.append(ChatMessage.from_bot(reply_text))
        self._logger.info("Turn handled", extra={"session_id": session.id, "route": route})
        return TurnResult(route=route, reply=reply)

    async def _route(self, session: ChatSession, user_text: str) -> tuple[str, str]:
        state = session.dialogue_state

        if state is DialogueState.IDLE and mentions_booking_intent(user_text):
            session.progress = start_interest(session.progress)
            return "questionnaire", next_prompt(session.progress)

        if state is DialogueState.QUESTIONNAIRE:
            result = advance(session.progress, user_text)
            session.progress = result.progress
            if result.should_reveal_booking_form:
                session.ui_mode = UIMode.AWAITING_BOOKING_DETAILS
                return "booking_form", BOOKING_FORM_PROMPT
            return "questionnaire", next_prompt(session.progress)

        # questionnaire already confirmed, form was closed without booking
        if state is DialogueState.COMPLETED and mentions_booking_intent(user_text):
            session.ui_mode = UIMode.AWAITING_BOOKING_DETAILS
            return "booking_form", BOOKING_FORM_PROMPT

        try:
            return "chat", await self._chat_backend.reply(user_text)
        except BackendError as e:
            self._logger.warning(
                "Chat backend failed, using fallback",
                extra={"session_id": session.id, "error": str(e)},
            )
            return "chat_fallback", CHAT_FALLBACK
