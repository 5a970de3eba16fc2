from __future__ import annotations

from coach_chat.application.exceptions import SessionNotFoundError
from coach_chat.application.ports.session_store import SessionStorePort
from coach_chat.application.utils.scripted_replies import GREETING
from coach_chat.domain.entities.chat_message import ChatMessage
from coach_chat.domain.entities.chat_session import ChatSession


class MemorySessionStore(SessionStorePort):
    def __init__(self) -> None:
        self._sessions: dict[str, ChatSession] = {}

    def create(self) -> ChatSession:
        session = ChatSession()
        session.message_log.append(ChatMessage.from_bot(GREETING))
        self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> ChatSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)

    def __len__(self) -> int:
        return len(self._sessions)
