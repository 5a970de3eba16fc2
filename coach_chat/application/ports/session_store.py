from abc import ABC, abstractmethod

from coach_chat.domain.entities.chat_session import ChatSession


class SessionStorePort(ABC):
    @abstractmethod
    def create(self) -> ChatSession:
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> ChatSession:
        """Return the session or raise SessionNotFoundError."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, session_id: str) -> None:
        raise NotImplementedError
