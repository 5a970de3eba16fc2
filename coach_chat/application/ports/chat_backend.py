from abc import ABC, abstractmethod


class ChatBackendPort(ABC):
    @abstractmethod
    async def reply(self, message: str) -> str:
        """Return the backend's answer to a free-text message."""
        raise NotImplementedError
