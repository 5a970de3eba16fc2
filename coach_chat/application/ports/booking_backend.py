from abc import ABC, abstractmethod


class BookingBackendPort(ABC):
    @abstractmethod
    async def book_meeting(self, name: str, email: str) -> str:
        """Start a booking. Returns the backend's confirmation text (may be empty)."""
        raise NotImplementedError
