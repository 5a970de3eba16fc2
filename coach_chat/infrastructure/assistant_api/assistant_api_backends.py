from __future__ import annotations

from coach_chat.application.ports.booking_backend import BookingBackendPort
from coach_chat.application.ports.chat_backend import ChatBackendPort
from coach_chat.infrastructure.assistant_api.assistant_api_client import AssistantApiClient


class HttpChatBackend(ChatBackendPort):
    def __init__(self, client: AssistantApiClient) -> None:
        self._client = client

    async def reply(self, message: str) -> str:
        return await self._client.chat(message=message)


class HttpBookingBackend(BookingBackendPort):
    def __init__(self, client: AssistantApiClient) -> None:
        self._client = client

    async def book_meeting(self, name: str, email: str) -> str:
        return await self._client.book_meeting(name=name, email=email)
