from __future__ import annotations

import logging
from typing import Any

import httpx

from coach_chat.application.exceptions import BackendContractError, BackendUpstreamError


class AssistantApiClient:
    """Thin async client for the coaching assistant backend.

    One attempt per call, no retries. Any timeout comes from the httpx client.
    """

    def __init__(
        self,
        base_url: str,
        chat_path: str = "/api/chat",
        booking_path: str = "/api/book-meeting",
        timeout: float | None = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._chat_path = chat_path
        self._booking_path = booking_path
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )
        self._logger = logging.getLogger(__name__)

    async def chat(self, message: str) -> str:
        data = await self._post(self._chat_path, {"message": message})
        response = data.get("response")
        if not isinstance(response, str):
            raise BackendContractError("Chat response missing 'response' text")
        return response

    async def book_meeting(self, name: str, email: str) -> str:
        data = await self._post(self._booking_path, {"name": name, "email": email})
        message = data.get("message")
        if message is None:
            return ""
        if not isinstance(message, str):
            raise BackendContractError("Booking response 'message' is not text")
        return message

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            resp = await self._client.post(path, json=payload)
        except httpx.HTTPError as e:
            self._logger.warning("Assistant API unreachable", extra={"path": path, "error": str(e)})
            raise BackendUpstreamError(f"POST {path} failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            self._logger.warning(
                "Assistant API returned non-JSON body",
                extra={"path": path, "status": resp.status_code},
            )
            raise BackendUpstreamError(f"POST {path} returned non-JSON body") from e

        if not isinstance(data, dict):
            raise BackendContractError(f"POST {path} returned {type(data).__name__}, expected object")

        error = data.get("error")
        if resp.status_code >= 400 or error:
            self._logger.error(
                "Assistant API call failed",
                extra={"path": path, "status": resp.status_code, "error": error},
            )
            raise BackendContractError(str(error or f"POST {path} returned {resp.status_code}"))

        return data
