from __future__ import annotations

from typing import Iterator

from coach_chat.domain.entities.chat_message import ChatMessage


class MessageLog:
    """Append-only, ordered record of chat turns for one session.

    Entries are never removed or replaced. ``snapshot()`` returns a stable view.
    """

    def __init__(self, messages: list[ChatMessage] | None = None) -> None:
        self._messages: list[ChatMessage] = list(messages or [])

    def append(self, message: ChatMessage) -> ChatMessage:
        self._messages.append(message)
        return message

    def last(self) -> ChatMessage | None:
        return self._messages[-1] if self._messages else None

    def snapshot(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self.snapshot())
