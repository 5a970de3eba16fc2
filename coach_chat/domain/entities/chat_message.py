from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


def _new_id() -> str:
    return uuid4().hex


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ChatMessage:
    text: str
    is_from_bot: bool
    id: str = field(default_factory=_new_id)
    sent_at: datetime = field(default_factory=_utc_now)

    @classmethod
    def from_bot(cls, text: str) -> ChatMessage:
        return cls(text=text, is_from_bot=True)

    @classmethod
    def from_user(cls, text: str) -> ChatMessage:
        return cls(text=text, is_from_bot=False)
