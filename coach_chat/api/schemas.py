from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from coach_chat.domain.entities.chat_message import ChatMessage
from coach_chat.domain.entities.chat_session import ChatSession, DialogueState, UIMode


class ChatMessageSchema(BaseModel):
    id: str
    text: str
    is_from_bot: bool
    sent_at: datetime

    @classmethod
    def from_entity(cls, message: ChatMessage) -> ChatMessageSchema:
        return cls(id=message.id, text=message.text, is_from_bot=message.is_from_bot, sent_at=message.sent_at)


class ProgressSchema(BaseModel):
    interested_in_booking: bool
    asked_goals: bool
    asked_experience: bool
    asked_timeframe: bool
    ready_to_book: bool


class BookingDraftSchema(BaseModel):
    name: str = ""
    email: str = ""


class SessionSchema(BaseModel):
    id: str
    ui_mode: UIMode
    dialogue_state: DialogueState
    busy: bool
    progress: ProgressSchema
    draft: BookingDraftSchema
    messages: list[ChatMessageSchema] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, session: ChatSession) -> SessionSchema:
        return cls(
            id=session.id,
            ui_mode=session.ui_mode,
            dialogue_state=session.dialogue_state,
            busy=session.busy,
            progress=ProgressSchema(**session.progress.as_flags()),
            draft=BookingDraftSchema(name=session.draft.name, email=session.draft.email),
            messages=[ChatMessageSchema.from_entity(m) for m in session.message_log],
        )


class SendMessageRequestSchema(BaseModel):
    text: str


class TurnResponseSchema(BaseModel):
    route: str
    reply: ChatMessageSchema | None = None
    ui_mode: UIMode


class BookingDetailsSchema(BaseModel):
    name: str | None = None
    email: str | None = None


class BookingResponseSchema(BaseModel):
    success: bool
    reply: ChatMessageSchema
    ui_mode: UIMode
