from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from coach_chat.domain.entities.booking_draft import BookingDraft
from coach_chat.domain.entities.conversation_progress import ConversationProgress
from coach_chat.domain.entities.message_log import MessageLog


class UIMode(str, Enum):
    CONVERSING = "conversing"
    AWAITING_BOOKING_DETAILS = "awaiting_booking_details"


class DialogueState(str, Enum):
    IDLE = "idle"
    QUESTIONNAIRE = "questionnaire"
    BOOKING_FORM = "booking_form"
    COMPLETED = "completed"  # ready to book but the form was abandoned


@dataclass
class ChatSession:
    id: str = field(default_factory=lambda: uuid4().hex)
    message_log: MessageLog = field(default_factory=MessageLog)
    progress: ConversationProgress = field(default_factory=ConversationProgress)
    draft: BookingDraft = field(default_factory=BookingDraft)
    ui_mode: UIMode = UIMode.CONVERSING
    busy: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def booking_form_open(self) -> bool:
        return self.ui_mode is UIMode.AWAITING_BOOKING_DETAILS

    @property
    def dialogue_state(self) -> DialogueState:
        if self.booking_form_open:
            return DialogueState.BOOKING_FORM
        if not self.progress.interested_in_booking:
            return DialogueState.IDLE
        if self.progress.ready_to_book:
            return DialogueState.COMPLETED
        return DialogueState.QUESTIONNAIRE
