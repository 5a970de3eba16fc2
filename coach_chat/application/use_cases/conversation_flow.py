from __future__ import annotations

from dataclasses import dataclass

from coach_chat.application.utils.message_rules import is_affirmative
from coach_chat.application.utils.scripted_replies import (
    CLOSING_QUESTION,
    EXPERIENCE_QUESTION,
    GOALS_QUESTION,
    TIMEFRAME_QUESTION,
)
from coach_chat.domain.entities.conversation_progress import ConversationProgress, ProgressStage


@dataclass(frozen=True)
class AdvanceResult:
    progress: ConversationProgress
    should_reveal_booking_form: bool


def next_prompt(progress: ConversationProgress) -> str:
    """Return the first scripted question the visitor has not answered yet."""
    if not progress.asked_goals:
        return GOALS_QUESTION
    if not progress.asked_experience:
        return EXPERIENCE_QUESTION
    if not progress.asked_timeframe:
        return TIMEFRAME_QUESTION
    return CLOSING_QUESTION


def start_interest(progress: ConversationProgress) -> ConversationProgress:
    if progress.interested_in_booking:
        return progress
    return ConversationProgress(stage=ProgressStage.GOALS)


def advance(progress: ConversationProgress, user_utterance: str) -> AdvanceResult:
    """
    Record the visitor's answer to the current scripted question.

    Exactly one flag flips per call. On the closing question only an
    affirmative answer sets ready_to_book; anything else leaves progress as is
    and the closing question is asked again.
    """
    if not progress.in_questionnaire:
        return AdvanceResult(progress=progress, should_reveal_booking_form=False)

    if progress.stage is ProgressStage.CONFIRMATION:
        if is_affirmative(user_utterance):
            return AdvanceResult(
                progress=ConversationProgress(stage=ProgressStage.CONFIRMATION, ready_to_book=True),
                should_reveal_booking_form=True,
            )
        return AdvanceResult(progress=progress, should_reveal_booking_form=False)

    return AdvanceResult(
        progress=ConversationProgress(stage=progress.next_stage()),
        should_reveal_booking_form=False,
    )
