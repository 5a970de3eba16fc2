from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProgressStage(str, Enum):
    IDLE = "idle"
    GOALS = "goals"  # interested, waiting for the goals answer
    EXPERIENCE = "experience"
    TIMEFRAME = "timeframe"
    CONFIRMATION = "confirmation"  # all three answered, closing offer made


_STAGE_ORDER = (
    ProgressStage.IDLE,
    ProgressStage.GOALS,
    ProgressStage.EXPERIENCE,
    ProgressStage.TIMEFRAME,
    ProgressStage.CONFIRMATION,
)


@dataclass(frozen=True)
class ConversationProgress:
    """Linear booking questionnaire position.

    The five progress flags are read-only views derived from ``stage`` and
    ``ready_to_book``.
    """

    stage: ProgressStage = ProgressStage.IDLE
    ready_to_book: bool = False

    def __post_init__(self) -> None:
        if self.ready_to_book and self.stage is not ProgressStage.CONFIRMATION:
            raise ValueError("ready_to_book requires the confirmation stage")

    def _past(self, stage: ProgressStage) -> bool:
        return _STAGE_ORDER.index(self.stage) > _STAGE_ORDER.index(stage)

    @property
    def interested_in_booking(self) -> bool:
        return self.stage is not ProgressStage.IDLE

    @property
    def asked_goals(self) -> bool:
        return self._past(ProgressStage.GOALS)

    @property
    def asked_experience(self) -> bool:
        return self._past(ProgressStage.EXPERIENCE)

    @property
    def asked_timeframe(self) -> bool:
        return self._past(ProgressStage.TIMEFRAME)

    @property
    def in_questionnaire(self) -> bool:
        return self.interested_in_booking and not self.ready_to_book

    def as_flags(self) -> dict[str, bool]:
        return {
            "interested_in_booking": self.interested_in_booking,
            "asked_goals": self.asked_goals,
            "asked_experience": self.asked_experience,
            "asked_timeframe": self.asked_timeframe,
            "ready_to_book": self.ready_to_book,
        }

    def next_stage(self) -> ProgressStage:
        index = _STAGE_ORDER.index(self.stage)
        return _STAGE_ORDER[min(index + 1, len(_STAGE_ORDER) - 1)]
