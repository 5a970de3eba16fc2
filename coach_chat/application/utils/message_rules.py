from __future__ import annotations

BOOKING_KEYWORDS = (
    "book",
    "schedule",
    "meeting",
    "appointment",
    "consultation",
    "session",
)

CONFIRMATION_KEYWORDS = (
    "yes",
    "sure",
    "okay",
    "ok",
    "definitely",
    "absolutely",
    "please",
    "book",
    "schedule",
)


def normalize_text(text: str) -> str:
    return text.lower()


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    normalized = normalize_text(text)
    return any(keyword in normalized for keyword in keywords)


def mentions_booking_intent(text: str) -> bool:
    """
    Check if the visitor asks for a meeting.
    Plain substring match, so "booking" and "sessions" count too.
    """
    return _contains_any(text, BOOKING_KEYWORDS)


def is_affirmative(text: str) -> bool:
    """
    Check if the visitor accepts the offer to schedule.
    Substring match: "ok" inside "broken" is a known false positive.
    """
    return _contains_any(text, CONFIRMATION_KEYWORDS)
