"""
Tests for keyword intent detection.
"""

from __future__ import annotations

from coach_chat.application.utils.message_rules import is_affirmative, mentions_booking_intent


def test_booking_intent_detected():
    assert mentions_booking_intent("I'd like to book a session") is True
    assert mentions_booking_intent("Can we SCHEDULE a call?") is True
    assert mentions_booking_intent("Do you offer a free consultation") is True


def test_booking_intent_not_detected_for_small_talk():
    assert mentions_booking_intent("hello") is False
    assert mentions_booking_intent("What do your coaches focus on?") is False


def test_affirmative_keywords():
    for text in ("Yes", "sure thing", "OK", "okay then", "Definitely!", "absolutely", "please do", "book it"):
        assert is_affirmative(text) is True, text


def test_affirmative_rejects_plain_no():
    assert is_affirmative("no thanks") is False
    assert is_affirmative("not right now") is False


def test_substring_matches_inside_longer_words():
    """Substring semantics: 'ok' inside 'broken' and 'book' inside 'booking' both match."""
    assert is_affirmative("my laptop is broken") is True
    assert mentions_booking_intent("booking info") is True
    assert mentions_booking_intent("two sessions a month?") is True
