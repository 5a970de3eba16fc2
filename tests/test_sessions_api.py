"""
Tests for the session HTTP API.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from coach_chat.application.use_cases.handle_user_turn import HandleUserTurnUseCase
from coach_chat.application.use_cases.submit_booking import SubmitBookingUseCase
from coach_chat.application.utils.scripted_replies import BOOKING_FORM_PROMPT, GREETING, GOALS_QUESTION
from coach_chat.infrastructure.assistant_api.mock_backends import MockBookingBackend, MockChatBackend
from coach_chat.infrastructure.store.memory_store import MemorySessionStore
from coach_chat.main import app
from coach_chat.wiring.dependencies import (
    get_assistant_api_client,
    get_handle_user_turn_use_case,
    get_session_store,
    get_submit_booking_use_case,
)


@pytest.fixture
def api():
    store = MemorySessionStore()
    booking_backend = MockBookingBackend()
    app.dependency_overrides[get_session_store] = lambda: store
    app.dependency_overrides[get_handle_user_turn_use_case] = lambda: HandleUserTurnUseCase(
        chat_backend=MockChatBackend()
    )
    app.dependency_overrides[get_submit_booking_use_case] = lambda: SubmitBookingUseCase(
        booking_backend=booking_backend
    )
    yield TestClient(app), store, booking_backend
    app.dependency_overrides.clear()


def _open_booking_form(client: TestClient, session_id: str) -> None:
    for text in ("I want to book a meeting", "confidence", "no", "asap", "yes"):
        resp = client.post(f"/sessions/{session_id}/messages", json={"text": text})
        assert resp.status_code == 200


def test_health(api):
    client, _, _ = api
    assert client.get("/health").json() == {"status": "ok"}


def test_create_session_returns_greeting(api):
    client, store, _ = api

    resp = client.post("/sessions")

    assert resp.status_code == 201
    body = resp.json()
    assert body["ui_mode"] == "conversing"
    assert body["dialogue_state"] == "idle"
    assert [m["text"] for m in body["messages"]] == [GREETING]
    assert len(store) == 1


def test_send_message_starts_questionnaire(api):
    client, _, _ = api
    session_id = client.post("/sessions").json()["id"]

    resp = client.post(f"/sessions/{session_id}/messages", json={"text": "Can I book a session?"})

    assert resp.status_code == 200
    assert resp.json()["route"] == "questionnaire"
    assert resp.json()["reply"]["text"] == GOALS_QUESTION
    progress = client.get(f"/sessions/{session_id}").json()["progress"]
    assert progress["interested_in_booking"] is True
    assert progress["asked_goals"] is False


def test_booking_flow_end_to_end(api):
    client, _, booking_backend = api
    session_id = client.post("/sessions").json()["id"]
    _open_booking_form(client, session_id)

    session = client.get(f"/sessions/{session_id}").json()
    assert session["ui_mode"] == "awaiting_booking_details"
    assert session["messages"][-1]["text"] == BOOKING_FORM_PROMPT

    resp = client.put(f"/sessions/{session_id}/booking-draft", json={"name": "Ana"})
    assert resp.json()["draft"] == {"name": "Ana", "email": ""}

    resp = client.post(f"/sessions/{session_id}/booking", json={"email": "a@x.com"})
    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert resp.json()["ui_mode"] == "conversing"
    assert booking_backend.bookings == [("Ana", "a@x.com")]

    session = client.get(f"/sessions/{session_id}").json()
    assert not any(session["progress"].values())
    assert session["draft"] == {"name": "", "email": ""}


def test_booking_with_blank_details_is_422(api):
    client, _, _ = api
    session_id = client.post("/sessions").json()["id"]
    _open_booking_form(client, session_id)

    resp = client.post(f"/sessions/{session_id}/booking", json={"name": "", "email": ""})

    assert resp.status_code == 422


def test_booking_with_closed_form_is_409(api):
    client, _, _ = api
    session_id = client.post("/sessions").json()["id"]

    assert client.post(f"/sessions/{session_id}/booking", json={"name": "Ana", "email": "a@x.com"}).status_code == 409
    assert client.put(f"/sessions/{session_id}/booking-draft", json={"name": "Ana"}).status_code == 409


def test_abandon_booking_then_book_again(api):
    client, _, _ = api
    session_id = client.post("/sessions").json()["id"]
    _open_booking_form(client, session_id)

    resp = client.delete(f"/sessions/{session_id}/booking")

    assert resp.status_code == 200
    assert resp.json()["ui_mode"] == "conversing"
    assert resp.json()["dialogue_state"] == "completed"

    resp = client.post(f"/sessions/{session_id}/messages", json={"text": "Actually, I want to book the meeting"})
    assert resp.json()["route"] == "booking_form"
    assert resp.json()["reply"]["text"] == BOOKING_FORM_PROMPT
    assert resp.json()["ui_mode"] == "awaiting_booking_details"

    resp = client.post(f"/sessions/{session_id}/booking", json={"name": "Ana", "email": "a@x.com"})
    assert resp.json()["success"] is True
    assert client.get(f"/sessions/{session_id}").json()["dialogue_state"] == "idle"


def test_busy_session_rejects_send(api):
    client, store, _ = api
    session_id = client.post("/sessions").json()["id"]
    store.get(session_id).busy = True

    resp = client.post(f"/sessions/{session_id}/messages", json={"text": "hello"})

    assert resp.status_code == 409
    assert len(store.get(session_id).message_log) == 1


def test_unknown_session_is_404(api):
    client, _, _ = api
    assert client.get("/sessions/missing").status_code == 404
    assert client.post("/sessions/missing/messages", json={"text": "hi"}).status_code == 404
    assert client.delete("/sessions/missing").status_code == 404


def test_delete_session(api):
    client, store, _ = api
    session_id = client.post("/sessions").json()["id"]

    assert client.delete(f"/sessions/{session_id}").status_code == 204
    assert len(store) == 0


def test_shutdown_closes_assistant_api_client():
    cached = get_assistant_api_client()
    with TestClient(app):
        assert cached.is_closed is False
    assert cached.is_closed is True
    assert get_assistant_api_client.cache_info().currsize == 0
