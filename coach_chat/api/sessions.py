from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from coach_chat.api.schemas import (
    BookingDetailsSchema,
    BookingResponseSchema,
    ChatMessageSchema,
    SendMessageRequestSchema,
    SessionSchema,
    TurnResponseSchema,
)
from coach_chat.application.exceptions import (
    BookingFormClosedError,
    InvalidBookingDetailsError,
    SessionBusyError,
    SessionNotFoundError,
)
from coach_chat.application.ports.session_store import SessionStorePort
from coach_chat.application.use_cases.booking_form import AbandonBookingUseCase, UpdateBookingDraftUseCase
from coach_chat.application.use_cases.handle_user_turn import HandleUserTurnUseCase
from coach_chat.application.use_cases.submit_booking import SubmitBookingUseCase
from coach_chat.domain.entities.chat_session import ChatSession
from coach_chat.wiring.dependencies import (
    get_abandon_booking_use_case,
    get_handle_user_turn_use_case,
    get_session_store,
    get_submit_booking_use_case,
    get_update_booking_draft_use_case,
)


router = APIRouter(prefix="/sessions")
logger = logging.getLogger(__name__)


def _load_session(session_id: str, store: SessionStorePort) -> ChatSession:
    try:
        return store.get(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


@router.post("", status_code=201, response_model=SessionSchema)
def create_session(store: SessionStorePort = Depends(get_session_store)) -> SessionSchema:
    session = store.create()
    logger.info("Session created", extra={"session_id": session.id})
    return SessionSchema.from_entity(session)


@router.get("/{session_id}", response_model=SessionSchema)
def get_session(session_id: str, store: SessionStorePort = Depends(get_session_store)) -> SessionSchema:
    return SessionSchema.from_entity(_load_session(session_id, store))


@router.delete("/{session_id}", status_code=204)
def delete_session(session_id: str, store: SessionStorePort = Depends(get_session_store)) -> Response:
    try:
        store.delete(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=204)


@router.post("/{session_id}/messages", response_model=TurnResponseSchema)
async def send_message(
    session_id: str,
    body: SendMessageRequestSchema,
    store: SessionStorePort = Depends(get_session_store),
    use_case: HandleUserTurnUseCase = Depends(get_handle_user_turn_use_case),
) -> TurnResponseSchema:
    session = _load_session(session_id, store)
    try:
        result = await use_case.execute(session, body.text)
    except SessionBusyError:
        raise HTTPException(status_code=409, detail="A request is already in progress")
    return TurnResponseSchema(
        route=result.route,
        reply=ChatMessageSchema.from_entity(result.reply) if result.reply else None,
        ui_mode=session.ui_mode,
    )


@router.put("/{session_id}/booking-draft", response_model=SessionSchema)
def update_booking_draft(
    session_id: str,
    body: BookingDetailsSchema,
    store: SessionStorePort = Depends(get_session_store),
    use_case: UpdateBookingDraftUseCase = Depends(get_update_booking_draft_use_case),
) -> SessionSchema:
    session = _load_session(session_id, store)
    try:
        use_case.execute(session, name=body.name, email=body.email)
    except BookingFormClosedError:
        raise HTTPException(status_code=409, detail="Booking form is not open")
    return SessionSchema.from_entity(session)


@router.post("/{session_id}/booking", response_model=BookingResponseSchema)
async def submit_booking(
    session_id: str,
    body: BookingDetailsSchema,
    store: SessionStorePort = Depends(get_session_store),
    use_case: SubmitBookingUseCase = Depends(get_submit_booking_use_case),
) -> BookingResponseSchema:
    session = _load_session(session_id, store)
    try:
        outcome = await use_case.execute(session, name=body.name, email=body.email)
    except InvalidBookingDetailsError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except BookingFormClosedError:
        raise HTTPException(status_code=409, detail="Booking form is not open")
    except SessionBusyError:
        raise HTTPException(status_code=409, detail="A request is already in progress")
    return BookingResponseSchema(
        success=outcome.success,
        reply=ChatMessageSchema.from_entity(outcome.reply),
        ui_mode=session.ui_mode,
    )


@router.delete("/{session_id}/booking", response_model=SessionSchema)
def abandon_booking(
    session_id: str,
    store: SessionStorePort = Depends(get_session_store),
    use_case: AbandonBookingUseCase = Depends(get_abandon_booking_use_case),
) -> SessionSchema:
    session = _load_session(session_id, store)
    try:
        use_case.execute(session)
    except SessionBusyError:
        raise HTTPException(status_code=409, detail="A request is already in progress")
    return SessionSchema.from_entity(session)
