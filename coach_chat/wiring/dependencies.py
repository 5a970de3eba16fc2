from functools import lru_cache
import logging

from coach_chat.core.config import settings
from coach_chat.application.ports.booking_backend import BookingBackendPort
from coach_chat.application.ports.chat_backend import ChatBackendPort
from coach_chat.application.ports.session_store import SessionStorePort
from coach_chat.application.use_cases.booking_form import AbandonBookingUseCase, UpdateBookingDraftUseCase
from coach_chat.application.use_cases.handle_user_turn import HandleUserTurnUseCase
from coach_chat.application.use_cases.submit_booking import SubmitBookingUseCase
from coach_chat.infrastructure.assistant_api.assistant_api_backends import HttpBookingBackend, HttpChatBackend
from coach_chat.infrastructure.assistant_api.assistant_api_client import AssistantApiClient
from coach_chat.infrastructure.assistant_api.mock_backends import MockBookingBackend, MockChatBackend
from coach_chat.infrastructure.store.memory_store import MemorySessionStore


def _use_mock_backend() -> bool:
    if settings.USE_MOCK_BACKEND:
        return True
    return not settings.ASSISTANT_API_BASE_URL.strip() and settings.ENV.lower() in {"dev", "local"}


@lru_cache
def get_session_store() -> SessionStorePort:
    return MemorySessionStore()


@lru_cache
def get_assistant_api_client() -> AssistantApiClient:
    if not settings.ASSISTANT_API_BASE_URL.strip():
        raise ValueError("ASSISTANT_API_BASE_URL is required outside dev/local.")
    return AssistantApiClient(
        base_url=settings.ASSISTANT_API_BASE_URL,
        chat_path=settings.ASSISTANT_CHAT_PATH,
        booking_path=settings.ASSISTANT_BOOKING_PATH,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


async def close_assistant_api_client() -> None:
    if not get_assistant_api_client.cache_info().currsize:
        return
    client = get_assistant_api_client()
    get_chat_backend.cache_clear()
    get_booking_backend.cache_clear()
    get_assistant_api_client.cache_clear()
    await client.aclose()


@lru_cache
def get_chat_backend() -> ChatBackendPort:
    logger = logging.getLogger(__name__)
    if _use_mock_backend():
        logger.info("Using MockChatBackend")
        return MockChatBackend()
    return HttpChatBackend(client=get_assistant_api_client())


@lru_cache
def get_booking_backend() -> BookingBackendPort:
    logger = logging.getLogger(__name__)
    if _use_mock_backend():
        logger.info("Using MockBookingBackend")
        return MockBookingBackend()
    return HttpBookingBackend(client=get_assistant_api_client())


def get_handle_user_turn_use_case() -> HandleUserTurnUseCase:
    return HandleUserTurnUseCase(chat_backend=get_chat_backend())


def get_submit_booking_use_case() -> SubmitBookingUseCase:
    return SubmitBookingUseCase(booking_backend=get_booking_backend())


def get_update_booking_draft_use_case() -> UpdateBookingDraftUseCase:
    return UpdateBookingDraftUseCase()


def get_abandon_booking_use_case() -> AbandonBookingUseCase:
    return AbandonBookingUseCase()


def get_container() -> dict[str, object]:
    return {
        "store": get_session_store(),
        "handle_user_turn": get_handle_user_turn_use_case(),
        "submit_booking": get_submit_booking_use_case(),
        "update_booking_draft": get_update_booking_draft_use_case(),
        "abandon_booking": get_abandon_booking_use_case(),
    }
