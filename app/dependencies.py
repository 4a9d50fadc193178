# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# The services are built once in app.main.create_app and kept on app.state;
# these functions hand them to route handlers via Depends().
#
# Tests swap implementations with app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.chat_service import ChatService
from core.services.intention_service import IntentionService
from lib.storage import IntentionStore
from lib.telegram_client import TelegramNotifier


def get_store(request: Request) -> IntentionStore:
    """The configured intention store backend."""
    return request.app.state.store


def get_notifier(request: Request) -> TelegramNotifier:
    """The Telegram notification relay."""
    return request.app.state.notifier


def get_intention_service(request: Request) -> IntentionService:
    """The prayer intention service."""
    return request.app.state.intention_service


def get_chat_service(request: Request) -> ChatService:
    """The parish assistant chat service."""
    return request.app.state.chat_service


# Type aliases for dependency injection
StoreDep = Annotated[IntentionStore, Depends(get_store)]
NotifierDep = Annotated[TelegramNotifier, Depends(get_notifier)]
IntentionServiceDep = Annotated[IntentionService, Depends(get_intention_service)]
ChatServiceDep = Annotated[ChatService, Depends(get_chat_service)]
