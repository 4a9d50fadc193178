# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .intention_service import (
    IntentionService,
    SubmissionState,
    format_intention_message,
)
from .chat_service import ChatService

__all__ = [
    "IntentionService",
    "SubmissionState",
    "format_intention_message",
    "ChatService",
]
