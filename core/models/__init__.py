# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - intention.py: Prayer intention input and stored record
# - chat.py: Parish assistant chat request/response
# - user.py: Latent user record (stored, never exposed)
#
# These models define the "contract" between API and clients.
# =============================================================================

from .intention import PrayerIntention, PrayerIntentionCreate
from .chat import ChatRequest, ChatResponse
from .user import User, UserCreate

__all__ = [
    # Intentions
    "PrayerIntention",
    "PrayerIntentionCreate",
    # Chat
    "ChatRequest",
    "ChatResponse",
    # Users
    "User",
    "UserCreate",
]
