# =============================================================================
# core/models/intention.py - Prayer Intention Schemas
# =============================================================================
# These models define the API contract for prayer intentions:
# - PrayerIntentionCreate: Input submitted by a parishioner
# - PrayerIntention: A stored intention with server-assigned fields
#
# Intentions are created once and never updated or deleted.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PrayerIntentionCreate(BaseModel):
    """
    Schema for submitting a new prayer intention.

    Only `name` and `intention` are accepted from the client. Any `id` or
    `createdAt` in the payload is ignored; both are assigned by the server.

    Example:
        {
            "name": "Mary W.",
            "intention": "For the healing of my mother"
        }
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    # Submitter's name as they want it read out
    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Name of the person submitting the intention",
    )

    # Free-text prayer request
    intention: str = Field(
        ...,
        min_length=1,
        max_length=5000,
        description="The prayer intention text",
    )


class PrayerIntention(BaseModel):
    """
    Schema for a stored prayer intention.

    Returned by:
    - GET /api/prayer-intentions (newest first)
    - POST /api/prayer-intentions (the created record)

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "Mary W.",
            "intention": "For the healing of my mother",
            "createdAt": "2026-10-19T09:30:00Z"
        }
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True, frozen=True)

    id: str = Field(..., description="Unique intention identifier")
    name: str = Field(..., description="Name of the submitter")
    intention: str = Field(..., description="The prayer intention text")

    # Set once by the store at creation time
    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Timestamp when the intention was received (UTC)",
    )
