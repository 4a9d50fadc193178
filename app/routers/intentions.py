# =============================================================================
# app/routers/intentions.py - Prayer Intention Endpoints
# =============================================================================
# GET  /prayer-intentions  -> all intentions, newest first
# POST /prayer-intentions  -> validate, save, notify Telegram
#
# The body is passed to the service unparsed: validation is the service's
# first step, so the same rules apply to every caller.
# =============================================================================

from typing import Any

from fastapi import APIRouter, Body

from app.dependencies import IntentionServiceDep
from core.models.intention import PrayerIntention

router = APIRouter()


@router.get("/prayer-intentions", response_model=list[PrayerIntention])
def list_prayer_intentions(service: IntentionServiceDep):
    """
    List all prayer intentions.

    Most recent first.
    """
    return service.list_intentions()


@router.post("/prayer-intentions", response_model=PrayerIntention)
def create_prayer_intention(
    service: IntentionServiceDep,
    payload: Any = Body(
        ...,
        examples=[{"name": "Mary W.", "intention": "For the healing of my mother"}],
    ),
):
    """
    Submit a new prayer intention.

    The intention is saved first and then sent to the parish Telegram chat.
    A Telegram failure does not fail the request.

    Returns the saved intention with its server-assigned id and createdAt.
    """
    return service.submit(payload)
