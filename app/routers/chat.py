# =============================================================================
# app/routers/chat.py - Parish Assistant Chat Endpoint
# =============================================================================
# POST /chat -> {response}
#
# On upstream failure the endpoint returns 500 GENERATION_FAILED whose
# `suggestion` is a polite message the site can show in place of a reply.
# =============================================================================

from typing import Any

from fastapi import APIRouter, Body

from app.dependencies import ChatServiceDep
from core.models.chat import ChatResponse

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
def chat(
    service: ChatServiceDep,
    payload: Any = Body(..., examples=[{"message": "What is a novena?"}]),
):
    """
    Ask the parish assistant a question.

    Each request is independent; no conversation history is kept.
    """
    reply = service.reply(payload)
    return ChatResponse(response=reply)
