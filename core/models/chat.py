# =============================================================================
# core/models/chat.py - Chat Schemas
# =============================================================================
# Request/response models for the parish assistant chat.
# The chat is stateless: each request carries exactly one user message.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """
    A single message sent to the parish assistant.

    Example:
        {"message": "What time is Sunday Mass?"}
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    message: str = Field(
        ...,
        min_length=1,
        max_length=2000,
        description="The visitor's question or message",
        examples=[
            "What is the Rosary?",
            "How do I request a Mass intention?",
        ],
    )


class ChatResponse(BaseModel):
    """The assistant's reply."""

    response: str = Field(..., description="Generated reply text")
