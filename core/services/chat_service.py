# =============================================================================
# core/services/chat_service.py - Parish Assistant Chat Relay
# =============================================================================
# Forwards one visitor message, together with the fixed parish persona, to an
# OpenAI chat completion model and returns the generated text.
#
# Stateless: nothing about the conversation is kept between calls. Clients
# that want multi-turn context must resend it themselves.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from app.exceptions import (
    GenerationFailedError,
    ValidationFailedError,
    format_validation_errors,
)
from core.models.chat import ChatRequest
from core.prompts import EMPTY_COMPLETION_REPLY, PARISH_ASSISTANT_PROMPT

logger = logging.getLogger(__name__)


class ChatService:
    """
    Service for the parish assistant chat.

    The OpenAI client is created lazily on first use, so a missing API key
    only fails chat requests and never blocks start-up.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-5",
        max_completion_tokens: int = 500,
        timeout: float = 30.0,
        client: Any = None,
    ):
        self.api_key = api_key
        self.model = model
        self.max_completion_tokens = max_completion_tokens
        self.timeout = timeout
        self._client = client

    def _get_client(self):
        """Get or create the OpenAI client (lazy initialization)."""
        if self._client is None:
            if not self.api_key:
                raise ValueError("OPENAI_API_KEY is not configured")
            from openai import OpenAI
            # No client-side retries: failures surface on this request
            self._client = OpenAI(
                api_key=self.api_key,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    def build_messages(self, message: str) -> list[dict[str, str]]:
        """Compose the system persona with the visitor's message."""
        return [
            {"role": "system", "content": PARISH_ASSISTANT_PROMPT},
            {"role": "user", "content": message},
        ]

    def reply(self, payload: Mapping[str, Any]) -> str:
        """
        Generate the assistant's reply to one message.

        Args:
            payload: Raw request body, expected shape {message}

        Returns:
            Non-empty reply text

        Raises:
            ValidationFailedError: If the message is missing or empty
            GenerationFailedError: If the OpenAI call fails for any reason
        """
        try:
            request = ChatRequest.model_validate(payload)
        except ValidationError as e:
            raise ValidationFailedError(format_validation_errors(e.errors())) from e

        try:
            client = self._get_client()
            completion = client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(request.message),
                max_completion_tokens=self.max_completion_tokens,
            )
            content = completion.choices[0].message.content
        except Exception as e:
            logger.error(f"OpenAI API error: {type(e).__name__}: {e}")
            raise GenerationFailedError(type(e).__name__) from e

        if not content or not content.strip():
            logger.warning(f"Empty completion from {self.model}, using apology reply")
            return EMPTY_COMPLETION_REPLY

        return content
