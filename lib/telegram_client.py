# =============================================================================
# lib/telegram_client.py - Telegram Notification Relay
# =============================================================================
# Posts pre-rendered HTML messages to a Telegram chat through the Bot API
# sendMessage method. Used as a best-effort side channel: callers should use
# notify(), which returns a NotificationResult instead of raising.
#
# Usage:
#   notifier = TelegramNotifier(bot_token="123:abc", chat_id="-100200300")
#   result = notifier.notify("<b>New Prayer Request</b> ...")
#   if not result.delivered:
#       logger.warning(result.error)
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.telegram.org"


# =============================================================================
# Errors
# =============================================================================

class NotificationError(ApplicationError):
    """Base class for relay failures. Never surfaced to API clients."""


class ConfigurationMissingError(NotificationError):
    """Raised before any network call when the bot token or chat id is unset."""

    def __init__(self, missing: list[str]):
        super().__init__(
            f"Telegram configuration missing: {', '.join(missing)}",
            code="NOTIFY_CONFIG_MISSING",
            suggestion="Set TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID in your .env file",
            details={"missing": missing},
        )


class DeliveryFailedError(NotificationError):
    """Raised on a transport error or a non-2xx response from Telegram."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message,
            code="NOTIFY_DELIVERY_FAILED",
            suggestion="Check the bot token, that the bot is a member of the chat, and network access to Telegram",
            details={"status_code": status_code},
        )
        self.status_code = status_code


# =============================================================================
# Result
# =============================================================================

@dataclass(frozen=True)
class NotificationResult:
    """Outcome of one notify() call."""
    delivered: bool
    error: NotificationError | None = None

    @classmethod
    def ok(cls) -> "NotificationResult":
        return cls(delivered=True)

    @classmethod
    def failed(cls, error: NotificationError) -> "NotificationResult":
        return cls(delivered=False, error=error)


# =============================================================================
# Client
# =============================================================================

class TelegramNotifier:
    """
    Sends messages to one Telegram chat.

    The bot token is part of the request URL, so it is never included in
    log lines or error messages.
    """

    def __init__(
        self,
        bot_token: str | None,
        chat_id: str | None,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 10.0,
        http_client: httpx.Client | None = None,
    ):
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client

    @property
    def is_configured(self) -> bool:
        return bool(self.bot_token and self.chat_id)

    def _missing_settings(self) -> list[str]:
        missing = []
        if not self.bot_token:
            missing.append("TELEGRAM_BOT_TOKEN")
        if not self.chat_id:
            missing.append("TELEGRAM_CHAT_ID")
        return missing

    def _post(self, url: str, payload: dict[str, Any]) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(url, json=payload, timeout=self.timeout)
        return httpx.post(url, json=payload, timeout=self.timeout)

    def send(self, message: str) -> None:
        """
        Send an HTML-formatted message.

        Raises:
            ConfigurationMissingError: If the token or chat id is unset
            DeliveryFailedError: On transport failure or non-2xx status
        """
        missing = self._missing_settings()
        if missing:
            raise ConfigurationMissingError(missing)

        url = f"{self.api_base}/bot{self.bot_token}/sendMessage"
        payload = {
            "chat_id": self.chat_id,
            "text": message,
            "parse_mode": "HTML",
        }

        try:
            response = self._post(url, payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # str(e) can embed the request URL, which holds the token
            raise DeliveryFailedError(
                f"Telegram request failed: {type(e).__name__}"
            ) from e

        if not response.is_success:
            description = ""
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                description = body.get("description", "")
            raise DeliveryFailedError(
                f"Telegram API error: {response.status_code} {response.reason_phrase} {description}".strip(),
                status_code=response.status_code,
            )

        logger.debug(f"Telegram message delivered to chat {self.chat_id}")

    def notify(self, message: str) -> NotificationResult:
        """Send a message, returning the outcome instead of raising."""
        try:
            self.send(message)
        except NotificationError as e:
            return NotificationResult.failed(e)
        return NotificationResult.ok()
