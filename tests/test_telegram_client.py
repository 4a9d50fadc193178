# =============================================================================
# tests/test_telegram_client.py - Telegram Relay Tests
# =============================================================================
# Outbound HTTP is served by httpx.MockTransport, so no request leaves the
# process.
# =============================================================================

import json

import httpx
import pytest

from lib.telegram_client import (
    ConfigurationMissingError,
    DeliveryFailedError,
    NotificationResult,
    TelegramNotifier,
)


def make_notifier(handler, bot_token="123:abc", chat_id="-100200300"):
    """Build a notifier whose HTTP client is served by `handler`."""
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return TelegramNotifier(bot_token=bot_token, chat_id=chat_id, http_client=client)


class TestSend:
    """Tests for TelegramNotifier.send."""

    def test_posts_html_message(self):
        """Test the sendMessage request carries chat id, text and parse mode."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"ok": True, "result": {}})

        make_notifier(handler).send("<b>New Prayer Request</b>")

        assert captured["url"] == "https://api.telegram.org/bot123:abc/sendMessage"
        assert captured["body"] == {
            "chat_id": "-100200300",
            "text": "<b>New Prayer Request</b>",
            "parse_mode": "HTML",
        }

    @pytest.mark.parametrize("token,chat_id,missing", [
        (None, "-100", ["TELEGRAM_BOT_TOKEN"]),
        ("123:abc", None, ["TELEGRAM_CHAT_ID"]),
        ("", "", ["TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID"]),
    ])
    def test_missing_configuration_skips_network(self, token, chat_id, missing):
        """Test missing credentials fail before any request is made."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"ok": True})

        notifier = make_notifier(handler, bot_token=token, chat_id=chat_id)

        with pytest.raises(ConfigurationMissingError) as exc_info:
            notifier.send("hello")

        assert calls == []
        assert exc_info.value.details["missing"] == missing
        assert notifier.is_configured is False

    def test_non_2xx_raises_delivery_failed(self):
        """Test an API error response carries the status code."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"ok": False, "description": "Bad Request: chat not found"})

        with pytest.raises(DeliveryFailedError) as exc_info:
            make_notifier(handler).send("hello")

        assert exc_info.value.status_code == 400
        assert "chat not found" in exc_info.value.message

    def test_non_json_error_body(self):
        """Test an HTML error page still yields DeliveryFailedError."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        with pytest.raises(DeliveryFailedError) as exc_info:
            make_notifier(handler).send("hello")

        assert exc_info.value.status_code == 502

    @pytest.mark.parametrize("body", [["bad gateway"], "oops", 42])
    def test_json_error_body_not_an_object(self, body):
        """Test a JSON error body that is not an object still yields DeliveryFailedError."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, json=body)

        with pytest.raises(DeliveryFailedError) as exc_info:
            make_notifier(handler).send("hello")

        assert exc_info.value.status_code == 502

    def test_invalid_token_url(self):
        """Test a token that makes the URL unusable fails without leaking it."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"ok": True})

        with pytest.raises(DeliveryFailedError) as exc_info:
            make_notifier(handler, bot_token="12:ab\ncd").send("hello")

        assert exc_info.value.status_code is None
        assert "12:ab" not in str(exc_info.value)

    def test_transport_error_hides_token(self):
        """Test connection failures become DeliveryFailedError without leaking the token."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DeliveryFailedError) as exc_info:
            make_notifier(handler, bot_token="999:secret").send("hello")

        assert exc_info.value.status_code is None
        assert "999:secret" not in str(exc_info.value)

    def test_custom_api_base(self):
        """Test the API base URL is configurable."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.host)
            return httpx.Response(200, json={"ok": True})

        client = httpx.Client(transport=httpx.MockTransport(handler))
        notifier = TelegramNotifier(
            bot_token="1:a", chat_id="2", api_base="https://telegram.internal/", http_client=client
        )
        notifier.send("hello")

        assert seen == ["telegram.internal"]


class TestNotify:
    """Tests for TelegramNotifier.notify (result-returning wrapper)."""

    def test_success_result(self):
        """Test delivery returns a delivered result."""
        notifier = make_notifier(lambda request: httpx.Response(200, json={"ok": True}))

        assert notifier.notify("hello") == NotificationResult.ok()

    def test_failure_is_returned_not_raised(self):
        """Test delivery errors come back inside the result."""
        notifier = make_notifier(lambda request: httpx.Response(500, json={"ok": False}))

        result = notifier.notify("hello")

        assert result.delivered is False
        assert isinstance(result.error, DeliveryFailedError)

    def test_missing_configuration_is_returned(self):
        """Test configuration errors come back inside the result."""
        notifier = TelegramNotifier(bot_token=None, chat_id=None)

        result = notifier.notify("hello")

        assert result.delivered is False
        assert isinstance(result.error, ConfigurationMissingError)
