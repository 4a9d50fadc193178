# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Provides stores for both backends, a recording notifier, and API clients
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app on import, which reads settings

os.environ["STORAGE_BACKEND"] = "memory"
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from lib.storage import DatabaseIntentionStore, MemoryIntentionStore
from lib.telegram_client import (
    ConfigurationMissingError,
    DeliveryFailedError,
    NotificationResult,
)


# =============================================================================
# Helpers
# =============================================================================

class RecordingNotifier:
    """Notifier stub that records every message and returns a fixed outcome."""

    def __init__(self, result: NotificationResult | None = None):
        self.messages: list[str] = []
        self.result = result or NotificationResult.ok()

    @property
    def is_configured(self) -> bool:
        return True

    def notify(self, message: str) -> NotificationResult:
        self.messages.append(message)
        return self.result


def make_settings(**overrides) -> Settings:
    """Settings isolated from the developer's .env file."""
    values = {
        "ENVIRONMENT": "development",
        "DEBUG": False,
        "STORAGE_BACKEND": "memory",
        "DATABASE_URL": None,
        "TELEGRAM_BOT_TOKEN": None,
        "TELEGRAM_CHAT_ID": None,
        "OPENAI_API_KEY": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def memory_store():
    """Fresh in-memory store."""
    store = MemoryIntentionStore()
    store.initialize()
    return store


@pytest.fixture
def database_store():
    """SQLite in-memory database store with tables created."""
    store = DatabaseIntentionStore.from_url("sqlite://")
    store.initialize()
    yield store
    store.engine.dispose()


@pytest.fixture(params=["memory", "database"])
def store(request):
    """Runs a test once against each backend."""
    return request.getfixturevalue(f"{request.param}_store")


# =============================================================================
# Notifier Fixtures
# =============================================================================

@pytest.fixture
def notifier():
    """Notifier that always delivers."""
    return RecordingNotifier()


@pytest.fixture
def failing_notifier():
    """Notifier that always reports a delivery failure."""
    return RecordingNotifier(
        NotificationResult.failed(DeliveryFailedError("Telegram API error: 502", status_code=502))
    )


@pytest.fixture
def unconfigured_notifier():
    """Notifier that reports missing credentials."""
    return RecordingNotifier(
        NotificationResult.failed(ConfigurationMissingError(["TELEGRAM_BOT_TOKEN"]))
    )


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Default test settings: memory store, no Telegram, no OpenAI key."""
    return make_settings()


@pytest.fixture
def app(test_settings):
    """Application built from test settings."""
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """TestClient with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_intention_payload():
    """A valid intention submission."""
    return {
        "name": "Mary W.",
        "intention": "For the healing of my mother after her surgery",
    }
