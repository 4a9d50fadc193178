# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the request/response schemas:
# - Valid data is accepted and normalized
# - Invalid data raises ValidationError
# - Stored intentions serialize with the createdAt field name
# =============================================================================

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from core.models import (
    ChatRequest,
    ChatResponse,
    PrayerIntention,
    PrayerIntentionCreate,
    User,
    UserCreate,
)


# =============================================================================
# Prayer Intention Tests
# =============================================================================

class TestPrayerIntentionCreate:
    """Tests for the submission schema."""

    def test_valid_submission(self):
        """Test a normal submission is accepted."""
        data = PrayerIntentionCreate(name="John", intention="For peace in our families")

        assert data.name == "John"
        assert data.intention == "For peace in our families"

    def test_strips_whitespace(self):
        """Test surrounding whitespace is removed."""
        data = PrayerIntentionCreate(name="  John  ", intention="\n For rain \n")

        assert data.name == "John"
        assert data.intention == "For rain"

    @pytest.mark.parametrize("payload", [
        {"name": "", "intention": "anything"},
        {"name": "John", "intention": ""},
        {"name": "   ", "intention": "anything"},
        {"intention": "anything"},
        {"name": "John"},
        {"name": 42, "intention": "anything"},
    ])
    def test_rejects_invalid_submissions(self, payload):
        """Test empty, blank, missing and non-string fields are rejected."""
        with pytest.raises(ValidationError):
            PrayerIntentionCreate.model_validate(payload)

    def test_rejects_overlong_name(self):
        """Test names longer than 200 characters are rejected."""
        with pytest.raises(ValidationError):
            PrayerIntentionCreate(name="x" * 201, intention="For the parish")

    def test_ignores_client_supplied_server_fields(self):
        """Test id and createdAt in the payload are dropped."""
        data = PrayerIntentionCreate.model_validate({
            "id": "client-chosen",
            "createdAt": "1999-01-01T00:00:00Z",
            "name": "John",
            "intention": "For the parish",
        })

        assert set(data.model_dump()) == {"name", "intention"}


class TestPrayerIntention:
    """Tests for the stored record schema."""

    def test_serializes_created_at_as_camel_case(self):
        """Test JSON output uses createdAt."""
        created = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)
        record = PrayerIntention(id="abc", name="John", intention="For peace", created_at=created)

        dumped = record.model_dump(by_alias=True, mode="json")

        assert dumped["createdAt"].startswith("2026-10-19T09:30:00")
        assert "created_at" not in dumped

    def test_accepts_alias_on_input(self):
        """Test records can be built from camelCase data."""
        record = PrayerIntention.model_validate({
            "id": "abc",
            "name": "John",
            "intention": "For peace",
            "createdAt": "2026-10-19T09:30:00Z",
        })

        assert record.created_at.tzinfo is not None

    def test_is_immutable(self):
        """Test stored records cannot be modified."""
        record = PrayerIntention(
            id="abc", name="John", intention="For peace",
            created_at=datetime.now(timezone.utc),
        )

        with pytest.raises(ValidationError):
            record.name = "Someone else"


# =============================================================================
# Chat Model Tests
# =============================================================================

class TestChatModels:
    """Tests for chat request/response."""

    def test_valid_request(self):
        """Test a message is accepted and stripped."""
        request = ChatRequest(message="  Hello  ")
        assert request.message == "Hello"

    @pytest.mark.parametrize("message", ["", "   "])
    def test_rejects_empty_message(self, message):
        """Test empty messages are rejected."""
        with pytest.raises(ValidationError):
            ChatRequest(message=message)

    def test_rejects_overlong_message(self):
        """Test messages over 2000 characters are rejected."""
        with pytest.raises(ValidationError):
            ChatRequest(message="a" * 2001)

    def test_response(self):
        """Test the response wrapper."""
        assert ChatResponse(response="Peace be with you").response == "Peace be with you"


# =============================================================================
# User Model Tests
# =============================================================================

class TestUserModels:
    """Tests for the latent user schemas."""

    def test_user_create_requires_username(self):
        """Test blank usernames are rejected."""
        with pytest.raises(ValidationError):
            UserCreate(username="  ", password="secret")

    def test_user_record(self):
        """Test a user record keeps the password as given."""
        user = User(id="u1", username="karani", password="plain-text")
        assert user.password == "plain-text"
