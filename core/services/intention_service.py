# =============================================================================
# core/services/intention_service.py - Prayer Intention Business Logic
# =============================================================================
# Orchestrates one submission:
#
#   1. Validate  -> ValidationFailedError (nothing stored, nothing sent)
#   2. Persist   -> PersistenceFailedError (nothing sent)
#   3. Notify    -> best-effort; a failed relay is logged and ignored
#   4. Return the stored record
#
# Per-submission states:
#   RECEIVED -> VALIDATING -> REJECTED
#                          -> PERSISTING -> PERSIST_FAILED
#                                        -> PERSISTED -> NOTIFYING -> NOTIFIED
# =============================================================================

import html
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol

from pydantic import ValidationError

from app.exceptions import (
    PersistenceFailedError,
    ValidationFailedError,
    format_validation_errors,
)
from core.models.intention import PrayerIntention, PrayerIntentionCreate
from lib.storage import IntentionStore, StoreError
from lib.telegram_client import NotificationResult

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    """
    Lifecycle of a single intention submission.

    REJECTED and PERSIST_FAILED are the only failure endings. NOTIFIED is
    reached whether or not the relay actually delivered.
    """
    RECEIVED = "received"
    VALIDATING = "validating"
    REJECTED = "rejected"
    PERSISTING = "persisting"
    PERSIST_FAILED = "persist_failed"
    PERSISTED = "persisted"
    NOTIFYING = "notifying"
    NOTIFIED = "notified"


class Notifier(Protocol):
    def notify(self, message: str) -> NotificationResult:
        ...


def format_intention_message(intention: PrayerIntention) -> str:
    """
    Render the Telegram announcement for a new intention.

    Submitter text is HTML-escaped since the message is sent with
    parse_mode=HTML.
    """
    created = intention.created_at
    submitted_at = f"{created:%B} {created.day}, {created:%Y at %I:%M %p} UTC"
    return (
        "🙏 <b>New Prayer Request</b>\n"
        "\n"
        f"<b>From:</b> {html.escape(intention.name)}\n"
        "\n"
        "<b>Prayer Intention:</b>\n"
        f"{html.escape(intention.intention)}\n"
        "\n"
        f"<i>Submitted at: {submitted_at}</i>"
    )


class IntentionService:
    """
    Service for prayer intention operations.

    Provides a clean interface between API routes, the store and the relay.
    """

    def __init__(self, store: IntentionStore, notifier: Notifier):
        self.store = store
        self.notifier = notifier

    def _transition(self, state: SubmissionState, **context: Any) -> SubmissionState:
        logger.debug(f"Intention submission -> {state.value} {context or ''}".rstrip())
        return state

    def submit(self, payload: Mapping[str, Any]) -> PrayerIntention:
        """
        Validate, store and announce a new prayer intention.

        Args:
            payload: Raw request body, expected shape {name, intention}

        Returns:
            The stored intention with server-assigned id and created_at

        Raises:
            ValidationFailedError: If the payload is malformed
            PersistenceFailedError: If the store rejects the write
        """
        self._transition(SubmissionState.RECEIVED)

        # Step 1: Validate
        self._transition(SubmissionState.VALIDATING)
        try:
            data = PrayerIntentionCreate.model_validate(payload)
        except ValidationError as e:
            errors = format_validation_errors(e.errors())
            self._transition(SubmissionState.REJECTED, errors=len(errors))
            logger.info(f"Rejected prayer intention: {errors}")
            raise ValidationFailedError(errors) from e

        # Step 2: Persist
        self._transition(SubmissionState.PERSISTING)
        try:
            intention = self.store.create_intention(data.name, data.intention)
        except StoreError as e:
            self._transition(SubmissionState.PERSIST_FAILED)
            logger.error(f"Storage error creating prayer intention: {e}")
            raise PersistenceFailedError("create", e.code) from e
        self._transition(SubmissionState.PERSISTED, id=intention.id)
        logger.info(f"Created prayer intention: {intention.id}")

        # Step 3: Notify (best-effort)
        self._transition(SubmissionState.NOTIFYING)
        try:
            result = self.notifier.notify(format_intention_message(intention))
            delivered, error = result.delivered, result.error
        except Exception as e:
            logger.exception(f"Unexpected error notifying prayer intention {intention.id}")
            delivered, error = False, e
        if not delivered:
            logger.warning(
                f"Failed to send prayer intention {intention.id} to Telegram, "
                f"but it was saved: {error}"
            )
        self._transition(SubmissionState.NOTIFIED, delivered=delivered)

        return intention

    def list_intentions(self) -> list[PrayerIntention]:
        """
        Return all intentions, newest first.

        Raises:
            PersistenceFailedError: If the store cannot be read
        """
        try:
            return self.store.list_intentions()
        except StoreError as e:
            logger.error(f"Error fetching prayer intentions: {e}")
            raise PersistenceFailedError("list", e.code) from e
