# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the storage and notification layers.
# =============================================================================

import uuid
from datetime import datetime, timezone
from typing import Any


# =============================================================================
# Identifier and Clock Utilities
# =============================================================================

def generate_id() -> str:
    """
    Generate a new random record identifier.

    UUID4 values come from the OS random source, so concurrent callers never
    need to coordinate to get distinct ids.

    Example:
        record_id = generate_id()  # "550e8400-e29b-41d4-a716-446655440000"
    """
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """
    Attach UTC to a naive datetime.

    Some database drivers (SQLite) drop tzinfo on the way back out even when
    the column was declared timezone-aware.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for library-level errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging

    Example:
        class StoreError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="STORE_ERROR", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result
