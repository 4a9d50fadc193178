# =============================================================================
# lib/storage/base.py - Intention Store Interface
# =============================================================================
# Defines the capability interface every storage backend implements, and the
# errors a backend may raise. Two backends exist:
# - memory.py: volatile, in-process dict
# - database.py: durable, SQLAlchemy over DATABASE_URL
#
# Both must behave identically for list/create; tests/test_storage.py runs
# the same contract tests against each.
# =============================================================================

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.models.intention import PrayerIntention
from core.models.user import User
from lib.utils import ApplicationError


# =============================================================================
# Errors
# =============================================================================

class StoreError(ApplicationError):
    """Base class for storage backend failures."""

    def __init__(
        self,
        message: str,
        code: str = "STORE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


class StoreUnavailableError(StoreError):
    """Raised when the backing store cannot be reached or the operation fails mid-flight."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code="STORE_UNAVAILABLE",
            suggestion="Check DATABASE_URL and that the database server is reachable",
            details=details,
        )


class StoreConstraintError(StoreError):
    """Raised when a write violates a uniqueness or not-null constraint."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code="STORE_CONSTRAINT",
            suggestion="The record conflicts with an existing one; use a different value",
            details=details,
        )


# =============================================================================
# Interface
# =============================================================================

@runtime_checkable
class IntentionStore(Protocol):
    """
    Persistence contract for prayer intentions (and the latent users table).

    Implementations assign `id` and `created_at` themselves; callers never
    supply them. `create_intention` is all-or-nothing: it either returns the
    stored record or raises a StoreError having stored nothing.
    """

    backend_name: str

    def initialize(self) -> None:
        """Prepare the backend (create tables). Safe to call more than once."""
        ...

    def check(self) -> None:
        """Raise StoreUnavailableError if the backend cannot serve requests."""
        ...

    def list_intentions(self) -> list[PrayerIntention]:
        """Return every intention, newest first."""
        ...

    def create_intention(self, name: str, intention: str) -> PrayerIntention:
        """Store a new intention and return it with server-assigned fields."""
        ...

    def create_user(self, username: str, password: str) -> User:
        ...

    def get_user(self, user_id: str) -> User | None:
        ...

    def get_user_by_username(self, username: str) -> User | None:
        ...
