# =============================================================================
# lib/storage/ - Intention Store Backends
# =============================================================================
# - base.py: IntentionStore interface and StoreError hierarchy
# - memory.py: volatile in-process backend
# - database.py: durable SQLAlchemy backend
#
# The backend is picked once at start-up by build_store(); nothing switches
# backends at runtime.
# =============================================================================

from typing import Literal

from lib.storage.base import (
    IntentionStore,
    StoreConstraintError,
    StoreError,
    StoreUnavailableError,
)
from lib.storage.database import DatabaseIntentionStore
from lib.storage.memory import MemoryIntentionStore


def build_store(
    backend: Literal["memory", "database"],
    database_url: str | None = None,
    echo: bool = False,
) -> IntentionStore:
    """
    Construct the configured storage backend.

    Args:
        backend: "memory" or "database"
        database_url: SQLAlchemy connection string (required for "database")
        echo: Log every SQL statement

    Raises:
        ValueError: If the database backend is requested without a URL
    """
    if backend == "database":
        if not database_url:
            raise ValueError("DATABASE_URL is required for the database storage backend")
        return DatabaseIntentionStore.from_url(database_url, echo=echo)
    return MemoryIntentionStore()


__all__ = [
    "IntentionStore",
    "StoreError",
    "StoreUnavailableError",
    "StoreConstraintError",
    "MemoryIntentionStore",
    "DatabaseIntentionStore",
    "build_store",
]
