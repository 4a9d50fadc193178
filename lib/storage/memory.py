# =============================================================================
# lib/storage/memory.py - In-Process Intention Store
# =============================================================================
# Volatile backend used when no database is configured. Records live in
# plain dicts keyed by random UUIDs and vanish when the process exits.
#
# Writes go through one lock so username uniqueness and the created_at
# ordering hold under concurrent requests.
# =============================================================================

from __future__ import annotations

import itertools
import logging
import threading
from datetime import datetime

from core.models.intention import PrayerIntention
from core.models.user import User
from lib.storage.base import StoreConstraintError
from lib.utils import generate_id, utc_now

logger = logging.getLogger(__name__)


class MemoryIntentionStore:
    """
    Dict-backed implementation of IntentionStore.

    Ordering ties on created_at are broken by insertion sequence, newest
    insertion first, so repeated list calls always agree.
    """

    backend_name = "memory"

    def __init__(self) -> None:
        self._intentions: dict[str, tuple[int, PrayerIntention]] = {}
        self._users: dict[str, User] = {}
        self._sequence = itertools.count()
        self._last_created_at: datetime | None = None
        self._lock = threading.Lock()

    def initialize(self) -> None:
        logger.info("Using in-memory intention store (data is not persisted)")

    def check(self) -> None:
        return None

    # -------------------------------------------------------------------------
    # Prayer Intentions
    # -------------------------------------------------------------------------

    def list_intentions(self) -> list[PrayerIntention]:
        entries = sorted(
            list(self._intentions.values()),
            key=lambda entry: (entry[1].created_at, entry[0]),
            reverse=True,
        )
        return [record for _, record in entries]

    def create_intention(self, name: str, intention: str) -> PrayerIntention:
        with self._lock:
            created_at = utc_now()
            # Never step back if the wall clock does
            if self._last_created_at is not None and created_at < self._last_created_at:
                created_at = self._last_created_at
            self._last_created_at = created_at
            record = PrayerIntention(
                id=generate_id(),
                name=name,
                intention=intention,
                created_at=created_at,
            )
            self._intentions[record.id] = (next(self._sequence), record)
        logger.debug(f"Stored intention {record.id} in memory")
        return record

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    def create_user(self, username: str, password: str) -> User:
        with self._lock:
            if self.get_user_by_username(username) is not None:
                raise StoreConstraintError(
                    f"Username already exists: {username}",
                    details={"field": "username"},
                )
            user = User(id=generate_id(), username=username, password=password)
            self._users[user.id] = user
        return user

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return next(
            (user for user in list(self._users.values()) if user.username == username),
            None,
        )
