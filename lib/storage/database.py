# =============================================================================
# lib/storage/database.py - SQLAlchemy Intention Store
# =============================================================================
# Durable backend over any SQLAlchemy-supported database reachable through
# DATABASE_URL (PostgreSQL in production, SQLite in tests).
#
# Tables:
#   users(id, username unique, password)
#   prayer_intentions(id, name, intention, created_at)
#
# Every operation opens its own short-lived Session and touches either one
# row or one ordered read, so no multi-statement transactions are needed.
#
# Usage:
#   store = DatabaseIntentionStore.from_url("postgresql://...")
#   store.initialize()
#   intentions = store.list_intentions()
# =============================================================================

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import DateTime, Engine, String, Text, create_engine, select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from core.models.intention import PrayerIntention
from core.models.user import User
from lib.storage.base import StoreConstraintError, StoreUnavailableError
from lib.utils import ensure_utc, generate_id, utc_now

logger = logging.getLogger(__name__)


# =============================================================================
# ORM Models
# =============================================================================

class Base(DeclarativeBase):
    pass


class UserRecord(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)


class PrayerIntentionRecord(Base):
    __tablename__ = "prayer_intentions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    intention: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, index=True
    )


def _to_intention(row: PrayerIntentionRecord) -> PrayerIntention:
    return PrayerIntention(
        id=row.id,
        name=row.name,
        intention=row.intention,
        created_at=ensure_utc(row.created_at),
    )


def _to_user(row: UserRecord) -> User:
    return User(id=row.id, username=row.username, password=row.password)


# =============================================================================
# Store
# =============================================================================

class DatabaseIntentionStore:
    """
    SQLAlchemy implementation of IntentionStore.

    Driver errors are translated at this boundary:
    - IntegrityError -> StoreConstraintError
    - any other SQLAlchemyError -> StoreUnavailableError
    """

    backend_name = "database"

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "DatabaseIntentionStore":
        """
        Build a store from a connection string.

        In-memory SQLite URLs share one connection across threads so every
        session sees the same database.
        """
        kwargs: dict = {"echo": echo, "pool_pre_ping": True}
        if database_url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, **kwargs)
        return cls(engine)

    def _session(self) -> Session:
        return self._session_factory()

    def initialize(self) -> None:
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(
                f"Failed to create tables: {e}",
                details={"operation": "initialize"},
            ) from e
        logger.info(f"Database intention store ready ({self.engine.url.get_backend_name()})")

    def check(self) -> None:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StoreUnavailableError(
                f"Database is unreachable: {e}",
                details={"operation": "check"},
            ) from e

    # -------------------------------------------------------------------------
    # Prayer Intentions
    # -------------------------------------------------------------------------

    def list_intentions(self) -> list[PrayerIntention]:
        statement = select(PrayerIntentionRecord).order_by(
            PrayerIntentionRecord.created_at.desc(),
            PrayerIntentionRecord.id.desc(),
        )
        try:
            with self._session() as session:
                rows = session.scalars(statement).all()
                return [_to_intention(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Failed to list prayer intentions: {e}")
            raise StoreUnavailableError(
                f"Failed to list prayer intentions: {e}",
                details={"operation": "list_intentions"},
            ) from e

    def create_intention(self, name: str, intention: str) -> PrayerIntention:
        row = PrayerIntentionRecord(
            id=generate_id(),
            name=name,
            intention=intention,
            created_at=utc_now(),
        )
        try:
            with self._session() as session, session.begin():
                session.add(row)
            return _to_intention(row)
        except IntegrityError as e:
            raise StoreConstraintError(
                f"Prayer intention violates a table constraint: {e.orig}",
                details={"operation": "create_intention"},
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to insert prayer intention: {e}")
            raise StoreUnavailableError(
                f"Failed to insert prayer intention: {e}",
                details={"operation": "create_intention"},
            ) from e

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    def create_user(self, username: str, password: str) -> User:
        row = UserRecord(id=generate_id(), username=username, password=password)
        try:
            with self._session() as session, session.begin():
                session.add(row)
            return _to_user(row)
        except IntegrityError as e:
            raise StoreConstraintError(
                f"Username already exists: {username}",
                details={"operation": "create_user", "field": "username"},
            ) from e
        except SQLAlchemyError as e:
            raise StoreUnavailableError(
                f"Failed to insert user: {e}",
                details={"operation": "create_user"},
            ) from e

    def get_user(self, user_id: str) -> User | None:
        try:
            with self._session() as session:
                row = session.get(UserRecord, user_id)
                return _to_user(row) if row else None
        except SQLAlchemyError as e:
            raise StoreUnavailableError(
                f"Failed to fetch user: {e}",
                details={"operation": "get_user"},
            ) from e

    def get_user_by_username(self, username: str) -> User | None:
        statement = select(UserRecord).where(UserRecord.username == username)
        try:
            with self._session() as session:
                row = session.scalars(statement).first()
                return _to_user(row) if row else None
        except SQLAlchemyError as e:
            raise StoreUnavailableError(
                f"Failed to fetch user: {e}",
                details={"operation": "get_user_by_username"},
            ) from e
