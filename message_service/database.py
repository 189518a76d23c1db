"""Auxiliary database: engine setup, seeding and locked session access."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import MultipleResultsFound, NoResultFound
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from message_service.config.settings import Settings
from message_service.models import Base
from message_service.models.entry import SEED_ENTRY_ID, SEED_ENTRY_NAME, Entry
from message_service.utils import InvariantViolation

logger = logging.getLogger(__name__)


def _create_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine whose connection outlives individual sessions."""

    engine_options: dict[str, Any] = {"echo": echo, "future": True}

    if url.startswith("sqlite"):
        # An in-memory SQLite database lives only as long as its connection,
        # so every session has to share the same one.
        engine_options["poolclass"] = StaticPool
        engine_options["connect_args"] = {"check_same_thread": False}

    return create_engine(url, **engine_options)


class Database:
    """Engine, session factory and the lock serialising access to them."""

    def __init__(self, url: str = "sqlite://", echo: bool = False):
        self.engine = _create_engine(url, echo=echo)
        self.session_factory = sessionmaker(self.engine, expire_on_commit=False)
        self.lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, echo=settings.debug)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session while holding the database lock."""

        with self.lock:
            with self.session_factory() as session:
                yield session

    def dispose(self) -> None:
        """Dispose of the engine and release its connection."""

        self.engine.dispose()


def init_database(database: Database) -> None:
    """Create the entries table and insert the seed row.

    Failures propagate: a service without its seed row must not start.
    """

    Base.metadata.create_all(database.engine)

    with database.session_scope() as session:
        session.add(Entry(id=SEED_ENTRY_ID, name=SEED_ENTRY_NAME))
        session.commit()

    logger.info("Seeded entries table with %r.", SEED_ENTRY_NAME)


def fetch_single_entry(session: Session) -> Entry:
    """Return the one row of the entries table."""

    try:
        entry = session.execute(select(Entry)).scalar_one()
    except NoResultFound as exc:
        raise InvariantViolation("entries table has no rows") from exc
    except MultipleResultsFound as exc:
        raise InvariantViolation("entries table has more than one row") from exc

    if not isinstance(entry.id, int) or not isinstance(entry.name, str):
        raise InvariantViolation(f"malformed entries row: {entry!r}")

    return entry


__all__ = ["Database", "fetch_single_entry", "init_database"]
