"""Tests for the seeded auxiliary database."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from message_service.database import Database, fetch_single_entry, init_database
from message_service.models import Base, Entry
from message_service.utils import InvariantViolation


@pytest.fixture
def database():
    db = Database("sqlite://")
    yield db
    db.dispose()


def test_init_database_seeds_single_row(database):
    init_database(database)

    with database.session_scope() as session:
        entry = fetch_single_entry(session)

    assert entry.id == 0
    assert entry.name == "Rocketeer"


def test_in_memory_database_survives_across_sessions(database):
    init_database(database)

    for _ in range(3):
        with database.session_scope() as session:
            assert fetch_single_entry(session).name == "Rocketeer"


def test_seeding_twice_fails_loudly(database):
    init_database(database)

    with pytest.raises(IntegrityError):
        init_database(database)


def test_missing_seed_row_is_an_invariant_violation(database):
    Base.metadata.create_all(database.engine)

    with database.session_scope() as session:
        with pytest.raises(InvariantViolation):
            fetch_single_entry(session)


def test_extra_row_is_an_invariant_violation(database):
    init_database(database)
    with database.session_scope() as session:
        session.add(Entry(id=1, name="Stowaway"))
        session.commit()

    with database.session_scope() as session:
        with pytest.raises(InvariantViolation):
            fetch_single_entry(session)


def test_session_scope_holds_the_lock(database):
    init_database(database)

    with database.session_scope():
        assert database.lock.locked()
    assert not database.lock.locked()
