"""Read-only access to the seeded auxiliary database."""

from fastapi import APIRouter

from message_service.controllers.dependencies import DatabaseDep
from message_service.database import fetch_single_entry
from message_service.views import DbEntryRead

router = APIRouter(tags=["db"])


@router.get("/db", response_model=DbEntryRead)
def get_db_entry(database: DatabaseDep) -> DbEntryRead:
    """Return the single row seeded at startup.

    A missing or malformed row raises ``InvariantViolation``; it is left to
    propagate because the startup guarantee has been broken.
    """

    with database.session_scope() as session:
        entry = fetch_single_entry(session)
        return DbEntryRead.from_entry(entry)
