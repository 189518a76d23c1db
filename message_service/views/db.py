"""Schema for the seeded database entry."""

from __future__ import annotations

from pydantic import BaseModel

from message_service.models import Entry


class DbEntryRead(BaseModel):
    id: int
    contents: str

    @classmethod
    def from_entry(cls, entry: Entry) -> "DbEntryRead":
        """Expose the ``name`` column under the ``contents`` key."""

        return cls(id=entry.id, contents=entry.name)
