"""SQLAlchemy model for the seeded entries table."""

from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from .base import Base

SEED_ENTRY_ID = 0
SEED_ENTRY_NAME = "Rocketeer"


class Entry(Base):
    """Single-row lookup table populated once at startup."""

    __tablename__ = "entries"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"Entry(id={self.id!r}, name={self.name!r})"


__all__ = ["Entry", "SEED_ENTRY_ID", "SEED_ENTRY_NAME"]
