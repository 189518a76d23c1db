"""SQLAlchemy models for the auxiliary database."""

from .base import Base
from .entry import Entry  # noqa: F401

__all__ = ["Base", "Entry"]
