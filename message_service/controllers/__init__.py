"""FastAPI routers acting as controllers."""

from . import db, messages, time

__all__ = ["db", "messages", "time"]
