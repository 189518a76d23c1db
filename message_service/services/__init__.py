"""Service layer for the message service."""

from .message_store import MessageStore

__all__ = ["MessageStore"]
