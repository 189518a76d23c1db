"""Utility helpers for the message service."""

from .errors import (
    INTERNAL_ERROR_REASON,
    MALFORMED_BODY_REASON,
    MESSAGE_EXISTS_REASON,
    NOT_FOUND_REASON,
    InvariantViolation,
)

__all__ = [
    "InvariantViolation",
    "INTERNAL_ERROR_REASON",
    "MALFORMED_BODY_REASON",
    "MESSAGE_EXISTS_REASON",
    "NOT_FOUND_REASON",
]
