"""Error types and the reasons reported in structured error bodies."""

from __future__ import annotations

MESSAGE_EXISTS_REASON = "ID exists. Try put."
NOT_FOUND_REASON = "Resource was not found."
MALFORMED_BODY_REASON = "Malformed message body."
INTERNAL_ERROR_REASON = "Internal server error."


class InvariantViolation(RuntimeError):
    """Raised when a guarantee established at startup no longer holds.

    Handlers never catch this; it is reported as an internal error and logged
    at CRITICAL level so the broken process can be replaced.
    """


__all__ = [
    "InvariantViolation",
    "INTERNAL_ERROR_REASON",
    "MALFORMED_BODY_REASON",
    "MESSAGE_EXISTS_REASON",
    "NOT_FOUND_REASON",
]
