"""Telemetry helpers and metrics."""

from .metrics import (
    ERROR_COUNTER,
    MESSAGE_OPERATIONS,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    STORED_MESSAGES,
    observe_message_operation,
    observe_request,
    set_stored_messages,
)

__all__ = [
    "ERROR_COUNTER",
    "MESSAGE_OPERATIONS",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "STORED_MESSAGES",
    "observe_message_operation",
    "observe_request",
    "set_stored_messages",
]
