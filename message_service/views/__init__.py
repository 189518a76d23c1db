"""Pydantic schemas used as views."""

from .common import ErrorResponse, HealthResponse, StatusResponse
from .db import DbEntryRead
from .messages import MessageRead, MessageWrite
from .time import TimeMessage

__all__ = [
    "DbEntryRead",
    "ErrorResponse",
    "HealthResponse",
    "MessageRead",
    "MessageWrite",
    "StatusResponse",
    "TimeMessage",
]
