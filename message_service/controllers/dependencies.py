"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Callable

from fastapi import Depends, Path, Request

from message_service.controllers.convertors import MAX_MESSAGE_ID
from message_service.database import Database
from message_service.services import MessageStore

Clock = Callable[[], datetime]


def get_message_store(request: Request) -> MessageStore:
    return request.app.state.message_store


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


# Out-of-range IDs never match the `u64` route convertor, so the bounds only document it.
MessageIdPath = Annotated[int, Path(ge=0, le=MAX_MESSAGE_ID)]
MessageStoreDep = Annotated[MessageStore, Depends(get_message_store)]
DatabaseDep = Annotated[Database, Depends(get_database)]
ClockDep = Annotated[Clock, Depends(get_clock)]


__all__ = [
    "Clock",
    "ClockDep",
    "DatabaseDep",
    "MAX_MESSAGE_ID",
    "MessageIdPath",
    "MessageStoreDep",
    "get_clock",
    "get_database",
    "get_message_store",
]
