"""Create, update and read messages held in the in-memory store."""

from typing import Union

from fastapi import APIRouter, HTTPException, status

from message_service.controllers import convertors  # noqa: F401 - registers the u64 convertor
from message_service.controllers.dependencies import MessageIdPath, MessageStoreDep
from message_service.utils import MESSAGE_EXISTS_REASON
from message_service.views import ErrorResponse, MessageRead, MessageWrite, StatusResponse

router = APIRouter(prefix="/message", tags=["message"])


# Handlers are sync so each runs on a worker thread while the store lock is held.
@router.post("/{message_id:u64}", response_model=Union[StatusResponse, ErrorResponse])
def create_message(
    message_id: MessageIdPath,
    payload: MessageWrite,
    store: MessageStoreDep,
) -> Union[StatusResponse, ErrorResponse]:
    """Store a new message; an existing ID is reported in the body, not the status."""

    if not store.create(message_id, payload.contents):
        return ErrorResponse(reason=MESSAGE_EXISTS_REASON)
    return StatusResponse()


@router.put("/{message_id:u64}", response_model=StatusResponse)
def update_message(
    message_id: MessageIdPath,
    payload: MessageWrite,
    store: MessageStoreDep,
) -> StatusResponse:
    """Replace the contents of an existing message."""

    if not store.update(message_id, payload.contents):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return StatusResponse()


@router.get("/{message_id:u64}", response_model=MessageRead)
def get_message(message_id: MessageIdPath, store: MessageStoreDep) -> MessageRead:
    contents = store.get(message_id)
    if contents is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return MessageRead(id=message_id, contents=contents)
