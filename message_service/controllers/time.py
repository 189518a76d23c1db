"""Current UTC time endpoint."""

from fastapi import APIRouter

from message_service.controllers.dependencies import ClockDep
from message_service.views import TimeMessage

router = APIRouter(tags=["time"])


@router.get("/time", response_model=TimeMessage)
async def get_time(clock: ClockDep) -> TimeMessage:
    """Return the current UTC hour and date."""

    return TimeMessage.from_datetime(clock())
