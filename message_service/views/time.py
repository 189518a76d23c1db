"""Schema for the current-time endpoint."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

HOUR_FORMAT = "%H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


class TimeMessage(BaseModel):
    hour: str = Field(pattern=r"^\d{2}:\d{2}:\d{2}$")
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")

    @classmethod
    def from_datetime(cls, moment: datetime) -> "TimeMessage":
        """Format a timestamp, converted to UTC, as 24-hour time and ISO calendar date."""

        moment = moment.astimezone(timezone.utc)
        return cls(
            hour=moment.strftime(HOUR_FORMAT),
            date=f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}",
        )
