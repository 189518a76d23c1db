"""Common response schemas."""

from typing import Literal

from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: Literal["ok"] = "ok"


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    reason: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
