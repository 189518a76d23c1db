"""Pydantic schemas for stored messages."""

from typing import Optional

from pydantic import BaseModel


class MessageWrite(BaseModel):
    # Accepted for symmetry with reads; the ID in the path always wins.
    id: Optional[int] = None
    contents: str


class MessageRead(BaseModel):
    id: int
    contents: str
