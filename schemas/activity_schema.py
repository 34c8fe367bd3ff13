"""Schemas for activity log entries."""

from pydantic import BaseModel


class ActivityEntryResponse(BaseModel):
    """A recorded store mutation."""

    id: int
    message: str
    created_at: str
