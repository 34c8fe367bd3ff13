"""Activity log endpoint."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from database.deps import get_db
from core.repository import ActivityRepository
from schemas import ActivityEntryResponse

router = APIRouter(prefix="/api", tags=["activity"])


@router.get("/activity", response_model=List[ActivityEntryResponse])
def list_activity(limit: int = Query(50, ge=1, le=500), db: Session = Depends(get_db)):
    """Return the most recent store mutations, newest first."""
    entries = ActivityRepository(db).recent(limit)
    return [ActivityEntryResponse(id=e.id, message=e.message, created_at=e.created_at.isoformat()) for e in entries]
