"""Repository helpers for the activity log database.

Provides a small generic base plus the activity-log repository used by the
planner store and the activity endpoint.
"""

from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, List
from database.models import Base, ActivityEntry

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object.

        Args:
            obj: Model instance to persist.

        Returns:
            The persisted object with refreshed attributes.
        """
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj


class ActivityRepository(BaseRepository[ActivityEntry]):
    """Append-only access to the activity log."""

    def __init__(self, session: Session):
        super().__init__(ActivityEntry, session)

    def record(self, message: str) -> ActivityEntry:
        return self.create(ActivityEntry(message=message))

    def recent(self, limit: int = 50) -> List[ActivityEntry]:
        """Most recent entries first."""
        return (
            self.session.query(ActivityEntry)
            .order_by(ActivityEntry.created_at.desc(), ActivityEntry.id.desc())
            .limit(limit)
            .all()
        )
