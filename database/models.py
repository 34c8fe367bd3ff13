"""SQLAlchemy ORM models for the meal planner.

Only the activity log lives in the relational database; meals, profile and
plans are JSON documents handled by `database.storage`.
"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class ActivityEntry(Base):
    """Timestamped record of a store mutation (meal added, plan updated...)."""

    __tablename__ = "activity_log"
    id = Column(Integer, primary_key=True, index=True)
    message = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
