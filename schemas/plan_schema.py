"""Schemas for day plans and the planner views built on them."""

from datetime import date, datetime, time
from typing import List, Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator

from .meal_schema import Meal, MealCourse


def start_of_day(value: Union[date, datetime]) -> datetime:
    """Truncate a date or datetime to local midnight.

    Aware datetimes are converted to local time first, so every day key is a
    naive local datetime.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone().replace(tzinfo=None)
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime.combine(value, time.min)


class DayPlan(BaseModel):
    """Meal selection for one calendar day.

    `date` is the day key and is always stored at midnight. A course left as
    None is unplanned.
    """

    id: UUID = Field(default_factory=uuid4)
    date: datetime = Field(..., examples=["2025-10-24T00:00:00"])
    breakfast: Optional[UUID] = None
    lunch: Optional[UUID] = None
    dinner: Optional[UUID] = None
    snack: Optional[UUID] = None

    @field_validator("date", mode="before")
    @classmethod
    def accept_plain_date(cls, value):
        if isinstance(value, date) and not isinstance(value, datetime):
            return start_of_day(value)
        return value

    @field_validator("date")
    @classmethod
    def truncate_date(cls, value: datetime) -> datetime:
        return start_of_day(value)

    def meal_id_for(self, course: MealCourse) -> Optional[UUID]:
        return getattr(self, course.value)

    def assigned_meal_ids(self) -> List[UUID]:
        """Planned meal ids in course order, skipping unplanned courses."""
        ids = [self.meal_id_for(course) for course in MealCourse]
        return [meal_id for meal_id in ids if meal_id is not None]


class PlannedDay(BaseModel):
    """A day plan with its meals resolved against the catalog."""

    plan: DayPlan
    breakfast: Optional[Meal] = None
    lunch: Optional[Meal] = None
    dinner: Optional[Meal] = None
    snack: Optional[Meal] = None
    total_calories: int = 0
