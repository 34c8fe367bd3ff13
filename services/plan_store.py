"""Day plan lookup and upsert helpers.

Plans are keyed by their normalized day. These functions never mutate the
collection they receive: `upsert_plan` returns a new list that the owner
persists wholesale.
"""

from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Sequence, Union
from uuid import UUID
from core.logger import get_logger
from schemas.meal_schema import Meal, MealCourse
from schemas.plan_schema import DayPlan, PlannedDay, start_of_day

logger = get_logger("services.plan_store")

DayLike = Union[date, datetime]

# Days shown on each side of the selected day in the planner
WEEK_RADIUS = 3


def normalize_day(day: DayLike) -> datetime:
    """Truncate a date or datetime to the start of its day."""
    return start_of_day(day)


def get_plan(day: DayLike, plans: Iterable[DayPlan]) -> DayPlan:
    """Return the plan stored for `day`, or a new empty one (not persisted).

    Args:
        day: Any moment within the requested day.
        plans: Known plans.

    Returns:
        The stored plan whose date matches the normalized day, else a fresh
        DayPlan for that day with all four courses unset.
    """
    key = normalize_day(day)
    for plan in plans:
        if plan.date == key:
            return plan
    return DayPlan(date=key)


def upsert_plan(plan: DayPlan, plans: Sequence[DayPlan]) -> List[DayPlan]:
    """Insert or replace `plan` and return the updated collection.

    Matching is two-tier: an entry with the same id is replaced first, so a
    plan whose date was edited still updates its own record. Otherwise an
    entry for the same day is replaced. Replacements keep their position;
    anything else is appended.
    """
    updated = list(plans)
    for idx, existing in enumerate(updated):
        if existing.id == plan.id:
            updated[idx] = plan
            logger.debug("Replaced plan %s by id at %s", plan.id, idx)
            return updated
    for idx, existing in enumerate(updated):
        if existing.date == plan.date:
            updated[idx] = plan
            logger.debug("Replaced plan for %s by date at %s", plan.date.date(), idx)
            return updated
    updated.append(plan)
    return updated


def resolve_meal(meal_id: Optional[UUID], catalog: Iterable[Meal]) -> Optional[Meal]:
    """Look up a planned meal; ids of deleted meals resolve to None."""
    if meal_id is None:
        return None
    for meal in catalog:
        if meal.id == meal_id:
            return meal
    return None


def planned_calories(plan: DayPlan, catalog: Iterable[Meal]) -> int:
    """Sum the calories of the plan's meals that still exist in the catalog."""
    ids = set(plan.assigned_meal_ids())
    return sum(m.calories for m in catalog if m.id in ids)


def planned_day(plan: DayPlan, catalog: Sequence[Meal]) -> PlannedDay:
    """Resolve every course of a plan against the catalog."""
    resolved = {course.value: resolve_meal(plan.meal_id_for(course), catalog) for course in MealCourse}
    return PlannedDay(plan=plan, total_calories=planned_calories(plan, catalog), **resolved)


def week_window(center: DayLike, radius: int = WEEK_RADIUS) -> List[datetime]:
    """Normalized days from `center - radius` to `center + radius`."""
    key = normalize_day(center)
    return [key + timedelta(days=offset) for offset in range(-radius, radius + 1)]
