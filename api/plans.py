"""Day plan API router.

Fetching a day that has no stored plan returns a fresh, unsaved plan for it;
saving upserts by id first and by day second.
"""

from datetime import date
from fastapi import APIRouter, Depends
from typing import List
from database.deps import get_store
from core.logger import get_logger
from schemas import DayPlan, PlannedDay
from services import plan_store
from services.planner_store import PlannerStore

logger = get_logger("api.plans")
router = APIRouter(prefix="/api/plans", tags=["plans"])


@router.get("/week/{day}", response_model=List[PlannedDay])
def get_week(day: date, store: PlannerStore = Depends(get_store)):
    """Return the seven days centred on `day` with their meals resolved.

    Meals deleted since they were planned come back as null.
    """
    meals = list(store.meals)
    return [plan_store.planned_day(store.plan_for(d), meals) for d in plan_store.week_window(day)]


@router.get("/{day}", response_model=DayPlan)
def get_plan(day: date, store: PlannerStore = Depends(get_store)):
    return store.plan_for(day)


@router.put("", response_model=DayPlan)
def save_plan(payload: DayPlan, store: PlannerStore = Depends(get_store)):
    """Insert or replace a day plan and persist all plans."""
    logger.info("Saving plan %s for %s", payload.id, payload.date.date())
    return store.save_plan(payload)
