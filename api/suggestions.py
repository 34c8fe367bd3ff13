"""Suggestion endpoints.

Ranks the catalog for one course against the current profile. The full list
is returned unless a `limit` is given (or configured via `SUGGESTION_LIMIT`).
"""

from fastapi import APIRouter, Depends, Query, Request
from typing import List, Optional
from database.deps import get_store
from core.logger import get_logger
from schemas import MealCourse, ScoredMeal
from services.planner_store import PlannerStore

logger = get_logger("api.suggestions")
router = APIRouter(prefix="/api/suggestions", tags=["suggestions"])


def default_limit(request: Request) -> int:
    return request.app.state.settings.suggestion_limit


@router.get("/{course}", response_model=List[ScoredMeal])
def get_suggestions(course: MealCourse, limit: Optional[int] = Query(None, ge=0),
                    store: PlannerStore = Depends(get_store),
                    configured_limit: int = Depends(default_limit)):
    """Return scored meals for `course`, best first.

    Args:
        course: Course to suggest for.
        limit: Maximum number of meals; 0 or absent means the configured default.
    """
    ranked = store.suggested_meals_scored(course)
    cap = limit or configured_limit
    if cap:
        ranked = ranked[:cap]
    logger.debug("Returning %s suggestions for %s", len(ranked), course.value)
    return [ScoredMeal(meal=m, score=score) for m, score in ranked]
