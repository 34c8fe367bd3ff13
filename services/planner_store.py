"""In-memory state of the planner: catalog, profile and day plans.

The store is the single owner of mutable state. Every mutation runs under one
lock together with the save of the document it touched, so persisted files
always reflect a complete snapshot. Saves are best-effort: a failed write is
logged by the storage gateway and the in-memory state stays authoritative.
"""

import threading
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from core.exceptions import StorageError
from core.logger import get_logger
from core.repository import ActivityRepository
from database.storage import JSONStorage
from schemas import DayPlan, Meal, MealCourse, UserProfile
from services import plan_store
from services.recommendation_engine import SuggestionEngine, suggestion_engine

logger = get_logger("services.planner_store")


class PlannerStore:
    """Explicitly owned application state, injected where it is needed."""

    def __init__(self, storage: JSONStorage, session_factory: Optional[sessionmaker] = None,
                 engine: SuggestionEngine = suggestion_engine):
        self.storage = storage
        self.session_factory = session_factory
        self.engine = engine
        self.meals: List[Meal] = []
        self.profile = UserProfile()
        self.plans: List[DayPlan] = []
        self._lock = threading.Lock()

    def load_all(self) -> None:
        with self._lock:
            self.meals = self.storage.load_meals()
            self.profile = self.storage.load_profile()
            self.plans = self.storage.load_plans()
        logger.info("Loaded %s meals and %s plans", len(self.meals), len(self.plans))

    # Meals

    def get_meal(self, meal_id: UUID) -> Optional[Meal]:
        return plan_store.resolve_meal(meal_id, self.meals)

    def list_meals(self, search: Optional[str] = None, course: Optional[MealCourse] = None) -> List[Meal]:
        """Catalog filtered by a case-insensitive name fragment and a course."""
        result = list(self.meals)
        if search:
            needle = search.casefold()
            result = [m for m in result if needle in m.name.casefold()]
        if course is not None:
            result = [m for m in result if m.course == course]
        return result

    def add_meal(self, meal: Meal) -> Meal:
        with self._lock:
            self.meals.append(meal)
            self.storage.save_meals(self.meals)
        self._log_activity(f"Added meal: {meal.name}")
        return meal

    def update_meal(self, meal: Meal) -> bool:
        """Replace the catalog entry with the same id; False if there is none."""
        with self._lock:
            idx = self._meal_index(meal.id)
            if idx is None:
                return False
            self.meals[idx] = meal
            self.storage.save_meals(self.meals)
        self._log_activity(f"Updated meal: {meal.name}")
        return True

    def delete_meal(self, meal_id: UUID) -> bool:
        """Remove a meal. Plans that reference it are left untouched."""
        with self._lock:
            idx = self._meal_index(meal_id)
            if idx is None:
                return False
            removed = self.meals.pop(idx)
            self.storage.save_meals(self.meals)
        self._log_activity(f"Deleted meal: {removed.name}")
        return True

    def toggle_favorite(self, meal_id: UUID) -> Optional[Meal]:
        with self._lock:
            idx = self._meal_index(meal_id)
            if idx is None:
                return None
            meal = self.meals[idx].model_copy(update={"is_favorite": not self.meals[idx].is_favorite})
            self.meals[idx] = meal
            self.storage.save_meals(self.meals)
        self._log_activity(f"{'Favorited' if meal.is_favorite else 'Unfavorited'} meal: {meal.name}")
        return meal

    def attach_image(self, meal_id: UUID, data: bytes) -> Optional[Meal]:
        """Store image bytes and point the meal at them; None if the meal is unknown.

        Raises:
            StorageError: If the image could not be written.
        """
        with self._lock:
            idx = self._meal_index(meal_id)
            if idx is None:
                return None
            handle = self.storage.save_image(data)
            if handle is None:
                raise StorageError("Image could not be saved", path=str(self.storage.images_dir))
            meal = self.meals[idx].model_copy(update={"image_filename": handle})
            self.meals[idx] = meal
            self.storage.save_meals(self.meals)
        self._log_activity(f"Updated image for meal: {meal.name}")
        return meal

    def image_path(self, filename: str) -> Path:
        return self.storage.image_path(filename)

    # Profile

    def save_profile(self, profile: UserProfile) -> UserProfile:
        with self._lock:
            self.profile = profile
            self.storage.save_profile(profile)
        self._log_activity("Saved profile")
        return profile

    # Planning

    def plan_for(self, day: Union[date, datetime]) -> DayPlan:
        return plan_store.get_plan(day, self.plans)

    def save_plan(self, plan: DayPlan) -> DayPlan:
        with self._lock:
            self.plans = plan_store.upsert_plan(plan, self.plans)
            self.storage.save_plans(self.plans)
        self._log_activity(f"Updated plan for {plan.date:%b %d, %Y}")
        return plan

    # Suggestions

    def suggested_meals_scored(self, course: MealCourse) -> List[Tuple[Meal, float]]:
        with self._lock:
            meals = list(self.meals)
            profile = self.profile
        return self.engine.suggest_scored(course, profile, meals)

    def suggested_meals(self, course: MealCourse) -> List[Meal]:
        return [m for m, _ in self.suggested_meals_scored(course)]

    # Helpers

    def _meal_index(self, meal_id: UUID) -> Optional[int]:
        for idx, meal in enumerate(self.meals):
            if meal.id == meal_id:
                return idx
        return None

    def _log_activity(self, message: str) -> None:
        logger.info(message)
        if self.session_factory is None:
            return
        session = self.session_factory()
        try:
            ActivityRepository(session).record(message)
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Activity log write failed")
        finally:
            session.close()
