"""Suggestion engine service.

Ranks the meals of one course by how well they fit the profile: calorie
proximity to the course target, share of preferred flavors and a bonus for
favorites. Meals the user dislikes or is allergic to are never suggested.
"""

from typing import Iterable, List, Sequence, Tuple
import numpy as np
from core.logger import get_logger
from schemas.meal_schema import Meal, MealCourse
from schemas.user_schema import UserProfile
from services.nutrition_calculator import nutrition_calculator

logger = get_logger("services.recommendation_engine")

CALORIE_WEIGHT = 0.6
FLAVOR_WEIGHT = 0.25
# Added on top of the weighted terms, so the best possible score is 1.0
FAVORITE_BONUS = 0.15


class SuggestionEngine:
    """Class-based suggestion engine for per-course meal ranking."""

    def __init__(self, calorie_weight: float = CALORIE_WEIGHT, flavor_weight: float = FLAVOR_WEIGHT,
                 favorite_bonus: float = FAVORITE_BONUS):
        """Initialize the engine.

        Parameters
        ----------
        calorie_weight: float
            Weight of the calorie proximity term.
        flavor_weight: float
            Weight of the preferred-flavor share term.
        favorite_bonus: float
            Flat amount added for meals marked as favorite.
        """
        self.calorie_weight = calorie_weight
        self.flavor_weight = flavor_weight
        self.favorite_bonus = favorite_bonus

    def filter_candidates(self, course: MealCourse, profile: UserProfile, catalog: Iterable[Meal]) -> List[Meal]:
        """Keep meals of the course that are neither disliked nor allergenic.

        Args:
            course: Requested course.
            profile: Profile supplying disliked ids and allergies.
            catalog: Meals to choose from, in catalog order.

        Returns:
            Candidate meals in their original relative order.
        """
        disliked = profile.disliked_meal_ids
        blocked = profile.allergies
        out = []
        for m in catalog:
            if m.course != course:
                continue
            if m.id in disliked:
                continue
            if not blocked.isdisjoint(m.allergies):
                continue
            out.append(m)
        logger.debug("Filtered %s candidates for %s", len(out), course.value)
        return out

    def calorie_score(self, calories: int, target: float) -> float:
        """Linear falloff from 1 at the target to 0 at one target away."""
        return 1.0 - min(abs(calories - target) / max(target, 1), 1.0)

    def flavor_score(self, meal: Meal, profile: UserProfile) -> float:
        """Fraction of the meal's flavors the user prefers; 0 for flavorless meals."""
        matches = len(meal.flavors & profile.preferred_flavors)
        return matches / max(len(meal.flavors), 1)

    def score_meal(self, meal: Meal, target: float, profile: UserProfile) -> float:
        """Compute the total suggestion score of one meal.

        Args:
            meal: Meal to score.
            target: Calorie target of the meal's course.
            profile: Profile supplying preferred flavors.

        Returns:
            `0.6 * calorie + 0.25 * flavor + favorite bonus`.
        """
        bonus = self.favorite_bonus if meal.is_favorite else 0.0
        return (self.calorie_score(meal.calories, target) * self.calorie_weight
                + self.flavor_score(meal, profile) * self.flavor_weight
                + bonus)

    def suggest_scored(self, course: MealCourse, profile: UserProfile, catalog: Sequence[Meal]) -> List[Tuple[Meal, float]]:
        """Return `(meal, score)` pairs sorted by descending score.

        Equal scores keep their catalog order.
        """
        target = nutrition_calculator.course_target(course, profile)
        candidates = self.filter_candidates(course, profile, catalog)
        if not candidates:
            logger.info("No suggestions for %s", course.value)
            return []
        scores = np.array([self.score_meal(m, target, profile) for m in candidates], dtype=float)
        order = np.argsort(-scores, kind="stable")
        ranked = [(candidates[i], float(scores[i])) for i in order]
        logger.debug("Ranked %s meals for %s (target=%.1f)", len(ranked), course.value, target)
        return ranked

    def suggest(self, course: MealCourse, profile: UserProfile, catalog: Sequence[Meal]) -> List[Meal]:
        """Return the filtered catalog for a course, best match first."""
        return [m for m, _ in self.suggest_scored(course, profile, catalog)]


# export a default instance
suggestion_engine = SuggestionEngine()
