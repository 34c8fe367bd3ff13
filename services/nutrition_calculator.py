"""Nutrition calculation helpers.

Provides BMR/TDEE estimates and the per-course calorie split used by the
suggestion engine.
"""

from typing import Dict
from core.logger import get_logger
from schemas.meal_schema import MealCourse
from schemas.user_schema import Sex, mifflin_st_jeor

logger = get_logger("services.nutrition_calculator")

# Share of the daily energy budget assigned to each course
COURSE_SHARES = {
    MealCourse.breakfast: 0.25,
    MealCourse.lunch: 0.35,
    MealCourse.dinner: 0.35,
    MealCourse.snack: 0.05,
}


class NutritionCalculator:
    """Class-based nutrition calculator used across the app."""

    def calculate_bmr(self, age: int, height_cm: float, weight_kg: float, sex: Sex) -> float:
        """Calculate BMR (kcal/day) using the Mifflin-St Jeor equation."""
        return mifflin_st_jeor(age, height_cm, weight_kg, sex)

    def calculate_tdee(self, bmr: float, multiplier: float) -> float:
        """Scale BMR by an activity multiplier."""
        val = bmr * multiplier
        logger.debug("TDEE calculated: %s", val)
        return val

    def bmr(self, profile) -> float:
        """BMR for a `UserProfile`."""
        return self.calculate_bmr(profile.age, profile.height_cm, profile.weight_kg, profile.sex)

    def tdee(self, profile) -> float:
        """TDEE for a `UserProfile`, using its activity level multiplier."""
        return self.calculate_tdee(self.bmr(profile), profile.activity.multiplier)

    def course_target(self, course: MealCourse, profile) -> float:
        """Calorie target for one course as a fixed share of TDEE."""
        return self.tdee(profile) * COURSE_SHARES[course]

    def course_targets(self, profile) -> Dict[str, float]:
        """Calorie targets for every course, keyed by course name."""
        tdee = self.tdee(profile)
        targets = {course.value: tdee * COURSE_SHARES[course] for course in MealCourse}
        logger.debug("Course targets: %s", targets)
        return targets


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = ["NutritionCalculator", "nutrition_calculator", "COURSE_SHARES"]
