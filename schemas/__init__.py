"""Pydantic schema package: domain models and API payloads."""

from .meal_schema import Allergy, Flavor, Meal, MealCourse, ScoredMeal
from .user_schema import ActivityLevel, EnergyResponse, Sex, UserProfile
from .plan_schema import DayPlan, PlannedDay, start_of_day
from .activity_schema import ActivityEntryResponse

__all__ = [
    "Allergy",
    "Flavor",
    "Meal",
    "MealCourse",
    "ScoredMeal",
    "ActivityLevel",
    "EnergyResponse",
    "Sex",
    "UserProfile",
    "DayPlan",
    "PlannedDay",
    "start_of_day",
    "ActivityEntryResponse",
]
