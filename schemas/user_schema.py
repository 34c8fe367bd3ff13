"""Schemas for the user's physiological profile."""

from enum import Enum
from typing import Set
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer

from .meal_schema import Allergy, Flavor, sorted_values


class Sex(str, Enum):
    """Selects the BMR formula offset."""

    male = "male"
    female = "female"


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    light = "light"
    moderate = "moderate"
    active = "active"
    very_active = "very_active"

    @property
    def multiplier(self) -> float:
        return ACTIVITY_MULTIPLIERS[self]


ACTIVITY_MULTIPLIERS = {
    ActivityLevel.sedentary: 1.2,
    ActivityLevel.light: 1.375,
    ActivityLevel.moderate: 1.55,
    ActivityLevel.active: 1.725,
    ActivityLevel.very_active: 1.9,
}

# Mifflin-St Jeor sex offset
SEX_OFFSETS = {
    Sex.male: 5,
    Sex.female: -161,
}


def mifflin_st_jeor(age: int, height_cm: float, weight_kg: float, sex: Sex) -> float:
    """Basal metabolic rate in kcal/day."""
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + SEX_OFFSETS[sex]


class UserProfile(BaseModel):
    """The single profile of this installation.

    Numeric fields are not range-checked: out-of-range values simply produce
    extreme BMR/TDEE figures. `bmr` and `tdee` are derived on access and are
    never written to the profile document.
    """

    age: int = Field(default=25, examples=[25], description="Age in years (practical range 12-100)")
    sex: Sex = Field(default=Sex.male, examples=["male"])
    height_cm: float = Field(default=170, examples=[170.0], description="Height in centimeters (practical range 120-220)")
    weight_kg: float = Field(default=65, examples=[65.0], description="Weight in kilograms (practical range 30-180)")
    activity: ActivityLevel = Field(default=ActivityLevel.moderate, examples=["moderate"])
    preferred_flavors: Set[Flavor] = Field(default_factory=set, examples=[["umami", "savory"]])
    disliked_meal_ids: Set[UUID] = Field(default_factory=set)
    allergies: Set[Allergy] = Field(default_factory=set, examples=[["nuts"]])

    @field_serializer("preferred_flavors", "disliked_meal_ids", "allergies")
    def serialize_sets(self, values):
        return sorted_values(values)

    @property
    def bmr(self) -> float:
        return mifflin_st_jeor(self.age, self.height_cm, self.weight_kg, self.sex)

    @property
    def tdee(self) -> float:
        return self.bmr * self.activity.multiplier


class EnergyResponse(BaseModel):
    """Derived energy figures for the current profile."""

    bmr: float
    tdee: float
    course_targets: dict
