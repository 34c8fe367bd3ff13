"""Schemas for meals, their vocabularies and suggestion responses."""

from enum import Enum
from typing import List, Optional, Set
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_serializer, field_validator


class MealCourse(str, Enum):
    """Meal slot within a day."""

    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class Flavor(str, Enum):
    sweet = "sweet"
    salty = "salty"
    sour = "sour"
    bitter = "bitter"
    umami = "umami"
    spicy = "spicy"
    savory = "savory"


class Allergy(str, Enum):
    nuts = "nuts"
    dairy = "dairy"
    gluten = "gluten"
    eggs = "eggs"
    shellfish = "shellfish"
    soy = "soy"
    fish = "fish"
    sesame = "sesame"


def sorted_values(values) -> List[str]:
    """Serialize a set of enum members (or UUIDs) as a sorted list of strings."""
    return sorted(v.value if isinstance(v, Enum) else str(v) for v in values)


class Meal(BaseModel):
    """A catalog entry that can be assigned to a course of a day plan."""

    id: UUID = Field(default_factory=uuid4, description="Stable identifier, never reassigned")
    name: str = Field(..., examples=["Oatmeal & Berries"])
    calories: int = Field(..., examples=[320], description="Energy per serving (kcal), usually 50-1500")
    course: MealCourse = Field(..., examples=["breakfast"])
    flavors: Set[Flavor] = Field(default_factory=set, examples=[["sweet"]])
    allergies: Set[Allergy] = Field(default_factory=set, examples=[["gluten"]])
    best_cooked_with: str = Field(default="", examples=["Oats, almond milk"])
    best_served_as: str = Field(default="", examples=["Warm bowl"])
    image_filename: Optional[str] = Field(default=None, description="Handle returned by the image store")
    is_favorite: bool = False

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_serializer("flavors", "allergies")
    def serialize_vocabulary(self, values):
        return sorted_values(values)


class ScoredMeal(BaseModel):
    """Suggested meal with the score that ranked it."""

    meal: Meal
    score: float
