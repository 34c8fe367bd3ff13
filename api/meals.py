"""Meals API router.

Catalog endpoints: list/search, create, update, delete, favorite toggling and
image upload/download. Meals are returned in the `Meal` schema format.
"""

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse
from typing import List, Optional
from uuid import UUID
from database.deps import get_store
from core.logger import get_logger
from core.exceptions import NotFoundError
from schemas import Meal, MealCourse
from services.planner_store import PlannerStore

logger = get_logger("api.meals")
router = APIRouter(prefix="/api", tags=["meals"])


@router.get("/meals", response_model=List[Meal])
def list_meals(search: Optional[str] = None, course: Optional[MealCourse] = None,
               store: PlannerStore = Depends(get_store)):
    """Return the catalog, optionally filtered by name fragment and course."""
    return store.list_meals(search=search, course=course)


@router.post("/meals", response_model=Meal, status_code=201)
def create_meal(payload: Meal, store: PlannerStore = Depends(get_store)):
    """Add a meal to the catalog and persist the catalog."""
    logger.info("Creating meal: %s", payload.name)
    return store.add_meal(payload)


@router.put("/meals/{meal_id}", response_model=Meal)
def update_meal(meal_id: UUID, payload: Meal, store: PlannerStore = Depends(get_store)):
    """Replace a catalog entry in place.

    The id in the path wins over any id in the body.

    Raises:
        NotFoundError: If no meal has this id.
    """
    meal = payload.model_copy(update={"id": meal_id})
    if not store.update_meal(meal):
        raise NotFoundError("Meal", meal_id)
    return meal


@router.delete("/meals/{meal_id}", status_code=204)
def delete_meal(meal_id: UUID, store: PlannerStore = Depends(get_store)):
    """Remove a meal. Day plans that still point at it treat it as unset.

    Raises:
        NotFoundError: If no meal has this id.
    """
    if not store.delete_meal(meal_id):
        raise NotFoundError("Meal", meal_id)


@router.post("/meals/{meal_id}/favorite", response_model=Meal)
def toggle_favorite(meal_id: UUID, store: PlannerStore = Depends(get_store)):
    """Flip the favorite flag of a meal."""
    meal = store.toggle_favorite(meal_id)
    if meal is None:
        raise NotFoundError("Meal", meal_id)
    return meal


@router.post("/meals/{meal_id}/image", response_model=Meal)
def upload_meal_image(meal_id: UUID, file: UploadFile = File(...), store: PlannerStore = Depends(get_store)):
    """Store an uploaded picture and attach its handle to the meal.

    Raises:
        NotFoundError: If no meal has this id.
        StorageError: If the image could not be written.
    """
    meal = store.attach_image(meal_id, file.file.read())
    if meal is None:
        raise NotFoundError("Meal", meal_id)
    return meal


@router.get("/images/{filename}")
def get_image(filename: str, store: PlannerStore = Depends(get_store)):
    """Serve a stored image by its handle."""
    path = store.image_path(filename)
    if not path.is_file():
        raise NotFoundError("Image", filename)
    return FileResponse(path, media_type="image/jpeg")
