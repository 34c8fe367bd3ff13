"""Profile API router.

Reads and replaces the singleton profile and reports the energy figures
derived from it.
"""

from fastapi import APIRouter, Depends
from database.deps import get_store
from core.logger import get_logger
from schemas import EnergyResponse, UserProfile
from services.nutrition_calculator import nutrition_calculator
from services.planner_store import PlannerStore

logger = get_logger("api.profile")
router = APIRouter(prefix="/api", tags=["profile"])


@router.get("/profile", response_model=UserProfile)
def get_profile(store: PlannerStore = Depends(get_store)):
    return store.profile


@router.put("/profile", response_model=UserProfile)
def save_profile(payload: UserProfile, store: PlannerStore = Depends(get_store)):
    """Replace the profile wholesale and persist it."""
    logger.info("Saving profile (age=%s, activity=%s)", payload.age, payload.activity.value)
    return store.save_profile(payload)


@router.get("/profile/energy", response_model=EnergyResponse)
def get_energy(store: PlannerStore = Depends(get_store)):
    """Return BMR, TDEE and the per-course calorie targets."""
    profile = store.profile
    return EnergyResponse(
        bmr=profile.bmr,
        tdee=profile.tdee,
        course_targets=nutrition_calculator.course_targets(profile),
    )
