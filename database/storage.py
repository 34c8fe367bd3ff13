"""JSON document storage for meals, profile and plans, plus image blobs.

Layout under the configured root::

    data/meals.json     data/profile.json     data/plans.json
    images/<uuid>.jpg

Reads never raise: a missing or unreadable document yields the first-run
default (seed meals, default profile, no plans), which is written back so the
next start finds a valid file. Writes are atomic whole-document replacements;
a failed write is logged and reported as False, the caller's in-memory state
stays authoritative.
"""

import json
import os
from pathlib import Path
from typing import List, Optional
from uuid import uuid4

from pydantic import TypeAdapter

from core.exceptions import ValidationError
from core.logger import get_logger
from data.meals_dataset import MEALS_DATA
from schemas import DayPlan, Meal, UserProfile

logger = get_logger("database.storage")

IMAGE_EXTENSION = ".jpg"

MEALS_ADAPTER = TypeAdapter(List[Meal])
PROFILE_ADAPTER = TypeAdapter(UserProfile)
PLANS_ADAPTER = TypeAdapter(List[DayPlan])


def seed_meals() -> List[Meal]:
    """Fresh copies of the built-in sample meals, each with a new id."""
    return [Meal(**item) for item in MEALS_DATA]


def encode_document(adapter: TypeAdapter, value) -> str:
    """Pretty-printed, key-sorted JSON for a document value."""
    return json.dumps(adapter.dump_python(value, mode="json"), indent=2, sort_keys=True)


def decode_document(adapter: TypeAdapter, raw):
    """Parse a JSON document produced by `encode_document`."""
    return adapter.validate_json(raw)


class JSONStorage:
    """File-backed persistence gateway used by the planner store."""

    def __init__(self, root):
        self.root = Path(root)
        self.data_dir = self.root / "data"
        self.images_dir = self.root / "images"
        for folder in (self.data_dir, self.images_dir):
            try:
                folder.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.error("Create folder %s failed: %s", folder, exc)

    @property
    def meals_path(self) -> Path:
        return self.data_dir / "meals.json"

    @property
    def profile_path(self) -> Path:
        return self.data_dir / "profile.json"

    @property
    def plans_path(self) -> Path:
        return self.data_dir / "plans.json"

    # Meals

    def load_meals(self) -> List[Meal]:
        meals = self._load(MEALS_ADAPTER, self.meals_path)
        if meals is None:
            meals = seed_meals()
            logger.info("Seeding %s sample meals", len(meals))
            self._save(MEALS_ADAPTER, meals, self.meals_path)
        return meals

    def save_meals(self, meals: List[Meal]) -> bool:
        return self._save(MEALS_ADAPTER, meals, self.meals_path)

    # Profile

    def load_profile(self) -> UserProfile:
        profile = self._load(PROFILE_ADAPTER, self.profile_path)
        if profile is None:
            profile = UserProfile()
            self._save(PROFILE_ADAPTER, profile, self.profile_path)
        return profile

    def save_profile(self, profile: UserProfile) -> bool:
        return self._save(PROFILE_ADAPTER, profile, self.profile_path)

    # Plans

    def load_plans(self) -> List[DayPlan]:
        plans = self._load(PLANS_ADAPTER, self.plans_path)
        if plans is None:
            plans = []
            self._save(PLANS_ADAPTER, plans, self.plans_path)
        return plans

    def save_plans(self, plans: List[DayPlan]) -> bool:
        return self._save(PLANS_ADAPTER, plans, self.plans_path)

    # Images

    def save_image(self, data: bytes) -> Optional[str]:
        """Store image bytes under a generated name and return that name.

        Returns None when the file cannot be written.
        """
        name = f"{uuid4()}{IMAGE_EXTENSION}"
        try:
            self._write_atomic(self.images_dir / name, data)
        except OSError as exc:
            logger.error("Save image failed: %s", exc)
            return None
        logger.info("Saved image %s (%s bytes)", name, len(data))
        return name

    def image_path(self, filename: str) -> Path:
        """Location of a stored image.

        Raises:
            ValidationError: If the handle is not a plain file name.
        """
        if not filename or filename in (".", "..") or Path(filename).name != filename or "\\" in filename:
            raise ValidationError(f"Invalid image handle '{filename}'", field="filename")
        return self.images_dir / filename

    # Helpers

    def _load(self, adapter: TypeAdapter, path: Path):
        # A missing file is the normal first-run case, not worth a warning
        if not path.exists():
            return None
        try:
            return decode_document(adapter, path.read_bytes())
        except (OSError, ValueError) as exc:
            logger.warning("Load %s failed: %s", path.name, exc)
            return None

    def _save(self, adapter: TypeAdapter, value, path: Path) -> bool:
        try:
            payload = encode_document(adapter, value)
            self._write_atomic(path, payload.encode("utf-8"))
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Save %s failed: %s", path.name, exc)
            return False
        return True

    def _write_atomic(self, path: Path, data: bytes) -> None:
        tmp = path.with_name(path.name + ".tmp")
        try:
            with open(tmp, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, path)
        except OSError:
            if tmp.exists():
                tmp.unlink()
            raise
