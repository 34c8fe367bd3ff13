"""Shared fixtures: a planner store backed by temporary files."""
import pytest
from database import JSONStorage, make_session_factory
from services.planner_store import PlannerStore


@pytest.fixture
def session_factory(tmp_path):
    return make_session_factory(f"sqlite:///{tmp_path / 'activity.db'}")


@pytest.fixture
def store(tmp_path, session_factory):
    """A loaded store seeded with the sample meals."""
    s = PlannerStore(JSONStorage(tmp_path / "docs"), session_factory=session_factory)
    s.load_all()
    return s
