"""Dependency helpers exposing the planner store and activity-log sessions.

Both live on `app.state`, set up by the lifespan handler in `main.py`.
"""

from fastapi import Request

from .database import open_session


def get_store(request: Request):
    """Return the application's `PlannerStore`."""
    return request.app.state.store


def get_db(request: Request):
    """Yield an activity-log DB session for FastAPI dependency injection."""
    yield from open_session(request.app.state.session_factory)
