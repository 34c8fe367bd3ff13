"""Database package: activity log ORM, session helpers and JSON storage."""

from .database import (
    make_engine,
    make_session_factory,
    init_db,
    open_session,
)
from .storage import JSONStorage
from . import models

__all__ = [
    "make_engine",
    "make_session_factory",
    "init_db",
    "open_session",
    "JSONStorage",
    "models",
]
