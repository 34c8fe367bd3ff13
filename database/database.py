"""Database helpers: engine, session factory and schema initialization.

The activity log database defaults to a local SQLite file; `DATABASE_URL`
(see `core.config`) points it elsewhere.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .models import Base


def make_engine(url: str):
    """Create an engine; SQLite connections are shared with the threadpool."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def init_db(bind):
    """Create all tables on the given engine."""
    Base.metadata.create_all(bind=bind)


def make_session_factory(url: str) -> sessionmaker:
    """Build a session factory for `url` with the schema created."""
    engine = make_engine(url)
    init_db(engine)
    return sessionmaker(bind=engine)


def open_session(factory: sessionmaker):
    """Yield a session from `factory` and close it afterwards."""
    db = factory()
    try:
        yield db
    finally:
        db.close()
