"""
Database Engine & Sessions
==========================

DATABASE_URL picks the database (default: sqlite:///./docgen.db). The
engine is bound on first use and rebound whenever the variable changes,
which lets tests point each run at a temporary file.

SQLite connections enable foreign keys so fact records follow their
document on delete.
"""

import os
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .models import Base

DEFAULT_DATABASE_URL = "sqlite:///./docgen.db"

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False)

_state = {"engine": None, "url": None}


def database_url() -> str:
    return os.environ.get("DATABASE_URL", DEFAULT_DATABASE_URL)


def _sqlite_pragmas(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _build_engine(url: str) -> Engine:
    echo = os.environ.get("SQL_ECHO", "false").lower() == "true"
    if not url.startswith("sqlite"):
        return create_engine(url, pool_size=5, max_overflow=10, pool_pre_ping=True, echo=echo)

    # Sessions are used from the event loop and from worker threads
    engine = create_engine(url, connect_args={"check_same_thread": False}, echo=echo)
    event.listen(engine, "connect", _sqlite_pragmas)
    return engine


def get_engine() -> Engine:
    """Engine for the current DATABASE_URL"""
    url = database_url()
    engine: Optional[Engine] = _state["engine"]
    if engine is None or _state["url"] != url:
        if engine is not None:
            engine.dispose()
        engine = _build_engine(url)
        _state.update(engine=engine, url=url)
        SessionLocal.configure(bind=engine)
    return engine


def reset_engine():
    """Drop the bound engine; the next get_engine() rebinds"""
    engine = _state["engine"]
    if engine is not None:
        engine.dispose()
    _state.update(engine=None, url=None)
    SessionLocal.configure(bind=None)


def init_db():
    """Create missing tables"""
    Base.metadata.create_all(bind=get_engine())


def get_db() -> Iterator[Session]:
    """
    FastAPI dependency yielding a request-scoped session.

    Handlers commit explicitly; anything uncommitted is discarded on close.
    """
    get_engine()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_session() -> Iterator[Session]:
    """
    Unit of work for background jobs: commit on success, roll back on error.

    Usage:
        with get_db_session() as db:
            repository.mark_processing(db, document_id)
    """
    get_engine()
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
