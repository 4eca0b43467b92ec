"""
Database Package - SQLAlchemy
=============================

Documents and structured fact records.
"""

from .models import Base, Document, FactRecord
from .session import get_db, get_db_session, init_db, get_engine, reset_engine

__all__ = [
    # Models
    "Base", "Document", "FactRecord",
    # Session
    "get_db", "get_db_session", "init_db", "get_engine", "reset_engine",
]
