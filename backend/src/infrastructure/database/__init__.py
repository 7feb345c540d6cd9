"""Database infrastructure module."""

from .session import get_session, init_db, close_db
from .models import ActivityModel

__all__ = [
    "get_session",
    "init_db",
    "close_db",
    "ActivityModel",
]
