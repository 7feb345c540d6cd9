"""SQLAlchemy ORM models."""

from .activity_model import ActivityModel

__all__ = ["ActivityModel"]
