"""Repository implementations."""

from .sqlalchemy_activity_repository import SQLAlchemyActivityRepository

__all__ = ["SQLAlchemyActivityRepository"]
