"""Application services."""

from .activity_service import ActivityService

__all__ = ["ActivityService"]
