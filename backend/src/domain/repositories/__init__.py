"""Domain Repository Interfaces - Abstract definitions."""

from .activity_repository import IActivityRepository

__all__ = ["IActivityRepository"]
