"""Domain Enums - Constant values used across the domain."""

from .activity_type import ActivityType

__all__ = ["ActivityType"]
