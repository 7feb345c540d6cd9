"""Domain Value Objects - Immutable objects without identity."""

from .activity_option import ActivityOption
from .activity_query import ActivityQuery

__all__ = ["ActivityOption", "ActivityQuery"]
