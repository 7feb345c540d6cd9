"""Domain Entities - Objects with identity."""

from .activity import Activity

__all__ = ["Activity"]
