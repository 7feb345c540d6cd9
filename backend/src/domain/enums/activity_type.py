"""Activity types supported by the service."""

from enum import Enum


class ActivityType(str, Enum):
    """Kinds of activity, each with its own rules for answer options."""

    ESSAY = "essay"
    SINGLE_CHOICE = "singleChoice"
    MULTIPLE_CHOICE = "multipleChoice"

    @property
    def is_choice(self) -> bool:
        """Whether the activity is answered by picking predefined options."""
        return self is not ActivityType.ESSAY

    def __str__(self) -> str:
        return self.value
