"""Activity entity - a quiz item with typed answer options."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from domain.enums import ActivityType
from domain.value_objects import ActivityOption
from domain.exceptions import ActivityValidationError


MIN_CHOICE_OPTIONS = 2

_MIN_OPTIONS_MESSAGES = {
    ActivityType.MULTIPLE_CHOICE: "Multiple-choice activity must have at least 2 statements.",
    ActivityType.SINGLE_CHOICE: "Single-choice activity must have at least 2 statements.",
}


@dataclass
class Activity:
    """
    Entity representing a quiz activity.
    
    This is a mutable entity with identity (id). Timestamps are left empty
    until the activity is stored; the repository stamps them.
    """

    type: ActivityType
    options: list[ActivityOption] = field(default_factory=list)
    active: bool = True
    search: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def correct_answer_count(self) -> int:
        """Number of options flagged as correct."""
        count = 0
        for option in self.options:
            if option.is_correct is True:
                count += 1
        return count

    def validate(self) -> None:
        """
        Check the creation rules, stopping at the first one broken.
        
        Raises:
            ActivityValidationError: With the message of the broken rule
        """
        if self.type == ActivityType.ESSAY and self.options:
            raise ActivityValidationError("Essay activity must not have statements.")

        if self.type in _MIN_OPTIONS_MESSAGES and len(self.options) < MIN_CHOICE_OPTIONS:
            raise ActivityValidationError(_MIN_OPTIONS_MESSAGES[self.type])

        if self.type.is_choice and self.correct_answer_count < 1:
            raise ActivityValidationError("An activity must have at least 1 correct answer.")

    def __str__(self) -> str:
        return f"Activity(id={self.id}, type={self.type})"
