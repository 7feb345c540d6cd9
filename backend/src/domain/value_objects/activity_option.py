"""Answer option value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ActivityOption:
    """
    Immutable answer option (statement) of an activity.
    
    Attributes:
        text: Statement shown to the student
        is_correct: Whether picking this statement is a correct answer
    """

    text: str = ""
    is_correct: bool = False

    def to_document(self) -> dict:
        """Convert option to its stored document form."""
        return {"text": self.text, "isCorrect": self.is_correct}

    @classmethod
    def from_document(cls, document: dict) -> "ActivityOption":
        """Build an option from its stored document form."""
        return cls(
            text=document.get("text", ""),
            is_correct=document.get("isCorrect") is True,
        )
