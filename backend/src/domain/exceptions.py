"""Domain errors raised by activity operations."""


class ActivityError(Exception):
    """Base class for activity errors carrying a user-facing message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ActivityValidationError(ActivityError, ValueError):
    """Raised when an activity breaks one of its creation rules."""


class ActivityNotFoundError(ActivityError, LookupError):
    """Raised when no activity has the requested id."""

    def __init__(self, activity_id: str, message: str = "Activity not found."):
        super().__init__(message)
        self.activity_id = activity_id
