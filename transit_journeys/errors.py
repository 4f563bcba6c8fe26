class JourneyPlannerError(Exception):
    """Base class for errors raised by the journey planner."""
    pass


class InvalidInputError(JourneyPlannerError, ValueError):
    """Raised when a query names an unknown stop or an unreadable time."""
    pass


class MalformedTimeError(JourneyPlannerError, ValueError):
    """Raised when a schedule time string is not HH:MM or HH:MM:SS."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Malformed schedule time: {value!r}")
