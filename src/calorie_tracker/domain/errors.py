"""Domain errors raised by the nutrition engine and application services."""


class CalorieTrackerError(Exception):
    """Base class for calorie tracker errors."""


class InvalidComposition(CalorieTrackerError):  # noqa: N818
    """Raised when a meal's line set is empty or malformed."""


class InvalidRange(CalorieTrackerError):  # noqa: N818
    """Raised when a report date range is malformed."""


class InvalidData(CalorieTrackerError):  # noqa: N818
    """Raised when a write would violate a uniqueness rule."""


class NotFound(CalorieTrackerError):  # noqa: N818
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found: {identifier}")
