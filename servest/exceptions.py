"""Custom exception hierarchy for the servest estimation pipeline."""

from __future__ import annotations


class ServestError(Exception):
    """Base exception for all servest errors."""


class InvalidFrequencyError(ServestError, ValueError):
    """Raised when a recurring task carries a frequency with no known divisor."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown recurrence frequency: {value!r}")


class EstimationError(ServestError):
    """Raised when the pipeline cannot produce a result for its input."""


class MigrationError(ServestError):
    """Raised when a persisted payload cannot be upgraded to the current shape."""


class InvalidTransitionError(ServestError):
    """Raised when a project status change is not permitted."""

    def __init__(self, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot move project from {current} to {target}")
