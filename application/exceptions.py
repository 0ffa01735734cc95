"""
Application-layer exceptions.

These exceptions are raised by the workout generator and the catalog/history
use cases, and are translated to HTTP errors by the API layer.
"""

from typing import Optional, Union


class WorkoutGenerationError(Exception):
    """Base class for infeasible generation requests.

    Raised synchronously from WorkoutGenerator.generate() and never retried
    internally. Relaxing the constraints is left to the caller.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InsufficientWarmupError(WorkoutGenerationError):
    """Fewer than two eligible warmup exercises for the requested equipment."""

    pass


class InsufficientCatalogError(WorkoutGenerationError):
    """No eligible core, strength or cardio exercises."""

    pass


class InsufficientTimeError(WorkoutGenerationError):
    """Time budget cannot fit the mandatory warmup block."""

    def __init__(self, message: str, required_seconds: Optional[int] = None):
        super().__init__(message)
        self.required_seconds = required_seconds


class EmptyCatalogError(WorkoutGenerationError):
    """The catalog returned no exercises at all for the filter."""

    pass


class ExerciseNotFoundError(Exception):
    """Catalog entry does not exist."""

    def __init__(self, exercise_id: Union[int, str]):
        super().__init__(f"Exercise not found: {exercise_id}")
        self.exercise_id = exercise_id


class WorkoutNotFoundError(Exception):
    """Saved workout does not exist."""

    def __init__(self, workout_id: Union[int, str]):
        super().__init__(f"Workout not found: {workout_id}")
        self.workout_id = workout_id
