"""
Domain models for the Workout Roulette API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services):
- CatalogExercise: an exercise record from the catalog
- GenerationParameters: validated inputs of a generation call
- WorkoutPlan / WorkoutExerciseEntry: the generated, immutable plan

Usage:
    >>> from domain.models import GenerationParameters
    >>> params = GenerationParameters(total_time_seconds=900, equipment=["dumbbells"])
"""

from domain.models.catalog import (
    NO_EQUIPMENT,
    STRENGTH_CARDIO_CATEGORIES,
    CatalogExercise,
    ExerciseCategory,
)
from domain.models.generation import (
    DEFAULT_EXERCISE_DURATION_SECONDS,
    GenerationParameters,
)
from domain.models.workout_plan import WorkoutExerciseEntry, WorkoutPlan

__all__ = [
    # Catalog
    "CatalogExercise",
    "ExerciseCategory",
    "NO_EQUIPMENT",
    "STRENGTH_CARDIO_CATEGORIES",
    # Generation
    "GenerationParameters",
    "DEFAULT_EXERCISE_DURATION_SECONDS",
    # Plan
    "WorkoutPlan",
    "WorkoutExerciseEntry",
]
