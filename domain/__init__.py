"""
Domain layer for the Workout Roulette API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    CatalogExercise,
    ExerciseCategory,
    GenerationParameters,
    WorkoutExerciseEntry,
    WorkoutPlan,
)

__all__ = [
    "CatalogExercise",
    "ExerciseCategory",
    "GenerationParameters",
    "WorkoutExerciseEntry",
    "WorkoutPlan",
]
