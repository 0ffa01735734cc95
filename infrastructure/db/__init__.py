"""
Infrastructure Database Layer.

This package provides implementations of the repository interfaces defined
in application.ports:
- In-memory stores (local catalog seeded with sample exercises)
- Supabase-backed stores (shared catalog and workout history)

Usage:
    from supabase import create_client
    from infrastructure.db import (
        InMemoryExerciseRepository,
        SupabaseExerciseRepository,
        SupabaseWorkoutHistoryRepository,
    )

    # Local catalog
    exercise_repo = InMemoryExerciseRepository()

    # Remote catalog and history
    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    exercise_repo = SupabaseExerciseRepository(client)
    history_repo = SupabaseWorkoutHistoryRepository(client)
"""

from infrastructure.db.exercises_repository import SupabaseExerciseRepository
from infrastructure.db.memory_repository import (
    InMemoryExerciseRepository,
    InMemoryWorkoutHistoryRepository,
)
from infrastructure.db.sample_exercises import SAMPLE_EXERCISES
from infrastructure.db.workout_history_repository import SupabaseWorkoutHistoryRepository

__all__ = [
    # Exercise catalog
    "SupabaseExerciseRepository",
    "InMemoryExerciseRepository",
    "SAMPLE_EXERCISES",

    # Workout history
    "SupabaseWorkoutHistoryRepository",
    "InMemoryWorkoutHistoryRepository",
]
