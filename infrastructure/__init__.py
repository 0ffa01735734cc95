"""
Infrastructure Layer for the Workout Roulette API.

This package contains concrete implementations of repository interfaces:
- db/: In-memory and Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    InMemoryExerciseRepository,
    InMemoryWorkoutHistoryRepository,
    SupabaseExerciseRepository,
    SupabaseWorkoutHistoryRepository,
)

__all__ = [
    "InMemoryExerciseRepository",
    "InMemoryWorkoutHistoryRepository",
    "SupabaseExerciseRepository",
    "SupabaseWorkoutHistoryRepository",
]
