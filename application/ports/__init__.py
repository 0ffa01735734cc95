"""
Repository Interfaces (Ports) for the Workout Roulette API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ExerciseRepository

    class WorkoutGenerator:
        def __init__(self, exercise_repo: ExerciseRepository):
            self._exercise_repo = exercise_repo
"""

# Exercise catalog
from application.ports.exercise_repository import ExerciseId, ExerciseRepository

# Saved workouts
from application.ports.workout_history_repository import WorkoutHistoryRepository

__all__ = [
    # Catalog
    "ExerciseRepository",
    "ExerciseId",
    # History
    "WorkoutHistoryRepository",
]
