"""
API package for the Workout Roulette API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_exercise_repo,
    get_workout_history_repo,
    get_workout_generator,
    get_save_workout_use_case,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    # Repositories
    "get_exercise_repo",
    "get_workout_history_repo",
    # Services / use cases
    "get_workout_generator",
    "get_save_workout_use_case",
]
