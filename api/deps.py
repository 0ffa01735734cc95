"""
FastAPI Dependency Providers for the Workout Roulette API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with mock implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- In-memory stores are process-wide singletons so data survives requests
- Supabase repositories are created per-request around the cached client

Usage in routers:
    from api.deps import get_exercise_repo
    from application.ports import ExerciseRepository

    @router.get("/exercises")
    def list_exercises(
        exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    ):
        return exercise_repo.list_exercises()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_exercise_repo] = lambda: FakeExerciseRepository()
"""

from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache
from typing import Optional

from fastapi import Depends
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import ExerciseRepository, WorkoutHistoryRepository
from application.use_cases import SaveWorkoutUseCase

# Concrete implementations
from infrastructure import (
    InMemoryExerciseRepository,
    InMemoryWorkoutHistoryRepository,
    SupabaseExerciseRepository,
    SupabaseWorkoutHistoryRepository,
)

from backend.core.workout_generator import WorkoutGenerator
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None unless the Supabase backend is selected and configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.use_supabase:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


# =============================================================================
# Local Stores
# =============================================================================


@lru_cache
def get_memory_exercise_repo() -> InMemoryExerciseRepository:
    """Process-wide local catalog, seeded with the sample exercises."""
    return InMemoryExerciseRepository()


@lru_cache
def get_memory_workout_history_repo() -> InMemoryWorkoutHistoryRepository:
    """Process-wide local workout history."""
    return InMemoryWorkoutHistoryRepository()


@lru_cache
def get_generation_executor() -> ThreadPoolExecutor:
    """Thread pool shared by all generators for synchronous catalog reads."""
    return ThreadPoolExecutor(max_workers=4, thread_name_prefix="workout_gen_")


# =============================================================================
# Repository Providers
# =============================================================================


def get_exercise_repo(
    client: Optional[Client] = Depends(get_supabase_client),
) -> ExerciseRepository:
    """
    Get ExerciseRepository implementation.

    Returns a SupabaseExerciseRepository when Supabase is configured,
    otherwise the local in-memory catalog.
    The return type is the Protocol to enable easy mocking.

    Args:
        client: Supabase client (injected)

    Returns:
        ExerciseRepository: Repository for the exercise catalog
    """
    if client is None:
        return get_memory_exercise_repo()
    return SupabaseExerciseRepository(client)


def get_workout_history_repo(
    client: Optional[Client] = Depends(get_supabase_client),
) -> WorkoutHistoryRepository:
    """
    Get WorkoutHistoryRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        WorkoutHistoryRepository: Repository for saved workouts
    """
    if client is None:
        return get_memory_workout_history_repo()
    return SupabaseWorkoutHistoryRepository(client)


# =============================================================================
# Service / Use Case Providers
# =============================================================================


def get_workout_generator(
    settings: Settings = Depends(get_settings),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> WorkoutGenerator:
    """
    Create a WorkoutGenerator over the configured catalog.

    Args:
        settings: Application settings
        exercise_repo: Exercise catalog (injected)

    Returns:
        Configured WorkoutGenerator instance
    """
    return WorkoutGenerator(
        exercise_repo,
        equipment_weight=settings.equipment_weight,
        max_attempts=settings.max_generation_attempts,
        executor=get_generation_executor(),
    )


def get_save_workout_use_case(
    history_repo: WorkoutHistoryRepository = Depends(get_workout_history_repo),
) -> SaveWorkoutUseCase:
    """
    Get SaveWorkoutUseCase with injected dependencies.

    Args:
        history_repo: Workout history repository (injected)

    Returns:
        SaveWorkoutUseCase: Use case for saving workout plans
    """
    return SaveWorkoutUseCase(history_repo=history_repo)
