"""
Application Use Cases for the Workout Roulette API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability

Usage:
    from application.use_cases import SaveWorkoutUseCase

    save_use_case = SaveWorkoutUseCase(history_repo=history_repo)
    result = save_use_case.execute(plan.model_dump(mode="json"))
"""

from application.use_cases.save_workout import (
    SaveWorkoutResult,
    SaveWorkoutUseCase,
)

__all__ = [
    "SaveWorkoutUseCase",
    "SaveWorkoutResult",
]
