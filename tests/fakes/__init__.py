"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeExerciseRepository, create_exercise_repo

    # Direct instantiation
    repo = FakeExerciseRepository()
    repo.seed([{"id": "w1", "name": "Arm Circles", "category": "warmup", "equipment": "none"}])

    # Factory function with a balanced catalog
    repo = create_exercise_repo(core=3, strength=4, with_equipment={"dumbbells": 2})
"""
from typing import Any, Dict, List, Optional

from tests.fakes.exercise_repository import FakeExerciseRepository
from tests.fakes.workout_history_repository import FakeWorkoutHistoryRepository


def make_exercise(
    exercise_id: Any,
    category: str,
    equipment: str = "none",
    name: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a catalog record."""
    return {
        "id": exercise_id,
        "name": name or f"{category.title()} {exercise_id}",
        "category": category,
        "description": "",
        "equipment": equipment,
        "duration_seconds": 30,
    }


def create_exercise_repo(
    warmups: int = 2,
    core: int = 2,
    strength: int = 2,
    cardio: int = 0,
    with_equipment: Optional[Dict[str, int]] = None,
) -> FakeExerciseRepository:
    """
    Create a fake catalog with body-weight exercises per category.

    Args:
        warmups: Body-weight warmups
        core: Body-weight core exercises
        strength: Body-weight strength exercises
        cardio: Body-weight cardio exercises
        with_equipment: Strength exercises per equipment tag

    Returns:
        Seeded FakeExerciseRepository
    """
    exercises: List[Dict[str, Any]] = []
    for prefix, category, count in (
        ("w", "warmup", warmups),
        ("c", "core", core),
        ("s", "strength", strength),
        ("k", "cardio", cardio),
    ):
        exercises.extend(
            make_exercise(f"{prefix}{i}", category) for i in range(1, count + 1)
        )
    for tag, count in (with_equipment or {}).items():
        exercises.extend(
            make_exercise(f"{tag}-{i}", "strength", equipment=tag)
            for i in range(1, count + 1)
        )
    return FakeExerciseRepository(exercises)


__all__ = [
    "FakeExerciseRepository",
    "FakeWorkoutHistoryRepository",
    "make_exercise",
    "create_exercise_repo",
]
