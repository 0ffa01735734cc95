"""
SaveWorkout Use Case.

Persists a generated workout plan to the workout history once the user has
run it. Plans are snapshots: the stored record is never updated.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from application.ports import WorkoutHistoryRepository

logger = logging.getLogger(__name__)


@dataclass
class SaveWorkoutResult:
    """Result of the SaveWorkout use case execution."""

    success: bool
    workout: Optional[Dict[str, Any]] = None
    workout_id: Optional[Any] = None
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class SaveWorkoutUseCase:
    """
    Use case for saving workout plans with validation.

    Orchestrates the following workflow:
    1. Validate plan completeness (exercises present, order is 1..N)
    2. Persist via repository
    3. Return the stored record with its generated ID

    Usage:
        >>> use_case = SaveWorkoutUseCase(history_repo=history_repo)
        >>> result = use_case.execute(plan.model_dump(mode="json"))
        >>> if result.success:
        ...     print(f"Saved workout: {result.workout_id}")
    """

    def __init__(
        self,
        history_repo: WorkoutHistoryRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            history_repo: Repository for persisting workout plans
        """
        self._history_repo = history_repo

    def execute(self, plan_data: Dict[str, Any]) -> SaveWorkoutResult:
        """
        Execute the save workout workflow.

        Args:
            plan_data: Serialized workout plan (exercises plus summary fields)

        Returns:
            SaveWorkoutResult with success status and stored record
        """
        try:
            validation_errors = self._validate_plan(plan_data)
            if validation_errors:
                logger.warning(f"Workout validation failed: {validation_errors}")
                return SaveWorkoutResult(
                    success=False,
                    error="Workout validation failed",
                    validation_errors=validation_errors,
                )

            exercises = plan_data.get("exercises") or []
            logger.info(
                f"Saving workout: {len(exercises)} exercises, "
                f"{plan_data.get('total_time_seconds')}s"
            )

            saved = self._history_repo.save(plan_data)
            if not saved:
                logger.error("Repository save returned None")
                return SaveWorkoutResult(
                    success=False,
                    error="Failed to save workout",
                )

            saved_id = saved.get("id")
            logger.info(f"Workout saved successfully: {saved_id}")
            return SaveWorkoutResult(
                success=True,
                workout=saved,
                workout_id=saved_id,
            )

        except Exception as e:
            logger.exception(f"SaveWorkout use case failed: {e}")
            return SaveWorkoutResult(
                success=False,
                error=str(e),
            )

    def _validate_plan(self, plan_data: Dict[str, Any]) -> List[str]:
        """
        Validate workout plan business rules.

        Args:
            plan_data: Serialized workout plan

        Returns:
            List of validation error messages (empty if valid)
        """
        errors: List[str] = []

        exercises = plan_data.get("exercises")
        if not isinstance(exercises, list) or not exercises:
            errors.append("Workout must contain at least one exercise")
            return errors

        for ex in exercises:
            if not str(ex.get("name") or "").strip():
                errors.append("All exercises must have a name")
                break

        orders = [ex.get("order") for ex in exercises]
        if orders != list(range(1, len(exercises) + 1)):
            errors.append("Exercise order must be contiguous starting at 1")

        count = plan_data.get("exercise_count")
        if count is not None and count != len(exercises):
            errors.append(
                f"exercise_count is {count} but plan has {len(exercises)} exercises"
            )

        total = plan_data.get("total_time_seconds")
        if total is not None and total < 0:
            errors.append("total_time_seconds must not be negative")

        return errors
