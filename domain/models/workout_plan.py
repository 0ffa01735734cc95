"""
Workout plan aggregate produced by the workout generator.

A plan is created once per generation call and is immutable afterwards.
The client only tracks a cursor into `exercises` while running it.
"""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, model_validator

from domain.models.catalog import CatalogExercise


class WorkoutExerciseEntry(CatalogExercise):
    """A catalog exercise placed at a position in the plan."""

    duration_seconds: int = Field(..., ge=1, description="Resolved duration")
    order: int = Field(..., ge=1, description="1-based position in the plan")

    model_config = {
        "extra": "allow",
        "frozen": True,
    }


class WorkoutPlan(BaseModel):
    """
    Ordered, time-bounded sequence of exercises plus summary fields.

    `total_time_seconds` covers exercises and the rests between them; a rest
    after the last exercise is never counted.
    """

    exercises: List[WorkoutExerciseEntry] = Field(
        default_factory=list, description="Exercises in execution order"
    )
    total_time_seconds: int = Field(..., ge=0)
    total_time_minutes: int = Field(..., ge=0)
    exercise_count: int = Field(..., ge=0)
    rest_time_seconds: int = Field(default=0, ge=0, description="Requested rest")
    total_rest_seconds: int = Field(default=0, ge=0, description="Rest used")
    exercise_duration_seconds: int = Field(..., ge=1)
    equipment: List[str] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def validate_order(self) -> "WorkoutPlan":
        """Orders must be exactly 1..N and match the exercise count."""
        orders = [entry.order for entry in self.exercises]
        if orders != list(range(1, len(orders) + 1)):
            raise ValueError("Exercise order must be contiguous starting at 1")
        if self.exercise_count != len(self.exercises):
            raise ValueError("exercise_count does not match the number of exercises")
        return self

    @property
    def exercise_ids(self) -> List:
        """Exercise ids in plan order (repeats included)."""
        return [entry.id for entry in self.exercises]

    def __str__(self) -> str:
        return (
            f"WorkoutPlan({self.exercise_count} exercises, "
            f"{self.total_time_seconds}s, rest={self.rest_time_seconds}s)"
        )

    model_config = {
        "frozen": True,
    }
