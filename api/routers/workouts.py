"""
Workouts router.

This router provides endpoints for:
- Generating randomized, time-bounded workout plans
- Saving completed plans to the workout history
- Listing and fetching saved workouts
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel, Field, model_validator

from api.deps import (
    get_save_workout_use_case,
    get_settings,
    get_workout_generator,
    get_workout_history_repo,
)
from application.exceptions import (
    InsufficientTimeError,
    WorkoutGenerationError,
    WorkoutNotFoundError,
)
from application.ports import WorkoutHistoryRepository
from application.use_cases import SaveWorkoutUseCase
from backend.core.workout_generator import WorkoutGenerator
from backend.settings import Settings
from domain.models import WorkoutPlan

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class GenerateWorkoutRequest(BaseModel):
    """
    Request model for workout generation.

    The budget is given either in minutes (mobile app) or in seconds;
    seconds win when both are set.
    """
    total_time_minutes: Optional[float] = Field(default=None, gt=0)
    total_time_seconds: Optional[int] = Field(default=None, gt=0)
    equipment: Union[str, List[str], None] = Field(
        default=None,
        description="Available equipment tag(s); omitted means body-weight only",
    )
    rest_time_seconds: int = Field(default=0, ge=0)
    exercise_duration_seconds: Optional[int] = Field(
        default=None,
        gt=0,
        description="Duration of every exercise; defaults to the server setting",
    )
    categories: Optional[List[str]] = Field(
        default=None,
        description="Optional category allow-list",
    )

    @model_validator(mode="after")
    def require_budget(self) -> "GenerateWorkoutRequest":
        if self.total_time_seconds is None and self.total_time_minutes is None:
            raise ValueError("total_time_minutes or total_time_seconds is required")
        if self.budget_seconds < 1:
            raise ValueError("time budget must be at least 1 second")
        return self

    @property
    def budget_seconds(self) -> int:
        if self.total_time_seconds is not None:
            return self.total_time_seconds
        return int(round(self.total_time_minutes * 60))

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "total_time_minutes": 20,
                    "equipment": ["dumbbells"],
                    "rest_time_seconds": 15,
                    "exercise_duration_seconds": 45,
                },
            ]
        },
    }


class SaveWorkoutRequest(BaseModel):
    """Request model for saving a generated plan to the history."""
    exercises: List[Dict[str, Any]] = Field(default_factory=list)
    total_time_seconds: int = Field(..., ge=0)
    total_time_minutes: Optional[int] = None
    exercise_count: Optional[int] = None
    rest_time_seconds: int = Field(default=0, ge=0)
    total_rest_seconds: Optional[int] = None
    exercise_duration_seconds: Optional[int] = None
    equipment: List[str] = Field(default_factory=list)
    generated_at: Optional[datetime] = None


class SaveWorkoutResponse(BaseModel):
    """Response model for a saved workout."""
    success: bool
    workout_id: Any
    message: str = "Workout saved successfully"


# =============================================================================
# Generation Endpoint
# =============================================================================


@router.post("/generate", response_model=WorkoutPlan)
async def generate_workout(
    request: GenerateWorkoutRequest,
    settings: Settings = Depends(get_settings),
    generator: WorkoutGenerator = Depends(get_workout_generator),
) -> WorkoutPlan:
    """
    Generate a randomized workout plan that fits the time budget.

    1. **Warmup**: two distinct warmup exercises open every plan.
    2. **Main block**: a core exercise every fourth slot, strength or cardio
       otherwise; exercises using the selected equipment are favoured.
    3. **Repeat**: once every eligible exercise was used, the main block
       repeats until the budget is spent.

    Raises:
        HTTPException 422: If the catalog or budget cannot produce a plan
        HTTPException 500: If generation fails unexpectedly
    """
    duration = request.exercise_duration_seconds or settings.default_exercise_duration_seconds
    logger.info(
        f"Generate workout request: budget={request.budget_seconds}s, "
        f"equipment={request.equipment}, rest={request.rest_time_seconds}s"
    )

    try:
        return await generator.generate(
            request.budget_seconds,
            equipment=request.equipment,
            rest_time_seconds=request.rest_time_seconds,
            categories=request.categories,
            exercise_duration_seconds=duration,
        )

    except InsufficientTimeError as e:
        logger.warning(f"Workout generation infeasible: {e}")
        raise HTTPException(
            status_code=422,
            detail={"message": e.message, "required_seconds": e.required_seconds},
        )
    except WorkoutGenerationError as e:
        logger.warning(f"Workout generation infeasible: {e}")
        raise HTTPException(status_code=422, detail={"message": e.message})
    except Exception as e:
        logger.exception(f"Unexpected error during workout generation: {e}")
        raise HTTPException(
            status_code=500,
            detail="An unexpected error occurred during workout generation",
        )


# =============================================================================
# History Endpoints
# =============================================================================


@router.post("", response_model=SaveWorkoutResponse, status_code=201)
def save_workout(
    request: SaveWorkoutRequest,
    use_case: SaveWorkoutUseCase = Depends(get_save_workout_use_case),
) -> SaveWorkoutResponse:
    """
    Save a workout plan to the history.

    Delegates validation and persistence to SaveWorkoutUseCase.
    """
    result = use_case.execute(request.model_dump(mode="json", exclude_none=True))

    if not result.success:
        status_code = 400 if result.validation_errors else 500
        raise HTTPException(
            status_code=status_code,
            detail={
                "message": result.error or "Failed to save workout",
                "validation_errors": result.validation_errors,
            },
        )

    return SaveWorkoutResponse(success=True, workout_id=result.workout_id)


@router.get("")
def list_workouts(
    limit: Optional[int] = Query(None, ge=1, le=100, description="Maximum number of workouts"),
    settings: Settings = Depends(get_settings),
    history_repo: WorkoutHistoryRepository = Depends(get_workout_history_repo),
) -> List[Dict[str, Any]]:
    """List saved workouts, newest first."""
    effective_limit = limit or settings.workout_history_limit_default
    try:
        return history_repo.list_recent(limit=effective_limit)
    except Exception as e:
        logger.exception(f"Failed to list workouts: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch workouts")


@router.get("/{workout_id}")
def get_workout(
    workout_id: str = Path(..., description="Saved workout identifier"),
    history_repo: WorkoutHistoryRepository = Depends(get_workout_history_repo),
) -> Dict[str, Any]:
    """Get a saved workout."""
    try:
        workout = history_repo.get(workout_id)
        if workout is None:
            raise WorkoutNotFoundError(workout_id)
        return workout
    except WorkoutNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to fetch workout {workout_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch workout")
