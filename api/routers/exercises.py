"""
Exercises router for the shared exercise catalog.

This router provides endpoints for:
- Listing and filtering catalog entries
- Creating, updating and deleting entries (admin panel)
- Catalog metadata (categories, equipment options)
- Resetting the catalog to the sample exercises
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel, Field, field_validator

from api.deps import get_exercise_repo
from application.exceptions import ExerciseNotFoundError
from application.ports import ExerciseRepository
from domain.models import NO_EQUIPMENT, CatalogExercise

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class ExerciseCreate(BaseModel):
    """Request model for creating a catalog entry."""
    name: str = Field(..., min_length=1, description="Exercise name")
    category: str = Field(default="general", min_length=1)
    description: Optional[str] = Field(default="")
    equipment: str = Field(default=NO_EQUIPMENT, min_length=1)
    duration_seconds: int = Field(default=30, ge=1)


class ExerciseUpdate(BaseModel):
    """Request model for updating a catalog entry; unset fields are kept."""
    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    equipment: Optional[str] = Field(default=None, min_length=1)
    duration_seconds: Optional[int] = Field(default=None, ge=1)

    @field_validator("name", "category", "equipment", "duration_seconds")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Omit a field to keep it; null is not a valid value."""
        if v is None:
            raise ValueError("must not be null")
        return v


class DeleteResponse(BaseModel):
    """Response model for a deleted entry."""
    success: bool
    exercise_id: str


class ResetResponse(BaseModel):
    """Response model for a catalog reset."""
    success: bool
    count: int


def _get_or_raise(repo: ExerciseRepository, exercise_id: str) -> Dict[str, Any]:
    exercise = repo.get_by_id(exercise_id)
    if exercise is None:
        raise ExerciseNotFoundError(exercise_id)
    return exercise


# =============================================================================
# Metadata Endpoints
# =============================================================================


@router.get("/meta/categories", response_model=List[str])
def list_categories(
    repo: ExerciseRepository = Depends(get_exercise_repo),
) -> List[str]:
    """Distinct categories present in the catalog."""
    try:
        return repo.list_categories()
    except Exception as e:
        logger.exception(f"Failed to list categories: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch categories")


@router.get("/meta/equipment", response_model=List[str])
def list_equipment_options(
    repo: ExerciseRepository = Depends(get_exercise_repo),
) -> List[str]:
    """Equipment tags offered to the user; "none" is always first."""
    try:
        return repo.list_equipment_options()
    except Exception as e:
        logger.exception(f"Failed to list equipment options: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch equipment options")


@router.post("/reset", response_model=ResetResponse)
def reset_catalog(
    repo: ExerciseRepository = Depends(get_exercise_repo),
) -> ResetResponse:
    """
    Delete every exercise and re-insert the sample catalog.

    Used by the admin panel and by test setups to get a known catalog.
    """
    try:
        count = repo.reset()
    except Exception as e:
        logger.exception(f"Failed to reset exercise catalog: {e}")
        raise HTTPException(status_code=500, detail="Failed to reset exercise catalog")
    logger.info(f"Exercise catalog reset via API ({count} exercises)")
    return ResetResponse(success=True, count=count)


# =============================================================================
# CRUD Endpoints
# =============================================================================


@router.get("", response_model=List[CatalogExercise])
def list_exercises(
    category: Optional[str] = Query(default=None, description="Filter by category"),
    equipment: Optional[str] = Query(default=None, description="Filter by equipment tag"),
    repo: ExerciseRepository = Depends(get_exercise_repo),
) -> List[Dict[str, Any]]:
    """List catalog entries ordered by name."""
    try:
        return repo.list_exercises(equipment=equipment, category=category)
    except Exception as e:
        logger.exception(f"Failed to list exercises: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch exercises")


@router.get("/{exercise_id}", response_model=CatalogExercise)
def get_exercise(
    exercise_id: str = Path(..., description="Catalog identifier"),
    repo: ExerciseRepository = Depends(get_exercise_repo),
) -> Dict[str, Any]:
    """Get a single catalog entry."""
    try:
        return _get_or_raise(repo, exercise_id)
    except ExerciseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to fetch exercise {exercise_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch exercise")


@router.post("", response_model=CatalogExercise, status_code=201)
def create_exercise(
    request: ExerciseCreate,
    repo: ExerciseRepository = Depends(get_exercise_repo),
) -> Dict[str, Any]:
    """Create a catalog entry."""
    try:
        return repo.create(request.model_dump())
    except Exception as e:
        logger.exception(f"Failed to create exercise {request.name}: {e}")
        raise HTTPException(status_code=500, detail="Failed to create exercise")


@router.put("/{exercise_id}", response_model=CatalogExercise)
def update_exercise(
    request: ExerciseUpdate,
    exercise_id: str = Path(..., description="Catalog identifier"),
    repo: ExerciseRepository = Depends(get_exercise_repo),
) -> Dict[str, Any]:
    """Update a catalog entry."""
    try:
        updated = repo.update(exercise_id, request.model_dump(exclude_unset=True))
        if updated is None:
            raise ExerciseNotFoundError(exercise_id)
        return updated
    except ExerciseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to update exercise {exercise_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update exercise")


@router.delete("/{exercise_id}", response_model=DeleteResponse)
def delete_exercise(
    exercise_id: str = Path(..., description="Catalog identifier"),
    repo: ExerciseRepository = Depends(get_exercise_repo),
) -> DeleteResponse:
    """Delete a catalog entry."""
    try:
        if not repo.delete(exercise_id):
            raise ExerciseNotFoundError(exercise_id)
    except ExerciseNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to delete exercise {exercise_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete exercise")
    return DeleteResponse(success=True, exercise_id=exercise_id)
