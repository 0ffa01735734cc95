"""
Catalog exercise value object.

Exercise records are stored in the catalog (local or Supabase) and are
read-only input to workout generation. Repositories exchange them as plain
dictionaries; this model is used where a validated shape is needed
(API responses, workout plan entries).
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


# Equipment tag meaning "body-weight only"
NO_EQUIPMENT = "none"


class ExerciseCategory(str, Enum):
    """Known catalog categories."""

    WARMUP = "warmup"
    CORE = "core"
    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    BALANCE = "balance"
    GENERAL = "general"


# Categories merged into one bucket for sequencing purposes
STRENGTH_CARDIO_CATEGORIES = frozenset(
    {ExerciseCategory.STRENGTH.value, ExerciseCategory.CARDIO.value}
)


class CatalogExercise(BaseModel):
    """
    A single exercise record from the catalog.

    Category is kept as a free string: older catalogs carry buckets
    (e.g. "general") that are not part of the sequencing policy.

    Examples:
        >>> exercise = CatalogExercise(
        ...     id=7, name="Push-ups", category="strength", equipment="none"
        ... )
        >>> exercise.requires_equipment
        False
    """

    id: Union[int, str] = Field(..., description="Unique catalog identifier")
    name: str = Field(..., min_length=1, description="Exercise name")
    category: str = Field(..., min_length=1, description="Catalog category")
    description: Optional[str] = Field(default="", description="Free-text instructions")
    equipment: str = Field(
        default=NO_EQUIPMENT,
        description="Single equipment tag, 'none' for body-weight",
    )
    duration_seconds: Optional[int] = Field(
        default=None,
        ge=1,
        description="Advisory catalog duration (overridden by the generator)",
    )

    @property
    def requires_equipment(self) -> bool:
        """True when the exercise needs something other than body weight."""
        return self.equipment != NO_EQUIPMENT

    model_config = {
        "extra": "allow",
        "json_schema_extra": {
            "examples": [
                {
                    "id": 9,
                    "name": "Dumbbell Curls",
                    "category": "strength",
                    "description": "Bicep curls with weights",
                    "equipment": "dumbbells",
                    "duration_seconds": 30,
                },
            ]
        },
    }
