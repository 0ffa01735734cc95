"""
Generation parameters for a single workout generation call.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.catalog import NO_EQUIPMENT


DEFAULT_EXERCISE_DURATION_SECONDS = 60


def _unique(values: List[str]) -> List[str]:
    """Strip, drop blanks and remove duplicates while preserving order."""
    seen = set()
    unique = []
    for value in values:
        value = value.strip()
        if value and value not in seen:
            seen.add(value)
            unique.append(value)
    return unique


class GenerationParameters(BaseModel):
    """
    Validated inputs of the workout generator.

    Examples:
        >>> params = GenerationParameters(total_time_seconds=600, equipment="dumbbells")
        >>> params.equipment
        ['dumbbells']
        >>> params.requested_equipment
        ['dumbbells']
    """

    total_time_seconds: int = Field(
        ..., gt=0, description="Target workout duration; never exceeded"
    )
    equipment: List[str] = Field(
        default_factory=list,
        description="Available equipment tags; empty or ['none'] means body-weight only",
    )
    rest_time_seconds: int = Field(
        default=0, ge=0, description="Rest inserted between consecutive exercises"
    )
    exercise_duration_seconds: int = Field(
        default=DEFAULT_EXERCISE_DURATION_SECONDS,
        gt=0,
        description="Duration used for every selected exercise",
    )
    categories: Optional[List[str]] = Field(
        default=None,
        description="Optional category allow-list applied to the fetched catalog",
    )

    @field_validator("equipment", mode="before")
    @classmethod
    def normalize_equipment(cls, v: Any) -> List[str]:
        """Accept a single tag or a list of tags."""
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return _unique([str(item) for item in v])

    @field_validator("categories", mode="before")
    @classmethod
    def normalize_categories(cls, v: Any) -> Optional[List[str]]:
        """An empty allow-list means no restriction."""
        if v is None:
            return None
        if isinstance(v, str):
            v = [v]
        categories = _unique([str(item) for item in v])
        return categories or None

    @property
    def requested_equipment(self) -> List[str]:
        """Real equipment tags, without 'none'."""
        return [tag for tag in self.equipment if tag != NO_EQUIPMENT]

    @property
    def has_equipment(self) -> bool:
        return bool(self.requested_equipment)
