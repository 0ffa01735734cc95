"""
Exercise Repository Interface (Port).

This module defines the abstract interface for the exercise catalog.
Implementations may use a local in-memory store, Supabase, or other backends.
"""
from typing import Any, Dict, List, Optional, Protocol, Union

ExerciseId = Union[int, str]


class ExerciseRepository(Protocol):
    """
    Abstract interface for the exercise catalog.

    The workout generator only depends on list_exercises(). The remaining
    methods back the catalog management endpoints used by the admin panel.

    Records are plain dictionaries with at least id, name, category,
    description and equipment keys.
    """

    def list_exercises(
        self,
        equipment: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List catalog entries, ordered by name.

        Filters are exact matches. Without filters every entry is returned.
        The generator builds its "none OR requested" union by issuing one
        call per equipment tag, so implementations must not widen the
        equipment filter.

        Args:
            equipment: Only entries whose equipment tag equals this value
            category: Only entries in this category

        Returns:
            List of exercise dictionaries
        """
        ...

    def get_by_id(self, exercise_id: ExerciseId) -> Optional[Dict[str, Any]]:
        """
        Get a single catalog entry.

        Args:
            exercise_id: Catalog identifier

        Returns:
            Exercise dictionary, or None if not found
        """
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a catalog entry.

        Missing optional fields default to category "general", empty
        description, equipment "none" and a 30 second duration.

        Args:
            data: Exercise fields (name is required)

        Returns:
            The stored record including its generated id
        """
        ...

    def update(
        self,
        exercise_id: ExerciseId,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Update a catalog entry.

        Args:
            exercise_id: Catalog identifier
            data: Fields to overwrite

        Returns:
            Updated record, or None if not found
        """
        ...

    def delete(self, exercise_id: ExerciseId) -> bool:
        """
        Delete a catalog entry.

        Args:
            exercise_id: Catalog identifier

        Returns:
            True if an entry was deleted
        """
        ...

    def list_categories(self) -> List[str]:
        """Distinct categories present in the catalog, sorted."""
        ...

    def list_equipment_options(self) -> List[str]:
        """
        Distinct equipment tags present in the catalog.

        Returns:
            Sorted tags with "none" always first, even when unused
        """
        ...

    def reset(self) -> int:
        """
        Delete every entry and re-insert the sample catalog.

        Returns:
            Number of entries after the reset
        """
        ...
