"""
Supabase implementation of ExerciseRepository.

This module provides the concrete Supabase implementation for the shared
exercise catalog (the `exercises` table read by the mobile app and managed
by the admin panel).
"""
import logging
from typing import Any, Dict, List, Optional, Union

from supabase import Client

from domain.models.catalog import NO_EQUIPMENT
from infrastructure.db.sample_exercises import SAMPLE_EXERCISES

logger = logging.getLogger(__name__)

EXERCISE_DEFAULTS: Dict[str, Any] = {
    "category": "general",
    "description": "",
    "equipment": NO_EQUIPMENT,
    "duration_seconds": 30,
}

# Columns that may be written through create()/update()
WRITABLE_FIELDS = ("name", "category", "description", "equipment", "duration_seconds")


class SupabaseExerciseRepository:
    """
    Supabase implementation of ExerciseRepository protocol.

    Database errors are logged and re-raised: the generator and the API
    must not mistake an outage for an empty catalog.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_exercises(
        self,
        equipment: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List exercises ordered by name, with optional exact-match filters.

        Args:
            equipment: Equipment tag to match
            category: Category to match

        Returns:
            List of exercise dictionaries
        """
        try:
            query = self._client.table("exercises").select("*")
            if equipment:
                query = query.eq("equipment", equipment)
            if category:
                query = query.eq("category", category)
            result = query.order("name").execute()
            return result.data or []
        except Exception:
            logger.exception(
                f"Error listing exercises (equipment={equipment}, category={category})"
            )
            raise

    def get_by_id(self, exercise_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        """
        Get an exercise by id.

        Args:
            exercise_id: Catalog identifier

        Returns:
            Exercise dictionary or None if not found
        """
        try:
            result = (
                self._client.table("exercises")
                .select("*")
                .eq("id", exercise_id)
                .execute()
            )
            if result.data and len(result.data) > 0:
                return result.data[0]
            return None
        except Exception:
            logger.exception(f"Error fetching exercise by id {exercise_id}")
            raise

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert an exercise, filling missing optional fields with defaults.

        Args:
            data: Exercise fields (name is required)

        Returns:
            The stored record
        """
        record = {**EXERCISE_DEFAULTS}
        record.update(
            {k: v for k, v in data.items() if k in WRITABLE_FIELDS and v is not None}
        )
        try:
            result = self._client.table("exercises").insert(record).execute()
            if result.data and len(result.data) > 0:
                logger.info(f"Created exercise {result.data[0].get('id')}: {record['name']}")
                return result.data[0]
            raise RuntimeError(f"Insert returned no data for exercise {record['name']}")
        except Exception:
            logger.exception(f"Error creating exercise {data.get('name')}")
            raise

    def update(
        self,
        exercise_id: Union[int, str],
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Update an exercise.

        Args:
            exercise_id: Catalog identifier
            data: Fields to overwrite

        Returns:
            Updated record, or None if not found
        """
        changes = {
            k: v for k, v in data.items() if k in WRITABLE_FIELDS and v is not None
        }
        if not changes:
            return self.get_by_id(exercise_id)
        try:
            result = (
                self._client.table("exercises")
                .update(changes)
                .eq("id", exercise_id)
                .execute()
            )
            if result.data and len(result.data) > 0:
                return result.data[0]
            return None
        except Exception:
            logger.exception(f"Error updating exercise {exercise_id}")
            raise

    def delete(self, exercise_id: Union[int, str]) -> bool:
        """
        Delete an exercise.

        Returns:
            True if a row was deleted
        """
        try:
            result = (
                self._client.table("exercises")
                .delete()
                .eq("id", exercise_id)
                .execute()
            )
            return bool(result.data)
        except Exception:
            logger.exception(f"Error deleting exercise {exercise_id}")
            raise

    def list_categories(self) -> List[str]:
        """Distinct categories, sorted."""
        try:
            result = self._client.table("exercises").select("category").execute()
        except Exception:
            logger.exception("Error listing exercise categories")
            raise
        return sorted({row["category"] for row in result.data or [] if row.get("category")})

    def list_equipment_options(self) -> List[str]:
        """Distinct equipment tags, sorted, with "none" first."""
        try:
            result = self._client.table("exercises").select("equipment").execute()
        except Exception:
            logger.exception("Error listing equipment options")
            raise
        tags = {row["equipment"] for row in result.data or [] if row.get("equipment")}
        tags.discard(NO_EQUIPMENT)
        return [NO_EQUIPMENT] + sorted(tags)

    def reset(self) -> int:
        """
        Delete every exercise and re-insert the sample catalog.

        Returns:
            Number of exercises inserted
        """
        try:
            self._client.table("exercises").delete().not_.is_("id", "null").execute()
            result = (
                self._client.table("exercises")
                .insert([dict(ex) for ex in SAMPLE_EXERCISES])
                .execute()
            )
        except Exception:
            logger.exception("Error resetting exercise catalog")
            raise
        count = len(result.data or [])
        logger.info(f"Exercise catalog reset with {count} sample exercises")
        return count
