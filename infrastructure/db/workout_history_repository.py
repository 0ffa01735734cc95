"""
Supabase implementation of WorkoutHistoryRepository.

This module provides the concrete Supabase implementation for saved workout
plans (the `workouts` table).
"""
import logging
from typing import Any, Dict, List, Optional, Union

from supabase import Client

logger = logging.getLogger(__name__)

# Plan fields persisted as columns; `exercises` is a jsonb column
HISTORY_COLUMNS = (
    "exercises",
    "total_time_seconds",
    "total_time_minutes",
    "exercise_count",
    "rest_time_seconds",
    "total_rest_seconds",
    "exercise_duration_seconds",
    "equipment",
    "generated_at",
)


class SupabaseWorkoutHistoryRepository:
    """
    Supabase implementation of WorkoutHistoryRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def save(self, workout_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Insert a workout plan snapshot.

        Args:
            workout_data: Serialized workout plan

        Returns:
            Stored record including id and created_at
        """
        record = {k: workout_data[k] for k in HISTORY_COLUMNS if k in workout_data}
        try:
            result = self._client.table("workouts").insert(record).execute()
        except Exception:
            logger.exception("Error saving workout")
            raise
        if result.data and len(result.data) > 0:
            logger.info(f"Saved workout {result.data[0].get('id')}")
            return result.data[0]
        return None

    def get(self, workout_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        """
        Get a saved workout by id.

        Returns:
            Stored record, or None if not found
        """
        try:
            result = (
                self._client.table("workouts")
                .select("*")
                .eq("id", workout_id)
                .execute()
            )
        except Exception:
            logger.exception(f"Error fetching workout {workout_id}")
            raise
        if result.data and len(result.data) > 0:
            return result.data[0]
        return None

    def list_recent(self, limit: int = 10) -> List[Dict[str, Any]]:
        """
        List saved workouts, newest first.

        Args:
            limit: Maximum number of records to return

        Returns:
            List of stored records
        """
        try:
            result = (
                self._client.table("workouts")
                .select("*")
                .order("created_at", desc=True)
                .limit(limit)
                .execute()
            )
        except Exception:
            logger.exception("Error listing workouts")
            raise
        return result.data or []
