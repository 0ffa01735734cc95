"""
Workout History Repository Interface (Port).

This module defines the abstract interface for persisting generated plans
once the user has run them.
"""
from typing import Any, Dict, List, Optional, Protocol, Union


class WorkoutHistoryRepository(Protocol):
    """
    Abstract interface for saved workouts.

    Saved workouts are snapshots of a WorkoutPlan; they are never updated.
    """

    def save(self, workout_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Persist a workout plan snapshot.

        Args:
            workout_data: Serialized WorkoutPlan fields

        Returns:
            Stored record with id and created_at
        """
        ...

    def get(self, workout_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        """
        Get a saved workout.

        Args:
            workout_id: History record identifier

        Returns:
            Stored record, or None if not found
        """
        ...

    def list_recent(self, limit: int = 10) -> List[Dict[str, Any]]:
        """
        List saved workouts, newest first.

        Args:
            limit: Maximum number of records to return

        Returns:
            List of stored records
        """
        ...
