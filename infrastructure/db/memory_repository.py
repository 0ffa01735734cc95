"""
In-memory repositories.

Local store used when no Supabase project is configured: the catalog is
seeded with the sample exercises at construction and workout history lives
for the lifetime of the process.
"""
import copy
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Union

from domain.models.catalog import NO_EQUIPMENT
from infrastructure.db.exercises_repository import EXERCISE_DEFAULTS, WRITABLE_FIELDS
from infrastructure.db.sample_exercises import SAMPLE_EXERCISES

logger = logging.getLogger(__name__)


def _coerce_id(value: Union[int, str]) -> Optional[int]:
    """Path parameters arrive as strings; stored ids are integers."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class InMemoryExerciseRepository:
    """
    In-memory implementation of ExerciseRepository.

    Thread-safe: the generator reads from worker threads while the catalog
    endpoints write from the request handlers.
    """

    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None):
        """
        Initialize the store.

        Args:
            seed: Exercises to load; defaults to the sample catalog
        """
        self._lock = threading.Lock()
        self._exercises: Dict[int, Dict[str, Any]] = {}
        self._next_id = 1
        self._seed = list(SAMPLE_EXERCISES if seed is None else seed)
        self._load(self._seed)

    def _load(self, exercises: Iterable[Dict[str, Any]]) -> None:
        for exercise in exercises:
            self._insert(exercise)

    def _insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        record = {**EXERCISE_DEFAULTS}
        record.update(
            {k: v for k, v in data.items() if k in WRITABLE_FIELDS and v is not None}
        )
        record["id"] = self._next_id
        record["created_at"] = record["updated_at"] = _now()
        self._exercises[self._next_id] = record
        self._next_id += 1
        return copy.deepcopy(record)

    def list_exercises(
        self,
        equipment: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        with self._lock:
            rows = [
                copy.deepcopy(ex)
                for ex in self._exercises.values()
                if (not equipment or ex.get("equipment") == equipment)
                and (not category or ex.get("category") == category)
            ]
        return sorted(rows, key=lambda ex: ex["name"])

    def get_by_id(self, exercise_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        key = _coerce_id(exercise_id)
        with self._lock:
            exercise = self._exercises.get(key)
            return copy.deepcopy(exercise) if exercise else None

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            created = self._insert(data)
        logger.info(f"Created exercise {created['id']}: {created['name']}")
        return created

    def update(
        self,
        exercise_id: Union[int, str],
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        key = _coerce_id(exercise_id)
        with self._lock:
            exercise = self._exercises.get(key)
            if exercise is None:
                return None
            exercise.update(
                {k: v for k, v in data.items() if k in WRITABLE_FIELDS and v is not None}
            )
            exercise["updated_at"] = _now()
            return copy.deepcopy(exercise)

    def delete(self, exercise_id: Union[int, str]) -> bool:
        key = _coerce_id(exercise_id)
        with self._lock:
            return self._exercises.pop(key, None) is not None

    def list_categories(self) -> List[str]:
        with self._lock:
            return sorted({ex["category"] for ex in self._exercises.values()})

    def list_equipment_options(self) -> List[str]:
        with self._lock:
            tags = {ex.get("equipment") or NO_EQUIPMENT for ex in self._exercises.values()}
        tags.discard(NO_EQUIPMENT)
        return [NO_EQUIPMENT] + sorted(tags)

    def reset(self) -> int:
        with self._lock:
            self._exercises.clear()
            self._next_id = 1
            self._load(SAMPLE_EXERCISES)
            count = len(self._exercises)
        logger.info(f"Exercise catalog reset with {count} sample exercises")
        return count


class InMemoryWorkoutHistoryRepository:
    """In-memory implementation of WorkoutHistoryRepository."""

    def __init__(self):
        self._lock = threading.Lock()
        self._workouts: List[Dict[str, Any]] = []
        self._next_id = 1

    def save(self, workout_data: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            record = copy.deepcopy(workout_data)
            record["id"] = self._next_id
            record["created_at"] = _now()
            self._workouts.append(record)
            self._next_id += 1
            return copy.deepcopy(record)

    def get(self, workout_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        key = _coerce_id(workout_id)
        with self._lock:
            for workout in self._workouts:
                if workout["id"] == key:
                    return copy.deepcopy(workout)
        return None

    def list_recent(self, limit: int = 10) -> List[Dict[str, Any]]:
        with self._lock:
            # Insertion order is creation order; ids break timestamp ties
            newest_first = sorted(self._workouts, key=lambda w: w["id"], reverse=True)
            return [copy.deepcopy(w) for w in newest_first[:limit]]
