"""
Unit tests for SaveWorkoutUseCase.

Tests for:
- SaveWorkoutUseCase with fake history repository
- Validation error cases
- Repository failures
"""

from unittest.mock import MagicMock

import pytest

from application.use_cases import SaveWorkoutResult, SaveWorkoutUseCase
from tests.fakes import FakeWorkoutHistoryRepository


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def history_repo() -> FakeWorkoutHistoryRepository:
    """Create a fresh fake history repository."""
    return FakeWorkoutHistoryRepository()


@pytest.fixture
def use_case(history_repo: FakeWorkoutHistoryRepository) -> SaveWorkoutUseCase:
    """Create SaveWorkoutUseCase with fake dependencies."""
    return SaveWorkoutUseCase(history_repo=history_repo)


@pytest.fixture
def valid_plan():
    """Serialized plan with two warmups and one core exercise."""
    return {
        "exercises": [
            {"id": 1, "name": "Arm Circles", "category": "warmup", "equipment": "none", "duration_seconds": 60, "order": 1},
            {"id": 2, "name": "Hip Circles", "category": "warmup", "equipment": "none", "duration_seconds": 60, "order": 2},
            {"id": 3, "name": "Crunches", "category": "core", "equipment": "none", "duration_seconds": 60, "order": 3},
        ],
        "total_time_seconds": 180,
        "total_time_minutes": 3,
        "exercise_count": 3,
        "rest_time_seconds": 0,
        "exercise_duration_seconds": 60,
        "equipment": [],
    }


# =============================================================================
# Save Path Tests
# =============================================================================


@pytest.mark.unit
class TestSaveWorkout:

    def test_valid_plan_is_saved(self, use_case, history_repo, valid_plan):
        result = use_case.execute(valid_plan)

        assert isinstance(result, SaveWorkoutResult)
        assert result.success is True
        assert result.workout_id == 1
        assert result.workout["exercise_count"] == 3
        assert len(history_repo.workouts) == 1

    def test_repository_returning_none_fails(self, use_case, history_repo, valid_plan):
        history_repo.save_returns_none = True

        result = use_case.execute(valid_plan)

        assert result.success is False
        assert result.error == "Failed to save workout"

    def test_repository_error_is_reported(self, valid_plan):
        repo = MagicMock()
        repo.save.side_effect = RuntimeError("connection reset")

        result = SaveWorkoutUseCase(history_repo=repo).execute(valid_plan)

        assert result.success is False
        assert "connection reset" in result.error


# =============================================================================
# Validation Tests
# =============================================================================


@pytest.mark.unit
class TestSaveWorkoutValidation:

    def test_empty_plan_rejected(self, use_case, history_repo):
        result = use_case.execute({"exercises": [], "total_time_seconds": 0})

        assert result.success is False
        assert "Workout must contain at least one exercise" in result.validation_errors
        assert history_repo.workouts == []

    def test_broken_order_rejected(self, use_case, valid_plan):
        valid_plan["exercises"][2]["order"] = 5

        result = use_case.execute(valid_plan)

        assert result.success is False
        assert any("order" in e for e in result.validation_errors)

    def test_count_mismatch_rejected(self, use_case, valid_plan):
        valid_plan["exercise_count"] = 4

        result = use_case.execute(valid_plan)

        assert result.success is False
        assert any("exercise_count" in e for e in result.validation_errors)

    def test_unnamed_exercise_rejected(self, use_case, valid_plan):
        valid_plan["exercises"][0]["name"] = "  "

        result = use_case.execute(valid_plan)

        assert result.success is False
        assert "All exercises must have a name" in result.validation_errors

    def test_validation_failure_reports_all_errors(self, use_case, history_repo, valid_plan):
        valid_plan["exercises"][2]["order"] = 5
        valid_plan["exercise_count"] = 4
        valid_plan["total_time_seconds"] = -1

        result = use_case.execute(valid_plan)

        assert result.error == "Workout validation failed"
        assert len(result.validation_errors) == 3
        assert history_repo.workouts == []
