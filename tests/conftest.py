"""
Shared pytest fixtures for the Workout Roulette API tests.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import get_exercise_repo, get_settings, get_workout_history_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import (
    FakeExerciseRepository,
    FakeWorkoutHistoryRepository,
    create_exercise_repo,
)


# ---------------------------------------------------------------------------
# Settings and App
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with the local catalog and no external services."""
    return Settings(environment="test", catalog_backend="memory", _env_file=None)


@pytest.fixture
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def exercise_repo() -> FakeExerciseRepository:
    """Balanced body-weight catalog plus two dumbbell exercises."""
    return create_exercise_repo(
        warmups=3,
        core=3,
        strength=4,
        cardio=2,
        with_equipment={"dumbbells": 2},
    )


@pytest.fixture
def history_repo() -> FakeWorkoutHistoryRepository:
    return FakeWorkoutHistoryRepository()


# ---------------------------------------------------------------------------
# Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client(app, test_settings, exercise_repo, history_repo) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient backed by the fake repositories.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_exercise_repo] = lambda: exercise_repo
    app.dependency_overrides[get_workout_history_repo] = lambda: history_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
