"""
Unit tests for api/deps.py dependency providers.

These tests verify that the dependency providers are properly wired and
return the correct types. Uses mocks for external dependencies.
"""

import pytest
from unittest.mock import Mock, patch, MagicMock

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit


# =============================================================================
# Settings Provider Tests
# =============================================================================


class TestSettingsProvider:
    """Test get_settings provider."""

    def test_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        from api.deps import get_settings
        from backend.settings import Settings

        assert isinstance(get_settings(), Settings)

    def test_is_cached(self):
        """get_settings should return the same cached instance."""
        from api.deps import get_settings

        assert get_settings() is get_settings()


# =============================================================================
# Supabase Client Provider Tests
# =============================================================================


class TestSupabaseClientProvider:
    """Test get_supabase_client provider."""

    def test_returns_none_for_memory_backend(self):
        """get_supabase_client should return None unless Supabase is selected."""
        from api.deps import get_supabase_client

        get_supabase_client.cache_clear()

        with patch("api.deps._get_settings") as mock_settings:
            mock_settings.return_value = Mock(use_supabase=False)
            with patch("api.deps.create_client") as mock_create:
                assert get_supabase_client() is None
                mock_create.assert_not_called()

        get_supabase_client.cache_clear()

    def test_creates_client_when_configured(self):
        """get_supabase_client should create client when Supabase is selected."""
        from api.deps import get_supabase_client

        get_supabase_client.cache_clear()

        with patch("api.deps._get_settings") as mock_settings:
            mock_settings.return_value = Mock(
                use_supabase=True,
                supabase_url="https://test.supabase.co",
                supabase_key="test-key",
            )
            with patch("api.deps.create_client") as mock_create:
                mock_create.return_value = Mock()
                assert get_supabase_client() is not None
                mock_create.assert_called_once_with(
                    "https://test.supabase.co", "test-key"
                )

        get_supabase_client.cache_clear()


# =============================================================================
# Repository Provider Tests
# =============================================================================


class TestRepositoryProviders:
    """Test repository providers pick the backend from the client."""

    def test_exercise_repo_falls_back_to_memory(self):
        from api.deps import get_exercise_repo, get_memory_exercise_repo

        assert get_exercise_repo(client=None) is get_memory_exercise_repo()

    def test_exercise_repo_uses_supabase_client(self):
        from api.deps import get_exercise_repo
        from infrastructure.db import SupabaseExerciseRepository

        repo = get_exercise_repo(client=MagicMock())

        assert isinstance(repo, SupabaseExerciseRepository)

    def test_history_repo_falls_back_to_memory(self):
        from api.deps import get_memory_workout_history_repo, get_workout_history_repo

        assert get_workout_history_repo(client=None) is get_memory_workout_history_repo()

    def test_history_repo_uses_supabase_client(self):
        from api.deps import get_workout_history_repo
        from infrastructure.db import SupabaseWorkoutHistoryRepository

        repo = get_workout_history_repo(client=MagicMock())

        assert isinstance(repo, SupabaseWorkoutHistoryRepository)


# =============================================================================
# Service Provider Tests
# =============================================================================


class TestServiceProviders:
    """Test generator and use case providers."""

    def test_workout_generator_uses_settings(self):
        from api.deps import get_workout_generator
        from backend.core.workout_generator import WorkoutGenerator
        from backend.settings import Settings
        from tests.fakes import FakeExerciseRepository

        settings = Settings(environment="test", equipment_weight=3, _env_file=None)

        generator = get_workout_generator(settings, FakeExerciseRepository())

        assert isinstance(generator, WorkoutGenerator)
        assert generator._equipment_weight == 3

    def test_save_workout_use_case(self):
        from api.deps import get_save_workout_use_case
        from application.use_cases import SaveWorkoutUseCase
        from tests.fakes import FakeWorkoutHistoryRepository

        use_case = get_save_workout_use_case(FakeWorkoutHistoryRepository())

        assert isinstance(use_case, SaveWorkoutUseCase)
