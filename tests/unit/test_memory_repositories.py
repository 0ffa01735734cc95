"""
Unit tests for the in-memory repositories.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from infrastructure.db import (
    SAMPLE_EXERCISES,
    InMemoryExerciseRepository,
    InMemoryWorkoutHistoryRepository,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def repo() -> InMemoryExerciseRepository:
    return InMemoryExerciseRepository()


class TestInMemoryExerciseRepository:

    def test_seeded_with_sample_catalog(self, repo):
        assert len(repo.list_exercises()) == len(SAMPLE_EXERCISES)

    def test_sample_catalog_can_open_a_workout(self, repo):
        warmups = repo.list_exercises(equipment="none", category="warmup")

        assert len(warmups) >= 2

    def test_list_is_ordered_by_name(self, repo):
        names = [e["name"] for e in repo.list_exercises()]

        assert names == sorted(names)

    def test_equipment_filter_is_exact(self, repo):
        rows = repo.list_exercises(equipment="dumbbells")

        assert rows
        assert {e["equipment"] for e in rows} == {"dumbbells"}

    def test_create_assigns_id_and_defaults(self, repo):
        created = repo.create({"name": "Skater Hops"})

        assert isinstance(created["id"], int)
        assert created["category"] == "general"
        assert created["equipment"] == "none"
        assert created["description"] == ""
        assert created["duration_seconds"] == 30

    def test_get_by_id_accepts_string_ids(self, repo):
        created = repo.create({"name": "Skater Hops", "category": "cardio"})

        assert repo.get_by_id(str(created["id"]))["name"] == "Skater Hops"
        assert repo.get_by_id("not-a-number") is None

    def test_update_and_delete(self, repo):
        created = repo.create({"name": "Skater Hops"})

        updated = repo.update(created["id"], {"category": "cardio"})
        assert updated["category"] == "cardio"
        assert repo.update(10_000, {"category": "cardio"}) is None

        assert repo.delete(created["id"]) is True
        assert repo.delete(created["id"]) is False

    def test_update_ignores_null_values(self, repo):
        created = repo.create({"name": "Skater Hops", "category": "cardio"})

        updated = repo.update(created["id"], {"name": None, "category": "strength"})

        assert updated["name"] == "Skater Hops"
        assert updated["category"] == "strength"
        assert [e["name"] for e in repo.list_exercises()] == sorted(
            e["name"] for e in repo.list_exercises()
        )

    def test_returned_records_are_copies(self, repo):
        row = repo.list_exercises()[0]
        row["name"] = "Changed"

        assert repo.get_by_id(row["id"])["name"] != "Changed"

    def test_equipment_options_start_with_none(self):
        repo = InMemoryExerciseRepository(seed=[
            {"name": "Kettlebell Swings", "category": "strength", "equipment": "kettlebells"},
            {"name": "Dumbbell Curls", "category": "strength", "equipment": "dumbbells"},
        ])

        assert repo.list_equipment_options() == ["none", "dumbbells", "kettlebells"]

    def test_categories_distinct_sorted(self, repo):
        categories = repo.list_categories()

        assert categories == sorted(set(categories))
        assert "warmup" in categories

    def test_reset_restores_sample_catalog(self, repo):
        repo.create({"name": "Skater Hops"})
        for exercise in repo.list_exercises(category="core"):
            repo.delete(exercise["id"])

        count = repo.reset()

        assert count == len(SAMPLE_EXERCISES)
        assert [e["id"] for e in repo.list_exercises()] != []
        assert max(e["id"] for e in repo.list_exercises()) == len(SAMPLE_EXERCISES)

    def test_concurrent_creates_get_unique_ids(self, repo):
        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(pool.map(lambda i: repo.create({"name": f"Ex {i}"}), range(50)))

        assert len({e["id"] for e in created}) == 50


class TestInMemoryWorkoutHistoryRepository:

    def test_save_assigns_id_and_timestamp(self):
        repo = InMemoryWorkoutHistoryRepository()

        saved = repo.save({"exercises": [], "total_time_seconds": 120})

        assert saved["id"] == 1
        assert "created_at" in saved
        assert repo.get(1)["total_time_seconds"] == 120
        assert repo.get("1") is not None
        assert repo.get(2) is None

    def test_list_recent_newest_first_with_limit(self):
        repo = InMemoryWorkoutHistoryRepository()
        for seconds in (100, 200, 300):
            repo.save({"total_time_seconds": seconds})

        recent = repo.list_recent(limit=2)

        assert [w["total_time_seconds"] for w in recent] == [300, 200]
