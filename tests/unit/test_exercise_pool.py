"""
Unit tests for backend/core/exercise_pool.py
"""

import random

import pytest

from backend.core.exercise_pool import (
    EquipmentPool,
    dedupe_by_id,
    is_equipment_eligible,
    partition_by_category,
    weighted_choice,
)
from tests.fakes import make_exercise


pytestmark = pytest.mark.unit


class TestDedupeById:

    def test_first_occurrence_wins(self):
        first = make_exercise(1, "core", name="Crunches")
        duplicate = make_exercise(1, "core", name="Crunches (copy)")
        other = make_exercise(2, "strength")

        result = dedupe_by_id([first, other, duplicate])

        assert result == [first, other]

    def test_preserves_order(self):
        exercises = [make_exercise(i, "core") for i in (3, 1, 2)]

        assert [e["id"] for e in dedupe_by_id(exercises)] == [3, 1, 2]


class TestEquipmentEligibility:

    def test_body_weight_always_eligible(self):
        assert is_equipment_eligible(make_exercise(1, "core"), set())

    def test_requested_tag_eligible(self):
        exercise = make_exercise(1, "strength", equipment="dumbbells")

        assert is_equipment_eligible(exercise, {"dumbbells"})
        assert not is_equipment_eligible(exercise, {"kettlebells"})

    def test_missing_tag_means_body_weight(self):
        exercise = {"id": 1, "name": "Squats", "category": "strength"}

        assert is_equipment_eligible(exercise, set())


class TestWeightedChoice:

    def test_empty_returns_none(self):
        assert weighted_choice([], [], random.Random(0)) is None

    def test_zero_weight_never_chosen(self):
        a, b = make_exercise("a", "core"), make_exercise("b", "core")
        rng = random.Random(0)

        picks = {weighted_choice([a, b], [1, 0], rng)["id"] for _ in range(50)}

        assert picks == {"a"}


class TestEquipmentPool:

    def test_build_splits_and_filters(self):
        exercises = [
            make_exercise("bw", "strength"),
            make_exercise("db", "strength", equipment="dumbbells"),
            make_exercise("kb", "strength", equipment="kettlebells"),
        ]

        pool = EquipmentPool.build(exercises, {"dumbbells"}, random.Random(0))

        assert [e["id"] for e in pool.with_equipment] == ["db"]
        assert [e["id"] for e in pool.without_equipment] == ["bw"]
        assert len(pool) == 2

    def test_draw_skips_used_ids(self):
        exercises = [make_exercise(i, "core") for i in range(3)]
        pool = EquipmentPool.build(exercises, set(), random.Random(0))

        drawn = pool.draw({0, 1}, random.Random(0))

        assert drawn["id"] == 2

    def test_draw_returns_none_when_exhausted(self):
        pool = EquipmentPool.build([make_exercise(1, "core")], set(), random.Random(0))

        assert pool.draw({1}, random.Random(0)) is None
        assert pool.available({1}) == 0

    def test_draw_favours_equipment(self):
        exercises = [
            make_exercise("bw", "strength"),
            make_exercise("db", "strength", equipment="dumbbells"),
        ]
        pool = EquipmentPool.build(exercises, {"dumbbells"}, random.Random(0))
        rng = random.Random(3)

        picks = [pool.draw(set(), rng, equipment_weight=5)["id"] for _ in range(1200)]

        assert 0.78 < picks.count("db") / len(picks) < 0.89


class TestPartitionByCategory:

    def test_groups_and_ignores_other_categories(self):
        exercises = [
            make_exercise("w", "warmup"),
            make_exercise("c", "core"),
            make_exercise("s", "strength"),
            make_exercise("k", "cardio"),
            make_exercise("f", "flexibility"),
            make_exercise("b", "balance"),
        ]

        partition = partition_by_category(exercises, set(), random.Random(0))

        assert partition.warmup.ids == {"w"}
        assert partition.core.ids == {"c"}
        assert partition.strength_cardio.ids == {"s", "k"}
        assert partition.post_warmup_size == 3

    def test_ineligible_equipment_excluded_from_groups(self):
        exercises = [
            make_exercise("w", "warmup", equipment="resistance-bands"),
            make_exercise("c", "core", equipment="kettlebells"),
        ]

        partition = partition_by_category(exercises, {"dumbbells"}, random.Random(0))

        assert len(partition.warmup) == 0
        assert partition.post_warmup_size == 0
