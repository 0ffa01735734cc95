"""
Exercise pools used by the workout generator.

Handles the catalog-side half of generation:
- de-duplication of fetched records by id
- equipment eligibility filtering
- category partitioning (warmup / core / strength+cardio)
- equipment-weighted random draws over unused entries
"""

import random
from dataclasses import dataclass, field
from typing import Any, Collection, Dict, Iterable, List, Optional, Sequence

from domain.models.catalog import NO_EQUIPMENT, STRENGTH_CARDIO_CATEGORIES, ExerciseCategory

Exercise = Dict[str, Any]

# Relative weight of an entry using requested equipment vs a body-weight entry
DEFAULT_EQUIPMENT_WEIGHT = 5


def dedupe_by_id(exercises: Iterable[Exercise]) -> List[Exercise]:
    """Drop repeated ids, keeping the first occurrence."""
    seen = set()
    unique: List[Exercise] = []
    for exercise in exercises:
        exercise_id = exercise.get("id")
        if exercise_id in seen:
            continue
        seen.add(exercise_id)
        unique.append(exercise)
    return unique


def is_equipment_eligible(exercise: Exercise, requested: Collection[str]) -> bool:
    """True for body-weight entries and entries using a requested tag."""
    tag = exercise.get("equipment") or NO_EQUIPMENT
    return tag == NO_EQUIPMENT or tag in requested


def weighted_choice(
    items: Sequence[Exercise],
    weights: Sequence[int],
    rng: random.Random,
) -> Optional[Exercise]:
    """Pick one item with probability proportional to its weight."""
    if not items:
        return None
    return rng.choices(items, weights=weights, k=1)[0]


@dataclass
class EquipmentPool:
    """
    One category group split by equipment usage.

    Both halves are shuffled once at build time; draws then skip used ids.
    """

    with_equipment: List[Exercise] = field(default_factory=list)
    without_equipment: List[Exercise] = field(default_factory=list)

    @classmethod
    def build(
        cls,
        exercises: Iterable[Exercise],
        requested: Collection[str],
        rng: random.Random,
    ) -> "EquipmentPool":
        with_equipment: List[Exercise] = []
        without_equipment: List[Exercise] = []
        for exercise in exercises:
            if not is_equipment_eligible(exercise, requested):
                continue
            tag = exercise.get("equipment") or NO_EQUIPMENT
            if tag != NO_EQUIPMENT:
                with_equipment.append(exercise)
            else:
                without_equipment.append(exercise)
        rng.shuffle(with_equipment)
        rng.shuffle(without_equipment)
        return cls(with_equipment=with_equipment, without_equipment=without_equipment)

    def __len__(self) -> int:
        return len(self.with_equipment) + len(self.without_equipment)

    @property
    def ids(self) -> set:
        return {e.get("id") for e in self.with_equipment + self.without_equipment}

    def available(self, used_ids: Collection[Any]) -> int:
        """Number of entries not yet used."""
        return sum(
            1
            for e in self.with_equipment + self.without_equipment
            if e.get("id") not in used_ids
        )

    def draw(
        self,
        used_ids: Collection[Any],
        rng: random.Random,
        equipment_weight: int = DEFAULT_EQUIPMENT_WEIGHT,
    ) -> Optional[Exercise]:
        """
        Draw one unused entry.

        Entries in `with_equipment` weigh `equipment_weight`, the rest weigh 1.

        Returns:
            The drawn exercise, or None when every entry has been used
        """
        with_available = [e for e in self.with_equipment if e.get("id") not in used_ids]
        without_available = [
            e for e in self.without_equipment if e.get("id") not in used_ids
        ]
        candidates = with_available + without_available
        weights = [equipment_weight] * len(with_available) + [1] * len(without_available)
        return weighted_choice(candidates, weights, rng)


@dataclass
class CategoryPartition:
    """Eligible catalog entries grouped for sequencing."""

    warmup: EquipmentPool
    core: EquipmentPool
    strength_cardio: EquipmentPool

    @property
    def post_warmup_size(self) -> int:
        """Unique entries available after the warmup block."""
        return len(self.core.ids | self.strength_cardio.ids)


def partition_by_category(
    exercises: Iterable[Exercise],
    requested: Collection[str],
    rng: random.Random,
) -> CategoryPartition:
    """
    Split the pool into warmup, core and strength+cardio groups.

    Categories outside these groups are ignored. Each group keeps only
    entries that are body-weight or use a requested tag.
    """
    warmup: List[Exercise] = []
    core: List[Exercise] = []
    strength_cardio: List[Exercise] = []
    for exercise in exercises:
        category = exercise.get("category")
        if category == ExerciseCategory.WARMUP.value:
            warmup.append(exercise)
        elif category == ExerciseCategory.CORE.value:
            core.append(exercise)
        elif category in STRENGTH_CARDIO_CATEGORIES:
            strength_cardio.append(exercise)

    return CategoryPartition(
        warmup=EquipmentPool.build(warmup, requested, rng),
        core=EquipmentPool.build(core, requested, rng),
        strength_cardio=EquipmentPool.build(strength_cardio, requested, rng),
    )
