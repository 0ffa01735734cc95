"""
Randomized, time-bounded workout generator.

Builds a WorkoutPlan from the exercise catalog:
1. Catalog retrieval - one fetch per equipment tag plus body-weight, merged
2. Category partitioning - warmup / core / strength+cardio
3. Weighted selection - entries using requested equipment are favoured
4. Sequencing - two warmups, then core every fourth slot, until the
   time budget is spent; the post-warmup sequence is replayed once the
   unique pool runs out
"""

import asyncio
import logging
import math
import random
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from itertools import chain
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from application.exceptions import (
    EmptyCatalogError,
    InsufficientCatalogError,
    InsufficientTimeError,
    InsufficientWarmupError,
)
from application.ports import ExerciseRepository
from backend.core.exercise_pool import (
    DEFAULT_EQUIPMENT_WEIGHT,
    CategoryPartition,
    Exercise,
    dedupe_by_id,
    partition_by_category,
)
from domain.models import (
    DEFAULT_EXERCISE_DURATION_SECONDS,
    NO_EQUIPMENT,
    GenerationParameters,
    WorkoutExerciseEntry,
    WorkoutPlan,
)

logger = logging.getLogger(__name__)

WARMUP_EXERCISE_COUNT = 2
# Post-warmup slot k prefers core when k % CORE_SLOT_INTERVAL == 0
CORE_SLOT_INTERVAL = 4
MAX_GENERATION_ATTEMPTS = 1000


@dataclass
class _GenerationContext:
    """
    Mutable state of a single generate() call.

    `elapsed_seconds` includes the rest pending before the next slot;
    `pending_rest_seconds` is dropped from the reported total so a rest after
    the last exercise is never counted.
    """

    budget_seconds: int
    duration_seconds: int
    rest_seconds: int
    entries: List[Exercise] = field(default_factory=list)
    used_ids: set = field(default_factory=set)
    post_warmup_sequence: List[Exercise] = field(default_factory=list)
    post_warmup_count: int = 0
    elapsed_seconds: int = 0
    pending_rest_seconds: int = 0
    replay_index: int = 0

    @property
    def remaining_seconds(self) -> int:
        return self.budget_seconds - self.elapsed_seconds

    @property
    def total_seconds(self) -> int:
        return self.elapsed_seconds - self.pending_rest_seconds

    def next_slot_is_final(self) -> Optional[bool]:
        """
        Apply the fit rule to the next slot.

        Returns:
            False if another slot can follow, True if this slot must be the
            last one, None if nothing fits
        """
        if 2 * self.duration_seconds + self.rest_seconds <= self.remaining_seconds:
            return False
        if self.duration_seconds <= self.remaining_seconds:
            return True
        return None

    def place(self, exercise: Exercise, *, final: bool = False) -> None:
        self.entries.append(exercise)
        self.used_ids.add(exercise.get("id"))
        self.elapsed_seconds += self.duration_seconds
        if final:
            self.pending_rest_seconds = 0
        else:
            self.elapsed_seconds += self.rest_seconds
            self.pending_rest_seconds = self.rest_seconds

    def next_replay(self) -> Optional[Exercise]:
        """Next entry of the post-warmup sequence, cycling from the start."""
        if not self.post_warmup_sequence:
            return None
        exercise = self.post_warmup_sequence[
            self.replay_index % len(self.post_warmup_sequence)
        ]
        self.replay_index += 1
        return exercise


class WorkoutGenerator:
    """
    Service for generating randomized workout plans.

    The generator holds no per-call state; every generate() call builds its
    own context, so one instance can serve concurrent requests.

    Usage:
        >>> generator = WorkoutGenerator(exercise_repo, rng=random.Random(7))
        >>> plan = await generator.generate(600, equipment=["dumbbells"])
        >>> plan.total_time_seconds <= 600
        True
    """

    def __init__(
        self,
        exercise_repo: ExerciseRepository,
        *,
        equipment_weight: int = DEFAULT_EQUIPMENT_WEIGHT,
        max_attempts: int = MAX_GENERATION_ATTEMPTS,
        rng: Optional[random.Random] = None,
        executor: Optional[Executor] = None,
    ):
        """
        Initialize the workout generator.

        Args:
            exercise_repo: Catalog to draw exercises from
            equipment_weight: Draw weight of entries using requested equipment
            max_attempts: Safety cap on sequencing loop iterations
            rng: Random source (inject a seeded one for reproducible tests)
            executor: Pool for the synchronous catalog calls
        """
        self._exercise_repo = exercise_repo
        self._equipment_weight = equipment_weight
        self._max_attempts = max_attempts
        self._rng = rng or random.Random()

        # Thread pool for running sync catalog reads from async context
        self._executor = executor or ThreadPoolExecutor(
            max_workers=4, thread_name_prefix="workout_gen_"
        )

    async def generate(
        self,
        total_time_seconds: int,
        equipment: Union[str, Sequence[str], None] = None,
        rest_time_seconds: int = 0,
        categories: Optional[Sequence[str]] = None,
        exercise_duration_seconds: int = DEFAULT_EXERCISE_DURATION_SECONDS,
    ) -> WorkoutPlan:
        """
        Generate a workout plan that fits the time budget.

        Args:
            total_time_seconds: Hard upper bound on the plan duration
            equipment: Available equipment tag(s); empty means body-weight
            rest_time_seconds: Rest between consecutive exercises
            categories: Optional category allow-list
            exercise_duration_seconds: Duration of every selected exercise

        Returns:
            Immutable WorkoutPlan

        Raises:
            pydantic.ValidationError: If parameters are invalid
            EmptyCatalogError: If the catalog has nothing for the filter
            InsufficientWarmupError: If fewer than two warmups are eligible
            InsufficientCatalogError: If no core/strength/cardio is eligible
            InsufficientTimeError: If the warmup block does not fit
        """
        params = GenerationParameters(
            total_time_seconds=total_time_seconds,
            equipment=equipment,
            rest_time_seconds=rest_time_seconds,
            categories=categories,
            exercise_duration_seconds=exercise_duration_seconds,
        )
        logger.info(
            f"Generating workout: budget={params.total_time_seconds}s, "
            f"equipment={params.equipment}, rest={params.rest_time_seconds}s, "
            f"duration={params.exercise_duration_seconds}s, "
            f"categories={params.categories}"
        )

        pool = await self._fetch_catalog(params)
        if params.categories:
            allowed = set(params.categories)
            pool = [e for e in pool if e.get("category") in allowed]
        if not pool:
            logger.warning(f"No exercises in catalog for equipment={params.equipment}")
            raise EmptyCatalogError(
                "No exercises found for the selected equipment and categories"
            )

        partition = partition_by_category(
            pool, set(params.requested_equipment), self._rng
        )
        self._check_feasibility(partition, params)

        ctx = _GenerationContext(
            budget_seconds=params.total_time_seconds,
            duration_seconds=params.exercise_duration_seconds,
            rest_seconds=params.rest_time_seconds,
        )
        self._add_warmups(ctx, partition)
        self._fill_time_budget(ctx, partition)

        plan = self._assemble_plan(ctx, params)
        logger.info(
            f"Generated workout: {plan.exercise_count} exercises, "
            f"{plan.total_time_seconds}s of {params.total_time_seconds}s"
        )
        return plan

    async def _fetch_catalog(self, params: GenerationParameters) -> List[Exercise]:
        """Fetch every requested tag plus body-weight and merge by id."""
        tags = params.requested_equipment + [NO_EQUIPMENT]
        loop = asyncio.get_event_loop()
        results = await asyncio.gather(
            *(
                loop.run_in_executor(
                    self._executor,
                    partial(self._exercise_repo.list_exercises, equipment=tag),
                )
                for tag in tags
            )
        )
        for tag, rows in zip(tags, results):
            logger.debug(f"Fetched {len(rows)} exercises for equipment={tag}")
        return dedupe_by_id(chain.from_iterable(results))

    def _check_feasibility(
        self,
        partition: CategoryPartition,
        params: GenerationParameters,
    ) -> None:
        if len(partition.warmup) < WARMUP_EXERCISE_COUNT:
            logger.warning(
                f"Only {len(partition.warmup)} eligible warmups for "
                f"equipment={params.equipment}"
            )
            raise InsufficientWarmupError(
                f"At least {WARMUP_EXERCISE_COUNT} warmup exercises are required, "
                f"found {len(partition.warmup)}"
            )

        if partition.post_warmup_size == 0:
            logger.warning(f"No core, strength or cardio exercises for {params.equipment}")
            raise InsufficientCatalogError(
                "No core, strength or cardio exercises available for the selected equipment"
            )

        required = (
            WARMUP_EXERCISE_COUNT * params.exercise_duration_seconds
            + params.rest_time_seconds
        )
        if required > params.total_time_seconds:
            logger.warning(
                f"Time budget {params.total_time_seconds}s below warmup block {required}s"
            )
            raise InsufficientTimeError(
                f"Workout needs at least {required} seconds for the warmup, "
                f"got {params.total_time_seconds}",
                required_seconds=required,
            )

    def _add_warmups(self, ctx: _GenerationContext, partition: CategoryPartition) -> None:
        for _ in range(WARMUP_EXERCISE_COUNT):
            warmup = partition.warmup.draw(
                ctx.used_ids, self._rng, self._equipment_weight
            )
            # Rest after the last warmup stays pending until a slot follows
            ctx.place(warmup)

    def _fill_time_budget(
        self,
        ctx: _GenerationContext,
        partition: CategoryPartition,
    ) -> None:
        attempts = 0
        while attempts < self._max_attempts:
            attempts += 1

            final = ctx.next_slot_is_final()
            if final is None:
                break

            exercise, replayed = self._next_post_warmup(ctx, partition)
            if exercise is None:
                break

            ctx.place(exercise, final=final)
            ctx.post_warmup_count += 1
            if not replayed:
                ctx.post_warmup_sequence.append(exercise)

            if final:
                break
        else:
            logger.warning(
                f"Stopped after {self._max_attempts} attempts with "
                f"{len(ctx.entries)} exercises"
            )

    def _next_post_warmup(
        self,
        ctx: _GenerationContext,
        partition: CategoryPartition,
    ) -> Tuple[Optional[Exercise], bool]:
        """
        Pick the exercise for the next post-warmup slot.

        Returns:
            (exercise, replayed) where replayed is True once the unique pool
            is exhausted and the sequence is being repeated
        """
        if ctx.post_warmup_count % CORE_SLOT_INTERVAL == 0:
            groups = (partition.core, partition.strength_cardio)
        else:
            groups = (partition.strength_cardio, partition.core)

        for group in groups:
            exercise = group.draw(ctx.used_ids, self._rng, self._equipment_weight)
            if exercise is not None:
                return exercise, False

        if ctx.replay_index == 0:
            logger.debug(
                f"Unique pool exhausted after {len(ctx.post_warmup_sequence)} "
                f"exercises, replaying sequence"
            )
        return ctx.next_replay(), True

    def _assemble_plan(
        self,
        ctx: _GenerationContext,
        params: GenerationParameters,
    ) -> WorkoutPlan:
        duration = params.exercise_duration_seconds
        entries = [
            WorkoutExerciseEntry(
                **{
                    **self._entry_fields(exercise),
                    "duration_seconds": duration,
                    "order": index,
                }
            )
            for index, exercise in enumerate(ctx.entries, start=1)
        ]
        total = ctx.total_seconds
        return WorkoutPlan(
            exercises=entries,
            total_time_seconds=total,
            total_time_minutes=math.floor(total / 60 + 0.5),
            exercise_count=len(entries),
            rest_time_seconds=params.rest_time_seconds,
            total_rest_seconds=total - len(entries) * duration,
            exercise_duration_seconds=duration,
            equipment=params.equipment,
        )

    @staticmethod
    def _entry_fields(exercise: Exercise) -> Dict[str, Any]:
        fields = dict(exercise)
        fields.setdefault("description", "")
        fields["equipment"] = fields.get("equipment") or NO_EQUIPMENT
        return fields
