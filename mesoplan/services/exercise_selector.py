"""
Exercise selector service for slot filling.

Fills one template slot from the exercise library using a fixed ladder of
relaxations:

1. category + pattern + primary muscle
2. category + pattern (muscle relaxed)
3. category + primary muscle (pattern relaxed)
4. category only

The first level with any candidate wins; within a level the highest tier
exercise is picked, ties going to the lowest ID. An empty ladder leaves the
slot unfilled, which is a normal outcome rather than an error.
"""

import logging
from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Tuple

from mesoplan.application.ports import ExerciseFilter, ExerciseRepository
from mesoplan.models.blueprint import DailySlot
from mesoplan.models.exercise import Exercise

logger = logging.getLogger(__name__)


@dataclass
class ExerciseCandidate:
    """A selected exercise with its score and the ladder level that found it."""

    exercise: Exercise
    score: int = 0
    relaxation_level: int = 1


class ExerciseSelector:
    """
    Service for constrained exercise selection.

    Provides methods to:
    - Build the relaxation ladder for a slot
    - Fill a slot with the best available exercise
    """

    def __init__(self, exercise_repo: ExerciseRepository, query_limit: Optional[int] = None):
        """
        Initialize the exercise selector.

        Args:
            exercise_repo: Repository for exercise library access
            query_limit: Optional cap on results per library query
        """
        self._exercise_repo = exercise_repo
        self._query_limit = query_limit

    def select(
        self,
        slot: DailySlot,
        exclude_ids: AbstractSet[str] = frozenset(),
    ) -> Optional[Exercise]:
        """
        Select the best exercise for a slot.

        Args:
            slot: The slot to fill
            exclude_ids: Exercise IDs already used (e.g. earlier in the same day)

        Returns:
            Best matching exercise, or None if the slot cannot be filled
        """
        candidate = self.select_candidate(slot, exclude_ids)
        return candidate.exercise if candidate else None

    def select_candidate(
        self,
        slot: DailySlot,
        exclude_ids: AbstractSet[str] = frozenset(),
    ) -> Optional[ExerciseCandidate]:
        """
        Select the best exercise for a slot, keeping selection details.

        Args:
            slot: The slot to fill
            exclude_ids: Exercise IDs that must not be selected

        Returns:
            ExerciseCandidate, or None if every ladder level came back empty
        """
        for level, exercise_filter in self.relaxation_ladder(slot):
            candidates = self._exercise_repo.find(
                exercise_filter,
                exclude=exclude_ids,
                limit=self._query_limit,
            )
            # Stores are not required to honour the exclusion set exactly
            candidates = [ex for ex in candidates if ex.id not in exclude_ids]
            if not candidates:
                continue

            best = self._pick_best(candidates)
            logger.debug(
                f"Slot {slot.category.value}/{slot.pattern}/{slot.target_muscle} "
                f"filled with '{best.exercise.id}' at level {level}"
            )
            best.relaxation_level = level
            return best

        logger.warning(
            f"No exercise for slot {slot.category.value}/{slot.pattern}/{slot.target_muscle}"
        )
        return None

    def relaxation_ladder(self, slot: DailySlot) -> List[Tuple[int, ExerciseFilter]]:
        """
        Build the ordered filters tried for a slot.

        Levels whose filter equals an earlier one (slots without a pattern
        or muscle) are dropped so each distinct query is issued once.

        Args:
            slot: The slot to fill

        Returns:
            (level, filter) pairs in the order they are tried
        """
        filters = [
            ExerciseFilter(slot.category, slot.pattern, slot.target_muscle),
            ExerciseFilter(slot.category, slot.pattern, None),
            ExerciseFilter(slot.category, None, slot.target_muscle),
            ExerciseFilter(slot.category, None, None),
        ]

        ladder: List[Tuple[int, ExerciseFilter]] = []
        seen = set()
        for level, exercise_filter in enumerate(filters, start=1):
            if exercise_filter in seen:
                continue
            seen.add(exercise_filter)
            ladder.append((level, exercise_filter))
        return ladder

    def _pick_best(self, candidates: List[Exercise]) -> ExerciseCandidate:
        """
        Score candidates by tier and pick the winner.

        Args:
            candidates: Non-empty list of exercises from one ladder level

        Returns:
            Highest-scoring candidate (lowest ID among equal scores)
        """
        scored = [
            ExerciseCandidate(exercise=ex, score=ex.tier_score)
            for ex in sorted(candidates, key=lambda ex: ex.id)
        ]
        # max() keeps the first of equal scores, i.e. the lowest ID
        return max(scored, key=lambda c: c.score)
