"""
Supabase implementation of ExerciseRepository.

This implementation uses the Supabase Python client to query the
exercises table holding the shared exercise library.
"""

import logging
from typing import AbstractSet, Dict, List, Optional, Sequence

from supabase import Client

from mesoplan.application.ports import ExerciseFilter
from mesoplan.models.exercise import Exercise

logger = logging.getLogger(__name__)


class SupabaseExerciseRepository:
    """
    Supabase-backed exercise repository implementation.

    Queries against the exercises table which stores canonical exercise
    definitions with category, movement pattern, muscles and tier.
    """

    TABLE = "exercises"

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def find(
        self,
        exercise_filter: ExerciseFilter,
        exclude: AbstractSet[str] = frozenset(),
        limit: Optional[int] = None,
    ) -> List[Exercise]:
        """
        Find exercises matching a filter.

        Args:
            exercise_filter: Category plus optional pattern and primary muscle
            exclude: Exercise IDs that must not be returned
            limit: Maximum number of results (None for all)

        Returns:
            Matching exercises ordered by tier, then ID
        """
        query = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("category", exercise_filter.category.value)
        )
        if exercise_filter.pattern is not None:
            query = query.eq("pattern", exercise_filter.pattern)
        if exercise_filter.primary_muscle is not None:
            query = query.eq("primary_muscle", exercise_filter.primary_muscle)
        if exclude:
            query = query.not_.in_("id", sorted(exclude))

        # Best tier first: a limit keeps the highest-tier matches
        query = query.order("tier").order("id")
        if limit is not None:
            query = query.limit(limit)

        response = query.execute()
        return [self._to_exercise(row) for row in response.data or []]

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        """
        Get an exercise by its ID.

        Args:
            exercise_id: The exercise identifier

        Returns:
            Exercise if found, None otherwise
        """
        response = (
            self._client.table(self.TABLE)
            .select("*")
            .eq("id", exercise_id)
            .limit(1)
            .execute()
        )
        return self._to_exercise(response.data[0]) if response.data else None

    def count(self) -> int:
        """
        Count exercises in the library.

        Returns:
            Number of stored exercises
        """
        response = (
            self._client.table(self.TABLE)
            .select("id", count="exact")
            .limit(1)
            .execute()
        )
        return response.count or 0

    def add_many(self, exercises: Sequence[Exercise]) -> int:
        """
        Upsert exercises into the library.

        Args:
            exercises: Exercises to write

        Returns:
            Number of rows written
        """
        if not exercises:
            return 0

        rows = [exercise.model_dump(mode="json") for exercise in exercises]
        response = self._client.table(self.TABLE).upsert(rows).execute()
        logger.info(f"Upserted {len(response.data or [])} exercises")
        return len(response.data or [])

    @staticmethod
    def _to_exercise(row: Dict) -> Exercise:
        """Convert a table row into an Exercise."""
        return Exercise.model_validate(
            {**row, "secondary_muscles": row.get("secondary_muscles") or [], "equipment": row.get("equipment") or []}
        )
