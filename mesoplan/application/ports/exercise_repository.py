"""
Exercise repository port (interface).

This Protocol defines the contract for exercise library access.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.
"""

from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Protocol, Sequence

from mesoplan.models.exercise import Exercise, ExerciseCategory


@dataclass(frozen=True)
class ExerciseFilter:
    """
    Typed library query.

    `pattern` and `primary_muscle` set to None are wildcards; `category`
    is always enforced.
    """

    category: ExerciseCategory
    pattern: Optional[str] = None
    primary_muscle: Optional[str] = None

    def matches(self, exercise: Exercise) -> bool:
        """Check whether an exercise satisfies this filter."""
        if exercise.category != self.category:
            return False
        if self.pattern is not None and exercise.pattern != self.pattern:
            return False
        if self.primary_muscle is not None and exercise.primary_muscle != self.primary_muscle:
            return False
        return True


class ExerciseRepository(Protocol):
    """
    Repository interface for the exercise library.

    The library is read-only reference data during plan generation. Each
    `find` call must see a consistent snapshot of the library.
    """

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
        ...

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        """
        Get an exercise by its ID.

        Args:
            exercise_id: The exercise identifier

        Returns:
            Exercise if found, None otherwise
        """
        ...

    def count(self) -> int:
        """
        Count exercises in the library.

        Returns:
            Number of stored exercises
        """
        ...

    def add_many(self, exercises: Sequence[Exercise]) -> int:
        """
        Insert exercises into the library.

        Only the library seeder writes; plan generation never calls this.

        Args:
            exercises: Exercises to insert

        Returns:
            Number of exercises written
        """
        ...
