"""
Template catalog for plan generation.

Looks up the weekly split template for a (days available, goal) pair from a
small fixed registry of named splits.
"""

import logging
from typing import Dict, Optional, Tuple

from mesoplan.models.blueprint import DailySlot, SplitDay, SplitTemplate
from mesoplan.models.exercise import ExerciseCategory
from mesoplan.models.profile import TrainingGoal

logger = logging.getLogger(__name__)

C = ExerciseCategory.COMPOUND
I = ExerciseCategory.ISOLATION

TemplateKey = Tuple[int, str]


def _slot(category: ExerciseCategory, pattern: Optional[str] = None,
          muscle: Optional[str] = None, sets: int = 3) -> DailySlot:
    return DailySlot(category=category, pattern=pattern, target_muscle=muscle, default_sets=sets)


def four_day_strength_split() -> SplitTemplate:
    """4 days: squat, bench, deadlift, bench volume (high bench frequency)."""
    return SplitTemplate(
        name="4-Day Powerlifting Split",
        description="Focuses on the Big 3 with high frequency benching.",
        days=[
            SplitDay(name="Squat Focus", slots=[
                _slot(C, "Squat", sets=4),
                _slot(C, "Lunge"),
                _slot(I, muscle="Quads"),
                _slot(I, muscle="Abs"),
            ]),
            SplitDay(name="Bench Focus", slots=[
                _slot(C, "Push_Horizontal", sets=4),
                _slot(C, "Push_Vertical"),
                _slot(I, muscle="Triceps"),
                _slot(I, muscle="Chest"),
            ]),
            SplitDay(name="Deadlift Focus", slots=[
                _slot(C, "Hinge", sets=4),
                _slot(C, "Pull_Horizontal"),
                _slot(C, "Pull_Vertical"),
                _slot(I, muscle="Biceps"),
            ]),
            SplitDay(name="Bench Volume / Access", slots=[
                _slot(C, "Push_Horizontal"),
                _slot(I, muscle="Delts_Side"),
                _slot(I, muscle="Delts_Rear"),
                _slot(I, muscle="Triceps"),
            ]),
        ],
    )


def four_day_upper_lower_split() -> SplitTemplate:
    """4 days: classic upper/lower bodybuilding split."""
    return SplitTemplate(
        name="Upper / Lower Split",
        description="Classic bodybuilding split balancing volume and recovery.",
        days=[
            SplitDay(name="Upper A", slots=[
                _slot(C, "Push_Horizontal"),
                _slot(C, "Pull_Vertical"),
                _slot(C, "Push_Vertical"),
                _slot(C, "Pull_Horizontal"),
                _slot(I, muscle="Triceps"),
                _slot(I, muscle="Biceps"),
            ]),
            SplitDay(name="Lower A", slots=[
                _slot(C, "Squat"),
                _slot(C, "Hinge"),
                _slot(I, muscle="Quads"),
                _slot(I, muscle="Hamstrings"),
                _slot(I, muscle="Calves", sets=4),
            ]),
            SplitDay(name="Upper B", slots=[
                _slot(C, "Push_Vertical"),
                _slot(C, "Pull_Horizontal"),
                _slot(C, "Push_Horizontal"),
                _slot(C, "Pull_Vertical"),
                _slot(I, muscle="Delts_Side"),
            ]),
            SplitDay(name="Lower B", slots=[
                _slot(C, "Hinge"),
                _slot(C, "Lunge"),
                _slot(I, muscle="Glutes"),
                _slot(I, muscle="Abs"),
            ]),
        ],
    )


def three_day_full_body_split() -> SplitTemplate:
    """3 days: full body each session."""
    return SplitTemplate(
        name="3-Day Full Body",
        description="Full body frequency.",
        days=[
            SplitDay(name="Full Body A", slots=[
                _slot(C, "Squat", sets=4),
                _slot(C, "Push_Horizontal"),
                _slot(C, "Pull_Horizontal"),
                _slot(I, muscle="Biceps"),
            ]),
            SplitDay(name="Full Body B", slots=[
                _slot(C, "Hinge", sets=4),
                _slot(C, "Push_Vertical"),
                _slot(C, "Pull_Vertical"),
                _slot(I, muscle="Triceps"),
            ]),
            SplitDay(name="Full Body C", slots=[
                _slot(C, "Push_Horizontal", sets=4),
                _slot(C, "Lunge"),
                _slot(C, "Pull_Horizontal"),
                _slot(I, muscle="Abs"),
            ]),
        ],
    )


def default_registry() -> Dict[TemplateKey, SplitTemplate]:
    """The built-in (days, goal) -> template table."""
    return {
        (4, TrainingGoal.STRENGTH.value): four_day_strength_split(),
        (4, TrainingGoal.HYPERTROPHY.value): four_day_upper_lower_split(),
        (3, TrainingGoal.STRENGTH.value): three_day_full_body_split(),
    }


class TemplateCatalog:
    """
    Looks up split templates by (days available, goal).

    When no key matches and four days are available, the 4-day strength
    split is returned regardless of goal, unless goal_fallback is off.
    """

    FALLBACK_DAYS = 4

    def __init__(
        self,
        registry: Optional[Dict[TemplateKey, SplitTemplate]] = None,
        goal_fallback: bool = True,
    ):
        """
        Initialize the catalog.

        Args:
            registry: Template table keyed by (days, goal). Defaults to the
                built-in registry.
            goal_fallback: Whether a 4-day request with an unmatched goal
                falls back to the 4-day strength split
        """
        self._registry = dict(registry) if registry is not None else default_registry()
        self._goal_fallback = goal_fallback

    def lookup(self, days_available: int, goal: TrainingGoal | str) -> Optional[SplitTemplate]:
        """
        Find the template for a schedule and goal.

        Args:
            days_available: Training days per week
            goal: Training goal

        Returns:
            Matching SplitTemplate, or None if no plan can be built
        """
        goal_str = goal.value if hasattr(goal, "value") else str(goal)

        template = self._registry.get((days_available, goal_str))
        if template is not None:
            return template

        if self._goal_fallback and days_available == self.FALLBACK_DAYS:
            fallback = self._registry.get((self.FALLBACK_DAYS, TrainingGoal.STRENGTH.value))
            if fallback is not None:
                logger.warning(
                    f"No template for days={days_available}, goal={goal_str}; "
                    f"falling back to '{fallback.name}'"
                )
                return fallback

        logger.info(f"No template found for days={days_available}, goal={goal_str}")
        return None

    def list_templates(self) -> Dict[TemplateKey, SplitTemplate]:
        """All registered templates by key."""
        return dict(self._registry)
