"""
Plan generator service.

This service turns a resolved mesocycle blueprint into a concrete plan:
1. Blueprint Resolution - Strategy for the training age, template for
   days + goal
2. Skeleton - One exercise per (day, slot), chosen once and reused for
   every week
3. Instantiation - One session per (week, day) with the week's sets,
   reps and load from the progression engine

Generation never aborts on individual unfilled slots; the only "no plan"
outcome is a blueprint whose template could not be resolved.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import partial
from typing import Dict, List, Optional, Set, Tuple, Union

from mesoplan.application.ports import ExerciseRepository
from mesoplan.models.blueprint import DailySlot, MesocycleBlueprint
from mesoplan.models.exercise import Exercise
from mesoplan.models.plan import Plan, WorkoutExercise, WorkoutSession
from mesoplan.models.profile import UserProfile
from mesoplan.services.exercise_selector import ExerciseSelector
from mesoplan.services.progression_engine import ProgressionEngine
from mesoplan.services.strategy_resolver import StrategyResolver
from mesoplan.services.template_catalog import TemplateCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unfilled:
    """Marker for a slot no library exercise could fill."""

    slot: DailySlot


SlotFill = Union[Exercise, Unfilled]
SlotKey = Tuple[int, int]


@dataclass
class ExerciseSkeleton:
    """Per-day, per-slot exercise assignment shared by every week."""

    assignments: Dict[SlotKey, SlotFill] = field(default_factory=dict)

    def exercise_at(self, day_index: int, slot_index: int) -> Optional[Exercise]:
        """Exercise assigned to a slot, or None if unfilled or unknown."""
        fill = self.assignments.get((day_index, slot_index))
        return fill if isinstance(fill, Exercise) else None

    def unfilled(self) -> List[SlotKey]:
        """Keys of unfilled slots in (day, slot) order."""
        return sorted(key for key, fill in self.assignments.items() if isinstance(fill, Unfilled))

    @property
    def filled_count(self) -> int:
        return sum(1 for fill in self.assignments.values() if isinstance(fill, Exercise))

    def exercise_ids(self) -> Dict[SlotKey, Optional[str]]:
        """(day, slot) -> exercise ID view, None for unfilled slots."""
        return {
            key: fill.id if isinstance(fill, Exercise) else None
            for key, fill in sorted(self.assignments.items())
        }


@dataclass
class GenerationResult:
    """A generated plan together with its exercise skeleton."""

    plan: Plan
    skeleton: ExerciseSkeleton


class PlanGenerator:
    """
    Service for generating mesocycle plans.

    This service orchestrates:
    - Strategy and template resolution into a blueprint
    - Skeleton construction via the exercise selector
    - Weekly instantiation via the progression engine
    """

    def __init__(
        self,
        exercise_repo: ExerciseRepository,
        strategy_resolver: Optional[StrategyResolver] = None,
        template_catalog: Optional[TemplateCatalog] = None,
        query_limit: Optional[int] = None,
    ):
        """
        Initialize the plan generator.

        Args:
            exercise_repo: Repository for the exercise library
            strategy_resolver: Strategy lookup (defaults to built-in table)
            template_catalog: Template lookup (defaults to built-in registry)
            query_limit: Optional cap on results per library query
        """
        self._exercise_repo = exercise_repo
        self._strategy_resolver = strategy_resolver or StrategyResolver()
        self._template_catalog = template_catalog or TemplateCatalog()
        self._selector = ExerciseSelector(exercise_repo, query_limit=query_limit)
        self._progression = ProgressionEngine()

        # Thread pool for running sync library queries from async context
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="plan_gen_")

    def resolve_blueprint(self, profile: UserProfile) -> Optional[MesocycleBlueprint]:
        """
        Resolve strategy and template for a profile.

        Args:
            profile: The lifter's training profile

        Returns:
            MesocycleBlueprint, or None if no template fits the profile
        """
        strategy = self._strategy_resolver.resolve(profile.training_age)
        template = self._template_catalog.lookup(profile.days_available, profile.goal)

        if template is None:
            logger.warning(
                f"No plan possible for profile: days={profile.days_available}, goal={profile.goal}"
            )
            return None

        logger.info(
            f"Resolved blueprint: {strategy.progression_model.value} strategy, "
            f"template '{template.name}', {strategy.cycle_duration_weeks} weeks"
        )
        return MesocycleBlueprint(profile=profile, strategy=strategy, template=template)

    async def generate(self, blueprint: Optional[MesocycleBlueprint]) -> Optional[Plan]:
        """
        Generate a plan from a blueprint.

        Args:
            blueprint: Resolved blueprint, or None if resolution failed

        Returns:
            Fully built Plan, or None when there is no blueprint
        """
        result = await self.generate_with_skeleton(blueprint)
        return result.plan if result else None

    async def generate_with_skeleton(
        self, blueprint: Optional[MesocycleBlueprint]
    ) -> Optional[GenerationResult]:
        """
        Generate a plan and keep the skeleton it was built from.

        Flow:
        1. Build the exercise skeleton (once per run)
        2. Instantiate one session per (week, day), weeks outermost

        Args:
            blueprint: Resolved blueprint, or None if resolution failed

        Returns:
            GenerationResult, or None when there is no blueprint
        """
        if blueprint is None:
            return None

        start_time = datetime.now(timezone.utc)

        skeleton = await self.build_skeleton(blueprint)
        plan = self.instantiate(blueprint, skeleton, start_date=start_time)

        unfilled = skeleton.unfilled()
        if unfilled:
            logger.warning(f"Plan '{plan.name}' has {len(unfilled)} unfilled slot(s): {unfilled}")

        generation_time = (datetime.now(timezone.utc) - start_time).total_seconds()
        logger.info(
            f"Generated plan '{plan.name}' with {len(plan.sessions)} sessions "
            f"in {generation_time:.2f}s"
        )
        return GenerationResult(plan=plan, skeleton=skeleton)

    async def build_skeleton(self, blueprint: MesocycleBlueprint) -> ExerciseSkeleton:
        """
        Choose one exercise per (day, slot).

        Slots are filled in template order; an exercise chosen earlier in a
        day is excluded from the rest of that day.

        Args:
            blueprint: Resolved blueprint

        Returns:
            ExerciseSkeleton covering every slot of the template
        """
        loop = asyncio.get_running_loop()
        skeleton = ExerciseSkeleton()

        for day_index, day in enumerate(blueprint.template.days):
            used_today: Set[str] = set()

            for slot_index, slot in enumerate(day.slots):
                exercise = await loop.run_in_executor(
                    self._executor,
                    partial(self._selector.select, slot, frozenset(used_today)),
                )
                if exercise is None:
                    skeleton.assignments[(day_index, slot_index)] = Unfilled(slot=slot)
                    continue

                skeleton.assignments[(day_index, slot_index)] = exercise
                used_today.add(exercise.id)

        return skeleton

    def instantiate(
        self,
        blueprint: MesocycleBlueprint,
        skeleton: ExerciseSkeleton,
        start_date: Optional[datetime] = None,
    ) -> Plan:
        """
        Build the plan aggregate from a skeleton.

        Args:
            blueprint: Resolved blueprint
            skeleton: Exercise assignment from build_skeleton
            start_date: Plan start (defaults to now, UTC)

        Returns:
            Plan with cycle_duration_weeks * len(days) sessions
        """
        strategy = blueprint.strategy
        plan = Plan(
            name=self._generate_plan_name(blueprint),
            start_date=start_date or datetime.now(timezone.utc),
        )

        for week in range(1, strategy.cycle_duration_weeks + 1):
            load = self._progression.load_instruction(week, strategy)
            phase = strategy.phase_for_week(week)

            for day_index, day in enumerate(blueprint.template.days):
                session = WorkoutSession(
                    week_index=week,
                    day_index=day_index,
                    name=day.name,
                    phase=phase,
                )

                for slot_index, slot in enumerate(day.slots):
                    exercise = skeleton.exercise_at(day_index, slot_index)
                    if exercise is None:
                        continue

                    session.exercises.append(
                        WorkoutExercise(
                            slot_index=slot_index,
                            sets=self._progression.sets(week, strategy, slot.category),
                            reps=self._progression.reps(week, strategy, slot.category),
                            load_instruction=load,
                            exercise_id=exercise.id,
                            exercise=exercise,
                        )
                    )

                plan.sessions.append(session)

        return plan

    def _generate_plan_name(self, blueprint: MesocycleBlueprint) -> str:
        """Generate a name for the plan."""
        strategy = blueprint.strategy
        return (
            f"{blueprint.template.name} - {strategy.progression_model.value} "
            f"({strategy.cycle_duration_weeks} Weeks)"
        )
