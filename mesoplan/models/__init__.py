"""Models package for mesoplan."""

from mesoplan.models.blueprint import (
    DailySlot,
    MesocycleBlueprint,
    PeriodizationPhase,
    ProgressionModel,
    SplitDay,
    SplitTemplate,
    StrategyConfig,
)
from mesoplan.models.exercise import Exercise, ExerciseCategory, SecondaryMuscle
from mesoplan.models.plan import Plan, WorkoutExercise, WorkoutSession
from mesoplan.models.profile import TrainingAge, TrainingGoal, UserProfile

__all__ = [
    "DailySlot",
    "MesocycleBlueprint",
    "PeriodizationPhase",
    "ProgressionModel",
    "SplitDay",
    "SplitTemplate",
    "StrategyConfig",
    "Exercise",
    "ExerciseCategory",
    "SecondaryMuscle",
    "Plan",
    "WorkoutExercise",
    "WorkoutSession",
    "TrainingAge",
    "TrainingGoal",
    "UserProfile",
]
