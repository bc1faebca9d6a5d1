"""
Progression engine.

Pure functions of (week, strategy, slot category) giving the weekly
prescription: working sets, rep range and load instruction. Every function
is total: unknown models and out-of-range weeks get a documented default.
"""

from typing import Tuple

from mesoplan.models.blueprint import ProgressionModel, StrategyConfig
from mesoplan.models.exercise import ExerciseCategory

DEFAULT_SETS = 3
WAVE_DELOAD_SETS = 2
WAVE_DELOAD_REPS = "5-8"
DEFAULT_LOAD = "RPE 7"

LINEAR_RPE_RAMP = ("RPE 7", "RPE 8", "RPE 9", "RPE 7")
WAVE_RPE_BANDS = ("RPE 6-7", "RPE 7-8", "RPE 8-9", "RPE 5-6 (Deload)")


def _format_range(low: int, high: int) -> str:
    return f"{low}-{high}"


def base_rep_range(strategy: StrategyConfig, category: ExerciseCategory) -> Tuple[int, int]:
    """Compound slots use the compound range, everything else the isolation range."""
    if category == ExerciseCategory.COMPOUND:
        return strategy.rep_range_compound
    return strategy.rep_range_isolation


class ProgressionEngine:
    """
    Weekly prescription rules per progression model.

    Linear keeps volume and reps flat and ramps RPE. Wave undulates reps
    over three loading weeks and deloads in week 4. Block does not vary
    volume by phase yet and uses the base prescription throughout.
    """

    @staticmethod
    def sets(week: int, strategy: StrategyConfig, category: ExerciseCategory) -> int:
        """
        Working sets for a slot in a given week.

        Args:
            week: 1-based week index
            strategy: Mesocycle strategy
            category: Slot category

        Returns:
            Number of working sets
        """
        if strategy.progression_model == ProgressionModel.WAVE and week == 4:
            return WAVE_DELOAD_SETS
        return DEFAULT_SETS

    @staticmethod
    def reps(week: int, strategy: StrategyConfig, category: ExerciseCategory) -> str:
        """
        Rep range string for a slot in a given week.

        Args:
            week: 1-based week index
            strategy: Mesocycle strategy
            category: Slot category

        Returns:
            Rep range such as "6-8"
        """
        low, high = base_rep_range(strategy, category)

        if strategy.progression_model == ProgressionModel.WAVE:
            if week == 1:
                return _format_range(low + 2, high + 2)
            if week == 3:
                return _format_range(max(low - 2, 1), max(high - 2, 1))
            if week == 4:
                return WAVE_DELOAD_REPS

        return _format_range(low, high)

    @staticmethod
    def load_instruction(week: int, strategy: StrategyConfig) -> str:
        """
        Load instruction for a given week.

        Args:
            week: 1-based week index
            strategy: Mesocycle strategy

        Returns:
            RPE instruction such as "RPE 7-8"
        """
        if week < 1:
            return DEFAULT_LOAD

        if strategy.progression_model == ProgressionModel.LINEAR:
            return LINEAR_RPE_RAMP[(week - 1) % len(LINEAR_RPE_RAMP)]

        if strategy.progression_model == ProgressionModel.WAVE and week <= len(WAVE_RPE_BANDS):
            return WAVE_RPE_BANDS[week - 1]

        return DEFAULT_LOAD
