"""
Strategy resolver for plan generation.

Maps a training-age category to the programming strategy used for a
mesocycle: progression model, weekly volume bounds, rep ranges, cycle
length and the phase of each week.
"""

import logging
from typing import Dict, Optional

from mesoplan.models.blueprint import PeriodizationPhase, ProgressionModel, StrategyConfig
from mesoplan.models.profile import TrainingAge

logger = logging.getLogger(__name__)

P = PeriodizationPhase

DEFAULT_STRATEGIES: Dict[TrainingAge, StrategyConfig] = {
    TrainingAge.NOVICE: StrategyConfig(
        progression_model=ProgressionModel.LINEAR,
        vol_min=10,
        vol_max=12,
        rep_range_compound=(5, 5),
        rep_range_isolation=(10, 12),
        cycle_duration_weeks=4,
        phase_schedule=(P.GENERAL, P.GENERAL, P.GENERAL, P.GENERAL),
    ),
    TrainingAge.INTERMEDIATE: StrategyConfig(
        progression_model=ProgressionModel.WAVE,
        vol_min=13,
        vol_max=15,
        rep_range_compound=(6, 8),
        rep_range_isolation=(10, 15),
        cycle_duration_weeks=4,
        phase_schedule=(P.ACCUMULATION, P.INTENSIFICATION, P.REALIZATION, P.DELOAD),
    ),
    TrainingAge.ADVANCED: StrategyConfig(
        progression_model=ProgressionModel.BLOCK,
        vol_min=16,
        vol_max=20,
        rep_range_compound=(3, 6),
        rep_range_isolation=(8, 12),
        cycle_duration_weeks=6,
        phase_schedule=(
            P.ACCUMULATION,
            P.ACCUMULATION,
            P.INTENSIFICATION,
            P.INTENSIFICATION,
            P.REALIZATION,
            P.DELOAD,
        ),
    ),
}


class StrategyResolver:
    """
    Resolves the StrategyConfig for a training age.

    Stateless apart from its lookup table, which can be replaced for tests.
    Unknown categories resolve to the Intermediate strategy.
    """

    FALLBACK_AGE = TrainingAge.INTERMEDIATE

    def __init__(self, strategies: Optional[Dict[TrainingAge, StrategyConfig]] = None):
        """
        Initialize the resolver.

        Args:
            strategies: Strategy table keyed by training age. Must contain
                an Intermediate entry. Defaults to DEFAULT_STRATEGIES.
        """
        self._strategies = dict(strategies) if strategies is not None else dict(DEFAULT_STRATEGIES)
        if self.FALLBACK_AGE not in self._strategies:
            raise ValueError("Strategy table must define an Intermediate strategy")

    def resolve(self, training_age: TrainingAge | str) -> StrategyConfig:
        """
        Resolve the strategy for a training age.

        Args:
            training_age: Training-age category (enum or its string value)

        Returns:
            StrategyConfig for the category, or the Intermediate one
        """
        try:
            age = TrainingAge(training_age)
        except ValueError:
            logger.warning(
                f"Unknown training age {training_age!r}, using {self.FALLBACK_AGE.value} strategy"
            )
            age = self.FALLBACK_AGE

        return self._strategies.get(age, self._strategies[self.FALLBACK_AGE])
