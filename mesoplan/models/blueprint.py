"""
Blueprint models: strategy, split templates and the resolved mesocycle.

A MesocycleBlueprint is the single consolidated input to one generation
run. All models here are frozen.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mesoplan.models.exercise import ExerciseCategory
from mesoplan.models.profile import UserProfile


class ProgressionModel(str, Enum):
    """Week-to-week progression scheme."""

    LINEAR = "Linear"
    WAVE = "Wave"
    BLOCK = "Block"
    UNKNOWN = "Unknown"


class PeriodizationPhase(str, Enum):
    """Periodization phase assigned to one week of a cycle."""

    ACCUMULATION = "Accumulation"
    INTENSIFICATION = "Intensification"
    REALIZATION = "Realization"
    DELOAD = "Deload"
    GENERAL = "General"


RepRange = Tuple[int, int]


class StrategyConfig(BaseModel):
    """Programming parameters for one training-age category."""

    model_config = ConfigDict(frozen=True)

    progression_model: ProgressionModel
    vol_min: int = Field(ge=0, description="Target working sets per muscle per week (lower bound)")
    vol_max: int = Field(ge=0, description="Target working sets per muscle per week (upper bound)")
    rep_range_compound: RepRange
    rep_range_isolation: RepRange
    cycle_duration_weeks: int = Field(ge=1)
    phase_schedule: Tuple[PeriodizationPhase, ...]

    @model_validator(mode="after")
    def check_consistency(self) -> "StrategyConfig":
        """Reject inverted bounds and schedules that don't cover the cycle."""
        if self.vol_min > self.vol_max:
            raise ValueError(f"vol_min {self.vol_min} exceeds vol_max {self.vol_max}")
        for label, (low, high) in (
            ("compound", self.rep_range_compound),
            ("isolation", self.rep_range_isolation),
        ):
            if low < 1 or low > high:
                raise ValueError(f"Invalid {label} rep range {low}-{high}")
        if len(self.phase_schedule) != self.cycle_duration_weeks:
            raise ValueError(
                f"Phase schedule has {len(self.phase_schedule)} entries "
                f"for a {self.cycle_duration_weeks}-week cycle"
            )
        return self

    def phase_for_week(self, week: int) -> PeriodizationPhase:
        """Phase of a 1-based week; General outside the schedule."""
        if 1 <= week <= len(self.phase_schedule):
            return self.phase_schedule[week - 1]
        return PeriodizationPhase.GENERAL


class DailySlot(BaseModel):
    """One exercise-shaped requirement within a training day."""

    model_config = ConfigDict(frozen=True)

    category: ExerciseCategory
    pattern: Optional[str] = None
    target_muscle: Optional[str] = None
    default_sets: int = Field(3, ge=1)


class SplitDay(BaseModel):
    """A named training day made of ordered slots."""

    model_config = ConfigDict(frozen=True)

    name: str
    slots: List[DailySlot] = []


class SplitTemplate(BaseModel):
    """A weekly split: ordered training days."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    days: List[SplitDay] = []

    @property
    def slot_count(self) -> int:
        return sum(len(day.slots) for day in self.days)


class MesocycleBlueprint(BaseModel):
    """Resolved (profile, strategy, template) triple for one generation run."""

    model_config = ConfigDict(frozen=True)

    profile: UserProfile
    strategy: StrategyConfig
    template: SplitTemplate
