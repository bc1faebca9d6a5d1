"""
Exercise library models.

Exercises are shared, read-only reference data. Plans point at them but
never own them.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExerciseCategory(str, Enum):
    """Exercise category, also used as the slot requirement."""

    COMPOUND = "Compound"
    ISOLATION = "Isolation"
    MACHINE = "Machine"


class SecondaryMuscle(BaseModel):
    """A secondary muscle and how much of a set it receives."""

    model_config = ConfigDict(frozen=True)

    muscle: str
    factor: float = Field(ge=0.0, le=1.0)


class Exercise(BaseModel):
    """A library exercise."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    short_name: Optional[str] = None
    category: ExerciseCategory
    pattern: Optional[str] = Field(None, description="Movement pattern, e.g. Hinge or Push_Horizontal")
    equipment: List[str] = []
    primary_muscle: str
    secondary_muscles: List[SecondaryMuscle] = []
    default_tempo: Optional[str] = None
    tier: int = Field(3, ge=1, le=3, description="1 = competition lift, 3 = accessory")
    is_competition_lift: bool = False
    is_user_created: bool = False

    @property
    def tier_score(self) -> int:
        """Selection score: 3 for tier 1 down to 1 for tier 3."""
        return 4 - self.tier
