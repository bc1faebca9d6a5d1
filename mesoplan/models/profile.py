"""
User training profile.

The profile is the immutable input to plan generation. Training age and
goal are kept as plain strings so that unrecognised values reach the
strategy resolver and template catalog, which apply their own fallbacks.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TrainingAge(str, Enum):
    """Training-age categories with a dedicated strategy."""

    NOVICE = "Novice"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class TrainingGoal(str, Enum):
    """Goals with at least one registered split template."""

    STRENGTH = "Strength"
    HYPERTROPHY = "Hypertrophy"


class UserProfile(BaseModel):
    """A lifter's training profile."""

    model_config = ConfigDict(frozen=True)

    training_age: str = Field(
        description="Novice, Intermediate or Advanced; anything else resolves as Intermediate",
    )
    goal: str = Field(description="Strength, Hypertrophy, ...")
    days_available: int = Field(ge=1, le=7, description="Training days per week")
