"""
Plan aggregate produced by one generation run.

Plan owns its sessions and each session owns its prescriptions; they are
created and discarded together. A prescription only references its library
exercise: `exercise_id` is what gets persisted, `exercise` is the shared
handle handed out by the library.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from mesoplan.models.blueprint import PeriodizationPhase
from mesoplan.models.exercise import Exercise


class WorkoutExercise(BaseModel):
    """A single exercise prescription inside a session."""

    slot_index: int = Field(ge=0)
    sets: int = Field(ge=0)
    reps: str = Field(description='Rep range, e.g. "6-8"')
    load_instruction: str = Field(description='e.g. "RPE 7-8"')
    exercise_id: str
    exercise: Optional[Exercise] = None


class WorkoutSession(BaseModel):
    """One training day within one week of the plan."""

    week_index: int = Field(ge=1)
    day_index: int = Field(ge=0)
    name: str
    phase: PeriodizationPhase = PeriodizationPhase.GENERAL
    is_completed: bool = False
    exercises: List[WorkoutExercise] = []

    @property
    def is_empty(self) -> bool:
        return not self.exercises


class Plan(BaseModel):
    """A complete multi-week plan."""

    id: Optional[str] = None
    name: str
    start_date: datetime
    sessions: List[WorkoutSession] = []

    def sessions_for_week(self, week: int) -> List[WorkoutSession]:
        """Sessions of a 1-based week, in day order."""
        return [s for s in self.sessions if s.week_index == week]

    @property
    def week_indices(self) -> List[int]:
        return sorted({s.week_index for s in self.sessions})
