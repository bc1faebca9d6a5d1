"""
Fake implementations for testing.

This package provides in-memory fake implementations of repository
interfaces for fast, isolated testing without database dependencies.
"""

from tests.fakes.exercise_repository import FakeExerciseRepository
from tests.fakes.plan_repository import FailingPlanRepository, FakePlanRepository

__all__ = [
    "FakeExerciseRepository",
    "FakePlanRepository",
    "FailingPlanRepository",
]
