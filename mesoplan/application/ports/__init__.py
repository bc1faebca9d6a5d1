"""
Port interfaces (Protocols) for mesoplan.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with in-memory implementations
- Dependency inversion (depend on abstractions, not concretions)
"""

from mesoplan.application.ports.exercise_repository import ExerciseFilter, ExerciseRepository
from mesoplan.application.ports.plan_repository import PlanRepository

__all__ = [
    "ExerciseFilter",
    "ExerciseRepository",
    "PlanRepository",
]
