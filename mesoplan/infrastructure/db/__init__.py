"""
Database infrastructure package.
"""

from mesoplan.infrastructure.db.exercise_repository import SupabaseExerciseRepository
from mesoplan.infrastructure.db.plan_repository import SupabasePlanRepository

__all__ = [
    "SupabaseExerciseRepository",
    "SupabasePlanRepository",
]
