"""
Infrastructure layer for mesoplan.

Concrete implementations of the application ports.
"""

from mesoplan.infrastructure.db import SupabaseExerciseRepository, SupabasePlanRepository

__all__ = [
    "SupabaseExerciseRepository",
    "SupabasePlanRepository",
]
