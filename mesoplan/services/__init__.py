"""
Services package for mesoplan.

Contains the plan generation pipeline:
- Strategy resolution by training age
- Template lookup by days + goal
- Exercise selection with a fixed relaxation ladder
- Weekly progression rules
- Plan generation (skeleton + weekly instantiation)
- Plan validation (structure + volume)
"""

from mesoplan.services.exercise_selector import ExerciseCandidate, ExerciseSelector
from mesoplan.services.plan_generator import (
    ExerciseSkeleton,
    GenerationResult,
    PlanGenerator,
    SlotFill,
    Unfilled,
)
from mesoplan.services.plan_validator import (
    PlanValidator,
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)
from mesoplan.services.progression_engine import ProgressionEngine
from mesoplan.services.strategy_resolver import DEFAULT_STRATEGIES, StrategyResolver
from mesoplan.services.template_catalog import TemplateCatalog, default_registry

__all__ = [
    # Exercise Selection
    "ExerciseCandidate",
    "ExerciseSelector",
    # Plan Generation
    "ExerciseSkeleton",
    "GenerationResult",
    "PlanGenerator",
    "SlotFill",
    "Unfilled",
    # Validation
    "PlanValidator",
    "ValidationIssue",
    "ValidationReport",
    "ValidationSeverity",
    # Progression
    "ProgressionEngine",
    # Strategy
    "DEFAULT_STRATEGIES",
    "StrategyResolver",
    # Templates
    "TemplateCatalog",
    "default_registry",
]
