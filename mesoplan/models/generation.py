"""
Request/response models for plan generation.
"""

from typing import Optional

from pydantic import BaseModel, Field

from mesoplan.models.blueprint import StrategyConfig
from mesoplan.models.plan import Plan
from mesoplan.services.plan_validator import ValidationReport


class GeneratePlanRequest(BaseModel):
    """Request model for plan generation."""

    training_age: str = Field(
        description="Novice, Intermediate or Advanced (unknown values use Intermediate)",
    )
    goal: str = Field(description="Strength, Hypertrophy, ...")
    days_available: int = Field(ge=1, le=7, description="Training days per week")
    persist: bool = Field(False, description="Store the generated plan")


class GeneratePlanResponse(BaseModel):
    """Response model for plan generation."""

    plan: Plan
    validation: ValidationReport
    strategy: StrategyConfig
    template_name: str
    unfilled_slots: int = Field(ge=0, description="Skeleton slots left without an exercise")
    plan_id: Optional[str] = Field(None, description="Set when the plan was persisted")
