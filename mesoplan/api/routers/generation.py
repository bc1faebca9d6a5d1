"""
Plan generation router.

This router exposes the generation pipeline: resolve a blueprint for a
profile, generate the plan, validate it and optionally store it.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from mesoplan.api.deps import get_plan_generator, get_plan_repo, get_plan_validator
from mesoplan.application.exceptions import PlanPersistenceError
from mesoplan.application.ports import PlanRepository
from mesoplan.models.generation import GeneratePlanRequest, GeneratePlanResponse
from mesoplan.models.profile import UserProfile
from mesoplan.services.plan_generator import PlanGenerator
from mesoplan.services.plan_validator import PlanValidator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/generate",
    tags=["Generation"],
)


@router.post("", response_model=GeneratePlanResponse)
async def generate_plan(
    request: GeneratePlanRequest,
    generator: PlanGenerator = Depends(get_plan_generator),
    validator: PlanValidator = Depends(get_plan_validator),
    plan_repo: PlanRepository = Depends(get_plan_repo),
):
    """
    Generate a mesocycle plan for a training profile.

    1. **Blueprint**: strategy from training age, split template from
       days available + goal.

    2. **Generation**: one exercise per template slot, reused every week,
       with weekly sets/reps/load from the progression model.

    3. **Validation**: structural checks and week-1 volume scoring.

    4. **Persistence** (optional): stores the plan when `persist` is set.

    Raises:
        HTTPException 422: If no template fits the profile
        HTTPException 500: If the plan could not be stored
    """
    logger.info(
        f"Generate plan request: age={request.training_age}, goal={request.goal}, "
        f"days={request.days_available}"
    )

    profile = UserProfile(
        training_age=request.training_age,
        goal=request.goal,
        days_available=request.days_available,
    )
    blueprint = generator.resolve_blueprint(profile)
    if blueprint is None:
        raise HTTPException(
            status_code=422,
            detail="No plan possible for this profile",
        )

    result = await generator.generate_with_skeleton(blueprint)
    plan, skeleton = result.plan, result.skeleton
    report = validator.validate(plan, blueprint)

    plan_id = None
    if request.persist:
        try:
            plan_id = plan_repo.save(plan)
        except PlanPersistenceError as e:
            logger.error(f"Plan persistence failed: {e}")
            raise HTTPException(
                status_code=500,
                detail=f"Plan persistence failed: {str(e)}",
            )
        plan.id = plan_id

    return GeneratePlanResponse(
        plan=plan,
        validation=report,
        strategy=blueprint.strategy,
        template_name=blueprint.template.name,
        unfilled_slots=len(skeleton.unfilled()),
        plan_id=plan_id,
    )
