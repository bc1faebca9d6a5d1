"""
Plans router.

Read and delete stored plans. Deleting a plan removes its sessions and
prescriptions; library exercises are never affected.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query

from mesoplan.api.deps import get_plan_repo
from mesoplan.application.exceptions import PlanPersistenceError
from mesoplan.application.ports import PlanRepository

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/plans",
    tags=["Plans"],
)


@router.get("")
def list_plans(
    limit: int = Query(50, ge=1, le=200),
    plan_repo: PlanRepository = Depends(get_plan_repo),
) -> List[Dict]:
    """List stored plans, newest first."""
    return plan_repo.list_plans(limit=limit)


@router.get("/{plan_id}")
def get_plan(
    plan_id: str,
    plan_repo: PlanRepository = Depends(get_plan_repo),
) -> Dict:
    """
    Get a stored plan with its sessions.

    Raises:
        HTTPException 404: If the plan does not exist
    """
    plan = plan_repo.get_by_id(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Plan not found")
    return plan


@router.delete("/{plan_id}", status_code=204)
def delete_plan(
    plan_id: str,
    plan_repo: PlanRepository = Depends(get_plan_repo),
) -> None:
    """
    Delete a plan together with its sessions and prescriptions.

    Raises:
        HTTPException 404: If the plan does not exist
        HTTPException 500: If the delete fails
    """
    try:
        deleted = plan_repo.delete(plan_id)
    except PlanPersistenceError as e:
        logger.error(f"Plan deletion failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail="Plan not found")
    logger.info(f"Deleted plan {plan_id}")
