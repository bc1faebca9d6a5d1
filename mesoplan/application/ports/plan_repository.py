"""
Plan repository port (interface).

This Protocol defines the contract for plan persistence. Storing a plan
stores its sessions and prescriptions with it; deleting a plan removes
them too, but never the library exercises they reference.
"""

from typing import Dict, List, Optional, Protocol

from mesoplan.models.plan import Plan


class PlanRepository(Protocol):
    """Repository interface for generated plans."""

    def save(self, plan: Plan) -> str:
        """
        Persist a plan with all its sessions and prescriptions atomically.

        Args:
            plan: Fully built plan aggregate

        Returns:
            ID of the stored plan

        Raises:
            PlanPersistenceError: If the aggregate could not be stored
        """
        ...

    def get_by_id(self, plan_id: str) -> Optional[Dict]:
        """
        Get a stored plan with its sessions and prescriptions.

        Args:
            plan_id: The plan's ID

        Returns:
            Plan dictionary if found, None otherwise
        """
        ...

    def list_plans(self, limit: int = 50) -> List[Dict]:
        """
        List stored plans, newest first (plan rows only).

        Args:
            limit: Maximum number of results

        Returns:
            List of plan dictionaries
        """
        ...

    def delete(self, plan_id: str) -> bool:
        """
        Delete a plan and, by cascade, its sessions and prescriptions.

        Args:
            plan_id: The plan's ID

        Returns:
            True if a plan was deleted, False if it did not exist
        """
        ...
