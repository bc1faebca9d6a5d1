"""
Supabase implementation of PlanRepository.

This implementation uses the Supabase Python client to interact with
the plans, workout_sessions and workout_exercises tables. Sessions and
prescriptions reference their parent with ON DELETE CASCADE; prescriptions
reference exercises without cascade, so deleting a plan never touches the
exercise library.
"""

import json
from typing import Dict, List, Optional

from supabase import Client

from mesoplan.application.exceptions import PlanPersistenceError
from mesoplan.models.plan import Plan


class SupabasePlanRepository:
    """
    Supabase-backed plan repository implementation.

    Queries against:
    - plans: Plan metadata
    - workout_sessions: One row per (week, day)
    - workout_exercises: Prescriptions within sessions
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def save(self, plan: Plan) -> str:
        """
        Create a plan with all sessions and prescriptions atomically.

        Uses a PostgreSQL stored procedure so that all inserts happen in a
        single transaction. If any insert fails, the whole plan is rolled back.

        Args:
            plan: Fully built plan aggregate

        Returns:
            ID of the stored plan

        Raises:
            PlanPersistenceError: If the RPC call fails
        """
        plan_data = {
            "name": plan.name,
            "start_date": plan.start_date.isoformat(),
        }
        sessions_data = [
            {
                "week_index": session.week_index,
                "day_index": session.day_index,
                "name": session.name,
                "phase": session.phase.value,
                "is_completed": session.is_completed,
                "exercises": [
                    {
                        "slot_index": prescription.slot_index,
                        "sets": prescription.sets,
                        "reps": prescription.reps,
                        "load_instruction": prescription.load_instruction,
                        "exercise_id": prescription.exercise_id,
                    }
                    for prescription in session.exercises
                ],
            }
            for session in plan.sessions
        ]

        try:
            response = self._client.rpc(
                "create_plan_with_sessions",
                {
                    "p_plan": json.dumps(plan_data),
                    "p_sessions": json.dumps(sessions_data),
                },
            ).execute()

            if response.data is None:
                raise PlanPersistenceError("RPC returned no data")

            data = response.data
            plan_id = data.get("plan_id") if isinstance(data, dict) else data
            if not plan_id:
                raise PlanPersistenceError("RPC returned no plan id")
            return str(plan_id)
        except Exception as e:
            if isinstance(e, PlanPersistenceError):
                raise
            raise PlanPersistenceError(f"Atomic plan creation failed: {e}") from e

    def get_by_id(self, plan_id: str) -> Optional[Dict]:
        """
        Get a plan with its sessions and prescriptions.

        Args:
            plan_id: The plan's ID

        Returns:
            Plan dictionary if found, None otherwise
        """
        response = (
            self._client.table("plans")
            .select("*, workout_sessions(*, workout_exercises(*))")
            .eq("id", plan_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def list_plans(self, limit: int = 50) -> List[Dict]:
        """
        List plans, newest first.

        Args:
            limit: Maximum number of results

        Returns:
            List of plan dictionaries
        """
        response = (
            self._client.table("plans")
            .select("*")
            .order("start_date", desc=True)
            .limit(limit)
            .execute()
        )
        return response.data

    def delete(self, plan_id: str) -> bool:
        """
        Delete a plan.

        Cascades to workout_sessions and workout_exercises via FK constraints.

        Args:
            plan_id: The plan's ID

        Returns:
            True if deleted, False if not found

        Raises:
            PlanPersistenceError: If the delete fails
        """
        try:
            response = (
                self._client.table("plans")
                .delete()
                .eq("id", plan_id)
                .execute()
            )
        except Exception as e:
            raise PlanPersistenceError(f"Plan deletion failed: {e}") from e
        return len(response.data) > 0
