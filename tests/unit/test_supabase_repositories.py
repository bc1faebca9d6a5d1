"""
Unit tests for the Supabase repository implementations.

The Supabase client is replaced by a chainable MagicMock so the query
building can be checked without a database.
"""

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from mesoplan.application.exceptions import PlanPersistenceError
from mesoplan.application.ports import ExerciseFilter
from mesoplan.infrastructure.db import SupabaseExerciseRepository, SupabasePlanRepository
from mesoplan.models.exercise import Exercise, ExerciseCategory
from mesoplan.models.plan import Plan, WorkoutExercise, WorkoutSession

SQUAT_ROW = {
    "id": "squat_back_barbell",
    "name": "Barbell Back Squat",
    "short_name": None,
    "category": "Compound",
    "pattern": "Squat",
    "equipment": ["Barbell"],
    "primary_muscle": "Quads",
    "secondary_muscles": None,
    "default_tempo": None,
    "tier": 1,
    "is_competition_lift": True,
    "is_user_created": False,
}


def _chainable_query(data=None, count=None) -> MagicMock:
    query = MagicMock()
    for name in ("select", "eq", "in_", "order", "limit", "upsert", "delete"):
        getattr(query, name).return_value = query
    query.not_ = query
    query.execute.return_value = MagicMock(data=data, count=count)
    return query


def _client(query: MagicMock) -> MagicMock:
    client = MagicMock()
    client.table.return_value = query
    return client


# ---------------------------------------------------------------------------
# SupabaseExerciseRepository Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestSupabaseExerciseRepository:
    """Tests for SupabaseExerciseRepository query building."""

    def test_find_applies_all_filters(self):
        query = _chainable_query(data=[SQUAT_ROW])
        repo = SupabaseExerciseRepository(_client(query))

        results = repo.find(
            ExerciseFilter(ExerciseCategory.COMPOUND, "Squat", "Quads"),
            exclude=frozenset({"b", "a"}),
            limit=10,
        )

        assert [ex.id for ex in results] == ["squat_back_barbell"]
        assert results[0].secondary_muscles == []
        query.eq.assert_any_call("category", "Compound")
        query.eq.assert_any_call("pattern", "Squat")
        query.eq.assert_any_call("primary_muscle", "Quads")
        query.in_.assert_called_once_with("id", ["a", "b"])
        assert [c.args for c in query.order.call_args_list] == [("tier",), ("id",)]
        query.limit.assert_called_once_with(10)

    def test_find_with_wildcards_only_filters_category(self):
        query = _chainable_query(data=[])
        repo = SupabaseExerciseRepository(_client(query))

        assert repo.find(ExerciseFilter(ExerciseCategory.ISOLATION)) == []
        query.eq.assert_called_once_with("category", "Isolation")
        query.in_.assert_not_called()
        query.limit.assert_not_called()

    def test_get_by_id_missing(self):
        repo = SupabaseExerciseRepository(_client(_chainable_query(data=[])))

        assert repo.get_by_id("nope") is None

    def test_count(self):
        repo = SupabaseExerciseRepository(_client(_chainable_query(data=[], count=41)))

        assert repo.count() == 41

    def test_add_many_upserts_json_rows(self):
        query = _chainable_query(data=[SQUAT_ROW])
        repo = SupabaseExerciseRepository(_client(query))

        written = repo.add_many([Exercise.model_validate(SQUAT_ROW | {"secondary_muscles": []})])

        assert written == 1
        rows = query.upsert.call_args.args[0]
        assert rows[0]["category"] == "Compound"

    def test_add_many_empty_skips_request(self):
        query = _chainable_query()
        repo = SupabaseExerciseRepository(_client(query))

        assert repo.add_many([]) == 0
        query.upsert.assert_not_called()


# ---------------------------------------------------------------------------
# SupabasePlanRepository Tests
# ---------------------------------------------------------------------------


@pytest.fixture
def small_plan() -> Plan:
    squat = Exercise.model_validate(SQUAT_ROW | {"secondary_muscles": []})
    return Plan(
        name="Test Plan",
        start_date=datetime(2026, 1, 5, tzinfo=timezone.utc),
        sessions=[
            WorkoutSession(
                week_index=1,
                day_index=0,
                name="Squat Focus",
                exercises=[
                    WorkoutExercise(
                        slot_index=0,
                        sets=3,
                        reps="8-10",
                        load_instruction="RPE 6-7",
                        exercise_id=squat.id,
                        exercise=squat,
                    )
                ],
            )
        ],
    )


@pytest.mark.unit
class TestSupabasePlanRepository:
    """Tests for SupabasePlanRepository."""

    def test_save_calls_atomic_rpc(self, small_plan):
        client = MagicMock()
        client.rpc.return_value.execute.return_value = MagicMock(data={"plan_id": "plan-1"})
        repo = SupabasePlanRepository(client)

        plan_id = repo.save(small_plan)

        assert plan_id == "plan-1"
        name, params = client.rpc.call_args.args
        assert name == "create_plan_with_sessions"
        sessions = json.loads(params["p_sessions"])
        assert sessions[0]["exercises"][0]["exercise_id"] == "squat_back_barbell"
        assert "exercise" not in sessions[0]["exercises"][0]

    def test_save_accepts_scalar_id(self, small_plan):
        client = MagicMock()
        client.rpc.return_value.execute.return_value = MagicMock(data="plan-2")

        assert SupabasePlanRepository(client).save(small_plan) == "plan-2"

    def test_save_wraps_client_errors(self, small_plan):
        client = MagicMock()
        client.rpc.return_value.execute.side_effect = RuntimeError("connection reset")

        with pytest.raises(PlanPersistenceError, match="connection reset"):
            SupabasePlanRepository(client).save(small_plan)

    def test_save_without_data_raises(self, small_plan):
        client = MagicMock()
        client.rpc.return_value.execute.return_value = MagicMock(data=None)

        with pytest.raises(PlanPersistenceError, match="no data"):
            SupabasePlanRepository(client).save(small_plan)

    def test_delete_found(self):
        query = _chainable_query(data=[{"id": "plan-1"}])
        client = _client(query)

        assert SupabasePlanRepository(client).delete("plan-1") is True
        client.table.assert_called_once_with("plans")
        query.eq.assert_called_once_with("id", "plan-1")

    def test_delete_missing(self):
        assert SupabasePlanRepository(_client(_chainable_query(data=[]))).delete("x") is False

    def test_delete_wraps_client_errors(self):
        query = _chainable_query()
        query.execute.side_effect = RuntimeError("timeout")

        with pytest.raises(PlanPersistenceError):
            SupabasePlanRepository(_client(query)).delete("plan-1")
