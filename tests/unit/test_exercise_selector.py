"""
Unit tests for ExerciseSelector.

Covers the relaxation ladder, tier scoring, tie-breaking and exclusion.
"""

import pytest

from mesoplan.application.ports import ExerciseFilter
from mesoplan.backend.settings import Settings
from mesoplan.models.blueprint import DailySlot
from mesoplan.models.exercise import ExerciseCategory
from mesoplan.services.exercise_selector import ExerciseSelector
from tests.fakes import FakeExerciseRepository

C = ExerciseCategory.COMPOUND
I = ExerciseCategory.ISOLATION


@pytest.fixture
def selector(fake_exercise_repo):
    return ExerciseSelector(fake_exercise_repo)


# ---------------------------------------------------------------------------
# Relaxation Ladder Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestRelaxationLadder:
    """Tests for the ordered filters tried per slot."""

    def test_full_ladder_for_pattern_and_muscle(self, selector):
        slot = DailySlot(category=C, pattern="Hinge", target_muscle="Glutes")

        ladder = selector.relaxation_ladder(slot)

        assert ladder == [
            (1, ExerciseFilter(C, "Hinge", "Glutes")),
            (2, ExerciseFilter(C, "Hinge", None)),
            (3, ExerciseFilter(C, None, "Glutes")),
            (4, ExerciseFilter(C, None, None)),
        ]

    def test_duplicate_levels_dropped_for_muscle_only_slot(self, selector):
        slot = DailySlot(category=I, target_muscle="Triceps")

        ladder = selector.relaxation_ladder(slot)

        assert ladder == [
            (1, ExerciseFilter(I, None, "Triceps")),
            (2, ExerciseFilter(I, None, None)),
        ]

    def test_single_level_for_category_only_slot(self, selector):
        ladder = selector.relaxation_ladder(DailySlot(category=C))

        assert ladder == [(1, ExerciseFilter(C, None, None))]


# ---------------------------------------------------------------------------
# Selection Tests
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestSelect:
    """Tests for ExerciseSelector.select / select_candidate."""

    def test_exact_match_at_first_level(self, selector):
        """An isolation triceps slot is filled by the pushdown without relaxing."""
        slot = DailySlot(category=I, target_muscle="Triceps")

        candidate = selector.select_candidate(slot)

        assert candidate.exercise.name == "Cable Tricep Pushdown"
        assert candidate.relaxation_level == 1
        assert candidate.score == 1

    def test_highest_tier_wins(self, selector):
        slot = DailySlot(category=C, pattern="Squat")

        exercise = selector.select(slot)

        assert exercise.id == "squat_back_barbell"
        assert exercise.tier == 1

    def test_ties_broken_by_lowest_id(self, selector):
        slot = DailySlot(category=C, pattern="Lunge")

        exercise = selector.select(slot)

        assert exercise.id == "bulgarian_split_squat_dumbbell"

    def test_muscle_relaxed_at_level_two(self, selector):
        slot = DailySlot(category=C, pattern="Hinge", target_muscle="Chest")

        candidate = selector.select_candidate(slot)

        assert candidate.relaxation_level == 2
        assert candidate.exercise.id == "deadlift_conventional"

    def test_pattern_relaxed_at_level_three(self, selector):
        slot = DailySlot(category=C, pattern="Carry", target_muscle="Chest")

        candidate = selector.select_candidate(slot)

        assert candidate.relaxation_level == 3
        assert candidate.exercise.id == "bench_press_barbell"

    def test_category_only_at_level_four(self, selector):
        slot = DailySlot(category=C, pattern="Carry", target_muscle="Neck")

        candidate = selector.select_candidate(slot)

        assert candidate.relaxation_level == 4
        assert candidate.exercise.id == "bench_press_barbell"

    def test_category_is_never_relaxed(self, selector):
        """A Quads isolation slot never takes the Quads machine exercise."""
        slot = DailySlot(category=I, target_muscle="Quads")

        candidate = selector.select_candidate(slot)

        assert candidate.exercise.category == ExerciseCategory.ISOLATION
        assert candidate.exercise.id != "leg_extension_machine"
        assert candidate.relaxation_level == 2

    def test_level_one_hit_issues_single_query(self, fake_exercise_repo, selector):
        slot = DailySlot(category=C, pattern="Hinge", target_muscle="Glutes")

        exercise = selector.select(slot)

        assert exercise.id == "hip_thrust_barbell"
        assert len(fake_exercise_repo.find_calls) == 1

    def test_excluded_ids_are_skipped(self, selector):
        slot = DailySlot(category=C, pattern="Carry", target_muscle="Neck")

        exercise = selector.select(slot, frozenset({"bench_press_barbell"}))

        assert exercise.id == "deadlift_conventional"

    def test_exclusion_moves_to_next_level(self, selector):
        """Excluding the only exact match falls through to the next level."""
        slot = DailySlot(category=C, pattern="Hinge", target_muscle="Glutes")

        candidate = selector.select_candidate(slot, frozenset({"hip_thrust_barbell"}))

        assert candidate.relaxation_level == 2
        assert candidate.exercise.id == "deadlift_conventional"

    def test_empty_library_leaves_slot_unfilled(self, empty_exercise_repo):
        selector = ExerciseSelector(empty_exercise_repo)
        slot = DailySlot(category=C, pattern="Squat", target_muscle="Quads")

        assert selector.select(slot) is None
        assert len(empty_exercise_repo.find_calls) == 4

    def test_unfillable_category(self):
        repo = FakeExerciseRepository()
        repo.seed([
            {
                "id": "bicep_curl_dumbbell",
                "name": "Dumbbell Bicep Curl",
                "category": "Isolation",
                "primary_muscle": "Biceps",
            },
        ])
        selector = ExerciseSelector(repo)

        assert selector.select(DailySlot(category=C, pattern="Squat")) is None

    def test_query_limit_keeps_highest_tier(self):
        """A tier-1 lift sorting after a full page of tier-3 matches is still chosen."""
        repo = FakeExerciseRepository()
        repo.seed([
            {
                "id": f"a_squat_{n:02d}",
                "name": f"Squat Variation {n}",
                "category": "Compound",
                "pattern": "Squat",
                "primary_muscle": "Quads",
                "tier": 3,
            }
            for n in range(50)
        ] + [
            {
                "id": "z_back_squat",
                "name": "Back Squat",
                "category": "Compound",
                "pattern": "Squat",
                "primary_muscle": "Quads",
                "tier": 1,
            },
        ])
        selector = ExerciseSelector(repo, query_limit=Settings(_env_file=None).selection_query_limit)

        exercise = selector.select(DailySlot(category=C, pattern="Squat"))

        assert exercise.id == "z_back_squat"

    def test_query_limit_with_equal_tiers_keeps_lowest_id(self, fake_exercise_repo):
        selector = ExerciseSelector(fake_exercise_repo, query_limit=1)
        slot = DailySlot(category=I)

        exercise = selector.select(slot, frozenset({"bench_press_fly_dumbbell"}))

        assert exercise.id == "bicep_curl_dumbbell"

    def test_selection_is_deterministic(self, selector):
        slot = DailySlot(category=I, target_muscle="Abs")

        assert selector.select(slot) == selector.select(slot)
        assert selector.select(slot).id == "cable_crunch"
