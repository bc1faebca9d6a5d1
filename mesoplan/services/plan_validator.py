"""
Plan validator service for checking generated plans.

Validates a plan against its blueprint:
- Hard constraints: every week present, one session per template day,
  no empty sessions
- Soft constraints: week-1 working sets per primary muscle against the
  strategy's volume bounds

Nothing here raises; every finding lands in the report.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from mesoplan.models.blueprint import MesocycleBlueprint
from mesoplan.models.plan import Plan, WorkoutSession

logger = logging.getLogger(__name__)


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Structural violation
    WARNING = "warning"  # Volume outside target
    INFO = "info"  # Informational only


@dataclass
class ValidationIssue:
    """A single validation issue."""

    message: str
    severity: ValidationSeverity
    location: Optional[str] = None  # e.g., "Week 3, Squat Focus"


@dataclass
class ValidationReport:
    """Result of plan validation."""

    is_valid: bool
    hard_constraints_met: bool
    soft_constraints_score: int
    log: str
    failed_weeks: List[int] = field(default_factory=list)
    weekly_volume: Dict[str, int] = field(default_factory=dict)
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationIssue]:
        """Get error-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        """Get warning-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]


class PlanValidator:
    """
    Validates generated plans.

    Checks:
    1. Structure - week coverage, session count per week, empty sessions
    2. Volume - week-1 sets per primary muscle vs. [vol_min, vol_max]

    Secondary muscles are not counted towards volume.
    """

    SCORE_IN_RANGE = 10
    SCORE_UNDER = -5
    SCORE_OVER = -2

    # Week 1 is the representative sample for the mesocycle
    VOLUME_SAMPLE_WEEK = 1

    def validate(self, plan: Plan, blueprint: MesocycleBlueprint) -> ValidationReport:
        """
        Validate a plan against its blueprint.

        Args:
            plan: Generated plan
            blueprint: Blueprint the plan was generated from

        Returns:
            ValidationReport; is_valid mirrors the hard constraints
        """
        lines: List[str] = ["Validation Report", "---------------------"]
        issues: List[ValidationIssue] = []

        sessions_by_week: Dict[int, List[WorkoutSession]] = defaultdict(list)
        for session in plan.sessions:
            sessions_by_week[session.week_index].append(session)

        failed_weeks = self._check_structure(sessions_by_week, blueprint, lines, issues)
        hard_constraints_met = not any(i.severity == ValidationSeverity.ERROR for i in issues)
        if hard_constraints_met:
            lines.append("[PASS] All Structural Constraints Passed.")

        weekly_volume = self._primary_muscle_volume(
            sessions_by_week.get(self.VOLUME_SAMPLE_WEEK, [])
        )
        soft_score = self._score_volume(weekly_volume, blueprint, lines, issues)

        logger.info(
            f"Validated plan '{plan.name}': hard={hard_constraints_met}, "
            f"soft_score={soft_score}, issues={len(issues)}"
        )

        return ValidationReport(
            is_valid=hard_constraints_met,
            hard_constraints_met=hard_constraints_met,
            soft_constraints_score=soft_score,
            log="\n".join(lines) + "\n",
            failed_weeks=failed_weeks,
            weekly_volume=weekly_volume,
            issues=issues,
        )

    def _check_structure(
        self,
        sessions_by_week: Dict[int, List[WorkoutSession]],
        blueprint: MesocycleBlueprint,
        lines: List[str],
        issues: List[ValidationIssue],
    ) -> List[int]:
        """
        Check week coverage and session completeness for every week.

        Args:
            sessions_by_week: Plan sessions grouped by week index
            blueprint: Source blueprint
            lines: Log lines to append to
            issues: Issues to append to

        Returns:
            Sorted list of weeks with at least one violation
        """
        lines.append("")
        lines.append("[Hard Constraints]")

        total_weeks = blueprint.strategy.cycle_duration_weeks
        expected_sessions = len(blueprint.template.days)
        failed = set()

        def fail(message: str, location: str, week: Optional[int] = None) -> None:
            lines.append(f"[FAIL] {message}")
            issues.append(ValidationIssue(message, ValidationSeverity.ERROR, location))
            if week is not None:
                failed.add(week)

        if len(sessions_by_week) != total_weeks:
            fail(
                f"Week Count Mismatch: Expected {total_weeks}, found {len(sessions_by_week)}",
                "Plan-wide",
            )
        else:
            lines.append(f"[PASS] Week Count: {total_weeks}")

        for week in range(1, total_weeks + 1):
            week_sessions = sessions_by_week.get(week)
            if not week_sessions:
                fail(f"Missing Week {week}", f"Week {week}", week)
                continue

            if len(week_sessions) != expected_sessions:
                fail(
                    f"Week {week}: Session Count Mismatch. "
                    f"Expected {expected_sessions}, found {len(week_sessions)}",
                    f"Week {week}",
                    week,
                )

            for session in week_sessions:
                if session.is_empty:
                    fail(
                        f"Week {week}, {session.name}: No exercises found.",
                        f"Week {week}, {session.name}",
                        week,
                    )

        return sorted(failed)

    def _primary_muscle_volume(self, sessions: List[WorkoutSession]) -> Dict[str, int]:
        """Sum working sets per primary muscle over the given sessions."""
        volume: Dict[str, int] = defaultdict(int)
        for session in sessions:
            for prescription in session.exercises:
                if prescription.exercise is None:
                    continue
                volume[prescription.exercise.primary_muscle] += prescription.sets
        return {muscle: sets for muscle, sets in sorted(volume.items()) if sets > 0}

    def _score_volume(
        self,
        weekly_volume: Dict[str, int],
        blueprint: MesocycleBlueprint,
        lines: List[str],
        issues: List[ValidationIssue],
    ) -> int:
        """
        Score weekly volume per muscle against the strategy bounds.

        Args:
            weekly_volume: Sets per primary muscle
            blueprint: Source blueprint
            lines: Log lines to append to
            issues: Issues to append to

        Returns:
            Soft-constraint score
        """
        vol_min = blueprint.strategy.vol_min
        vol_max = blueprint.strategy.vol_max

        lines.append("")
        lines.append("[Soft Constraints: Weekly Volume]")
        lines.append(f"Target: {vol_min}-{vol_max} sets/muscle/week")

        score = 0
        for muscle in sorted(weekly_volume):
            volume = weekly_volume[muscle]
            location = f"Week {self.VOLUME_SAMPLE_WEEK}"

            if vol_min <= volume <= vol_max:
                lines.append(f"[PASS] {muscle}: {volume} sets (In Range)")
                score += self.SCORE_IN_RANGE
            elif volume < vol_min:
                message = f"{muscle}: {volume} sets (Under Target {vol_min})"
                lines.append(f"[WARN] {message}")
                issues.append(ValidationIssue(message, ValidationSeverity.WARNING, location))
                score += self.SCORE_UNDER
            else:
                message = f"{muscle}: {volume} sets (Over Target {vol_max})"
                lines.append(f"[WARN] {message}")
                issues.append(ValidationIssue(message, ValidationSeverity.WARNING, location))
                score += self.SCORE_OVER

        return score
