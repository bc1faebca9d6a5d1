"""
Exercise library seeding.

Loads exercise definitions from a JSON array and writes them into an empty
library. Accepts both the snake_case shape of the exercises table and the
camelCase export format (`type`, `primaryMuscle`, `tier: "Tier1"`, a single
`equipment` string).
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Sequence

from mesoplan.application.ports import ExerciseRepository
from mesoplan.models.exercise import Exercise

logger = logging.getLogger(__name__)

# camelCase export keys -> model fields
FIELD_ALIASES: Dict[str, str] = {
    "type": "category",
    "shortName": "short_name",
    "primaryMuscle": "primary_muscle",
    "secondaryMuscles": "secondary_muscles",
    "defaultTempo": "default_tempo",
    "isCompetitionLift": "is_competition_lift",
    "isUserCreated": "is_user_created",
}

TIER_PATTERN = re.compile(r"^tier\s*([123])$", re.IGNORECASE)


def _normalize_record(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Map an exported exercise object onto Exercise fields."""
    record = {FIELD_ALIASES.get(key, key): value for key, value in raw.items()}

    equipment = record.get("equipment")
    if equipment is None:
        record["equipment"] = []
    elif isinstance(equipment, str):
        record["equipment"] = [equipment]

    tier = record.get("tier")
    if tier is None:
        record.pop("tier", None)
    elif isinstance(tier, str):
        match = TIER_PATTERN.match(tier.strip())
        if not match:
            raise ValueError(f"Unrecognised tier {tier!r} for exercise {record.get('id')!r}")
        record["tier"] = int(match.group(1))

    return record


def load_exercises(path: Path | str) -> List[Exercise]:
    """
    Parse an exercise library file.

    Args:
        path: Path to a JSON array of exercise objects

    Returns:
        Parsed exercises

    Raises:
        ValueError: If the file is not a JSON array or a record is invalid
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of exercises in {path}")

    return [Exercise.model_validate(_normalize_record(raw)) for raw in data]


def seed_exercise_library(repo: ExerciseRepository, exercises: Sequence[Exercise]) -> int:
    """
    Seed the library if it is empty.

    Args:
        repo: Exercise repository to write to
        exercises: Exercises to insert

    Returns:
        Number of exercises inserted (0 if the library was already populated)
    """
    existing = repo.count()
    if existing > 0:
        logger.info(f"Library already populated ({existing} exercises)")
        return 0

    inserted = repo.add_many(exercises)
    logger.info(f"Seeded exercise library with {inserted} exercises")
    return inserted
