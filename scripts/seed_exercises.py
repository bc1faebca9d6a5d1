#!/usr/bin/env python3
"""
Seed the exercise library from a JSON file.

Inserts the exercises only when the library is empty, so running it twice
is harmless.

Usage:
    python scripts/seed_exercises.py PATH [--dry-run]

Options:
    --dry-run    Parse and report the file without writing to the database

Requires SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY (environment or .env).
"""
import argparse
import sys

from supabase import create_client

from mesoplan.backend.settings import get_settings
from mesoplan.infrastructure.db import SupabaseExerciseRepository
from mesoplan.infrastructure.library_seeder import load_exercises, seed_exercise_library


def main():
    parser = argparse.ArgumentParser(
        description="Seed the exercise library from a JSON file"
    )
    parser.add_argument(
        "path",
        help="JSON array of exercise definitions"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse the file without writing to the database"
    )

    args = parser.parse_args()

    exercises = load_exercises(args.path)
    print(f"Loaded {len(exercises)} exercises from {args.path}")

    if args.dry_run:
        print("DRY RUN MODE - No changes will be made")
        return

    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_key:
        print("ERROR: SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        sys.exit(1)

    repo = SupabaseExerciseRepository(create_client(settings.supabase_url, settings.supabase_key))
    inserted = seed_exercise_library(repo, exercises)
    if inserted:
        print(f"Seeded {inserted} exercises")
    else:
        print("Library already populated, nothing to do")


if __name__ == "__main__":
    main()
