"""
FastAPI Dependency Providers for the Mesoplan API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and service providers create new instances per-request

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_exercise_repo] = lambda: FakeExerciseRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

from mesoplan.application.ports import ExerciseRepository, PlanRepository
from mesoplan.backend.settings import Settings, get_settings as _get_settings
from mesoplan.infrastructure.db import SupabaseExerciseRepository, SupabasePlanRepository
from mesoplan.services.plan_generator import PlanGenerator
from mesoplan.services.plan_validator import PlanValidator
from mesoplan.services.template_catalog import TemplateCatalog


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from mesoplan.backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_exercise_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseRepository:
    """
    Get ExerciseRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        ExerciseRepository: Supabase-backed exercise repository
    """
    return SupabaseExerciseRepository(client)


def get_plan_repo(
    client: Client = Depends(get_supabase_client_required),
) -> PlanRepository:
    """
    Get PlanRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        PlanRepository: Supabase-backed plan repository
    """
    return SupabasePlanRepository(client)


# =============================================================================
# Service Providers
# =============================================================================


def get_plan_generator(
    settings: Settings = Depends(get_settings),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> PlanGenerator:
    """
    Create a PlanGenerator wired to the exercise library.

    Args:
        settings: Application settings
        exercise_repo: Exercise repository

    Returns:
        Configured PlanGenerator instance
    """
    return PlanGenerator(
        exercise_repo=exercise_repo,
        template_catalog=TemplateCatalog(goal_fallback=settings.template_goal_fallback),
        query_limit=settings.selection_query_limit,
    )


def get_plan_validator() -> PlanValidator:
    """Get a PlanValidator instance."""
    return PlanValidator()
