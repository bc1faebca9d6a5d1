"""
Pytest fixtures for mesoplan tests.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from mesoplan.api.deps import get_exercise_repo, get_plan_repo
from mesoplan.backend.main import create_app
from mesoplan.backend.settings import Settings
from mesoplan.models.profile import UserProfile
from mesoplan.services.plan_generator import PlanGenerator
from mesoplan.services.plan_validator import PlanValidator
from tests.fakes import FakeExerciseRepository, FakePlanRepository


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "test-supabase-key")
    monkeypatch.setenv("ENVIRONMENT", "test")


# ---------------------------------------------------------------------------
# Fake Repository Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_exercise_repo() -> FakeExerciseRepository:
    """Exercise repository seeded with the default library."""
    repo = FakeExerciseRepository()
    repo.seed_default_exercises()
    return repo


@pytest.fixture
def empty_exercise_repo() -> FakeExerciseRepository:
    """Exercise repository with no exercises."""
    return FakeExerciseRepository()


@pytest.fixture
def fake_plan_repo() -> FakePlanRepository:
    """Create a fake plan repository for testing."""
    return FakePlanRepository()


# ---------------------------------------------------------------------------
# Domain Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def intermediate_strength_profile() -> UserProfile:
    """Intermediate lifter, strength goal, four days a week."""
    return UserProfile(training_age="Intermediate", goal="Strength", days_available=4)


@pytest.fixture
def generator(fake_exercise_repo) -> PlanGenerator:
    """Plan generator over the default library."""
    return PlanGenerator(exercise_repo=fake_exercise_repo)


@pytest.fixture
def validator() -> PlanValidator:
    return PlanValidator()


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        _env_file=None,
    )


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient without repository overrides.
    Properly cleans up dependency overrides after each test.
    """
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client_with_fakes(app, fake_exercise_repo, fake_plan_repo) -> Generator[TestClient, None, None]:
    """TestClient with the exercise and plan repositories replaced by fakes."""
    app.dependency_overrides[get_exercise_repo] = lambda: fake_exercise_repo
    app.dependency_overrides[get_plan_repo] = lambda: fake_plan_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
