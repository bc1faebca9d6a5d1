"""
Router package for the Mesoplan API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- generation: Plan generation and validation
- plans: Stored plan retrieval and deletion
"""

from mesoplan.api.routers.generation import router as generation_router
from mesoplan.api.routers.health import router as health_router
from mesoplan.api.routers.plans import router as plans_router

__all__ = [
    "generation_router",
    "health_router",
    "plans_router",
]
