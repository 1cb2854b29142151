"""API routers for different resource types."""

from dynasty.api.routers.market import router as market_router
from dynasty.api.routers.results import router as results_router
from dynasty.api.routers.settings import router as settings_router
from dynasty.api.routers.teams import router as teams_router

__all__ = [
    "market_router",
    "results_router",
    "settings_router",
    "teams_router",
]
