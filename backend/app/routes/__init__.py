"""API routes."""
from app.routes.dashboard import router as dashboard_router
from app.routes.workout import router as workout_router
from app.routes.nutrition import router as nutrition_router
from app.routes.tracking import router as tracking_router

__all__ = [
    "dashboard_router",
    "workout_router",
    "nutrition_router",
    "tracking_router",
]
