"""Backend services."""
from app.services.repository import RecordRepository
from app.services.storage import InMemoryKeyValueStore, KeyValueStore, SqlKeyValueStore
from app.services.workout_view import WorkoutView
from app.services.nutrition_view import NutritionView
from app.services.progress_view import ProgressView
from app.services.dashboard_view import DashboardView

__all__ = [
    "RecordRepository",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SqlKeyValueStore",
    "WorkoutView",
    "NutritionView",
    "ProgressView",
    "DashboardView",
]
