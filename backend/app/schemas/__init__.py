"""Pydantic schemas for API validation."""
from app.schemas.common import (
    ChartData,
    ChartDataset,
    MacroProgress,
    Notice,
    NoticeSeverity,
)
from app.schemas.workout import (
    Exercise,
    ExerciseCreate,
    WorkoutSummary,
)
from app.schemas.nutrition import (
    Meal,
    MealCreate,
    NutritionTotals,
    NutritionSummary,
)
from app.schemas.tracking import (
    ProgressEntry,
    ProgressEntryCreate,
    ProgressSummary,
)
from app.schemas.dashboard import DashboardSummary

__all__ = [
    # Common
    "ChartData",
    "ChartDataset",
    "MacroProgress",
    "Notice",
    "NoticeSeverity",
    # Workout
    "Exercise",
    "ExerciseCreate",
    "WorkoutSummary",
    # Nutrition
    "Meal",
    "MealCreate",
    "NutritionTotals",
    "NutritionSummary",
    # Progress
    "ProgressEntry",
    "ProgressEntryCreate",
    "ProgressSummary",
    # Dashboard
    "DashboardSummary",
]
