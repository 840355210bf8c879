"""Dashboard schemas."""
from typing import Optional, List

from pydantic import BaseModel

from app.schemas.common import ChartData


class DashboardSummary(BaseModel):
    """Cross-domain summary for the landing page."""
    date: str

    # Workout
    workout_minutes: int = 0
    workout_headline: str = ""
    exercises_count: int = 0

    # Nutrition
    calories_consumed: int = 0
    calories_goal: int
    calories_percent_of_goal: float = 0
    water_l: float = 0
    water_goal_l: float

    # Progress
    weight_current: Optional[float] = None
    weight_change: Optional[float] = None
    weight_chart: ChartData
    recent_notes: List[str] = []
