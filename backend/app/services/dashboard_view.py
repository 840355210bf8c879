"""Dashboard view combining all record domains."""
from datetime import date
from typing import Optional, Union

from app.config import Settings, get_settings
from app.schemas.dashboard import DashboardSummary
from app.services.aggregator import filter_by_calendar_day, percent_of_goal, workout_minutes
from app.services.nutrition_view import NutritionView, daily_totals
from app.services.progress_view import ProgressView, weight_chart
from app.services.storage import KeyValueStore
from app.services.workout_view import WorkoutView


class DashboardView:
    """Read-only summary across the workout, nutrition and progress stores."""

    def __init__(self, store: KeyValueStore, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.workout = WorkoutView.from_store(store, self.settings)
        self.nutrition = NutritionView.from_store(store, self.settings)
        self.progress = ProgressView.from_store(store, self.settings)

    async def activate(self) -> None:
        """Load every domain's records."""
        await self.workout.activate()
        await self.nutrition.activate()
        await self.progress.activate()

    def summary(self, day: Union[date, str, None] = None) -> DashboardSummary:
        if day is None:
            day = date.today()
        day_str = day.isoformat() if isinstance(day, date) else day[:10]

        exercises = filter_by_calendar_day(self.workout.records, today=day_str)
        totals = daily_totals(self.nutrition.records, day_str)
        progress = self.progress.summary()

        return DashboardSummary(
            date=day_str,
            workout_minutes=int(workout_minutes(exercises, self.settings.minutes_per_set)),
            workout_headline=", ".join(exercise.name for exercise in exercises),
            exercises_count=len(exercises),
            calories_consumed=totals.calories,
            calories_goal=self.settings.calorie_goal,
            calories_percent_of_goal=round(percent_of_goal(totals.calories, self.settings.calorie_goal), 1),
            water_l=totals.water_l,
            water_goal_l=self.settings.water_goal_l,
            weight_current=progress.weight_current,
            weight_change=progress.weight_change,
            weight_chart=weight_chart(self.progress.records, include_body_fat=False),
            recent_notes=[entry.notes for entry in self.progress.records[-3:] if entry.notes],
        )
