"""Nutrition tracker view."""
from datetime import date
from typing import Optional, Union

from app.config import Settings, get_settings
from app.schemas.common import ChartData, ChartDataset, MacroProgress
from app.schemas.nutrition import Meal, NutritionSummary, NutritionTotals
from app.services.aggregator import (
    filter_by_calendar_day,
    percent_of_goal,
    progress_bar_value,
    series_from_history,
    sum_field,
)
from app.services.record_view import RecordView
from app.services.repository import RecordRepository
from app.services.storage import KeyValueStore

SEED_MEALS = (
    Meal(name="Breakfast", calories=450, protein=20, carbs=45, fat=15),
    Meal(name="Lunch", calories=650, protein=35, carbs=60, fat=25),
)

HISTORY_LABELS = ["6d ago", "5d ago", "4d ago", "3d ago", "2d ago", "Yesterday", "Today"]

# Illustrative values for the six days before today
CALORIES_BACKFILL = (1800, 2000, 1750, 2100, 1900, 1850)
PROTEIN_BACKFILL = (90, 110, 100, 120, 105, 95)
CARBS_BACKFILL = (200, 220, 210, 230, 215, 205)
FAT_BACKFILL = (50, 60, 55, 65, 58, 52)

CALORIES_STYLE = {
    "borderColor": "rgb(255, 99, 132)",
    "backgroundColor": "rgba(255, 99, 132, 0.2)",
    "tension": 0.2,
}
PROTEIN_STYLE = {
    "borderColor": "rgb(54, 162, 235)",
    "backgroundColor": "rgba(54, 162, 235, 0.2)",
    "tension": 0.2,
}
CARBS_STYLE = {
    "borderColor": "rgb(255, 206, 86)",
    "backgroundColor": "rgba(255, 206, 86, 0.2)",
    "tension": 0.2,
}
FAT_STYLE = {
    "borderColor": "rgb(75, 192, 192)",
    "backgroundColor": "rgba(75, 192, 192, 0.2)",
    "tension": 0.2,
}


def macro_progress(label: str, unit: str, total: float, goal: float) -> MacroProgress:
    """Progress of one daily total, with the raw and the bar-saturated percentage."""
    percent = percent_of_goal(total, goal)
    return MacroProgress(
        label=label,
        unit=unit,
        total=total,
        goal=goal,
        percent_of_goal=round(percent, 1),
        bar_value=round(progress_bar_value(percent), 1),
    )


def daily_totals(meals: list[Meal], day: Union[date, str, None] = None) -> NutritionTotals:
    """Macro totals of the meals eaten on one day."""
    todays = filter_by_calendar_day(meals, today=day)
    return NutritionTotals(
        calories=int(sum_field(todays, "calories")),
        protein=int(sum_field(todays, "protein")),
        carbs=int(sum_field(todays, "carbs")),
        fat=int(sum_field(todays, "fat")),
        water_l=round(sum_field(todays, "water"), 2),
    )


class NutritionView(RecordView[Meal]):
    """Today's meals with macro progress and trend charts."""

    blank_draft = {"name": "", "calories": 0, "protein": 0, "carbs": 0, "fat": 0}
    success_message = "Meal added successfully!"
    rejection_message = "Please enter a valid meal name and non-negative values for all fields."

    def __init__(self, repository: RecordRepository[Meal], settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        super().__init__(repository, notice_auto_hide_ms=self.settings.notice_auto_hide_ms)

    @classmethod
    def from_store(cls, store: KeyValueStore, settings: Optional[Settings] = None) -> "NutritionView":
        settings = settings or get_settings()
        repository = RecordRepository(store, settings.nutrition_meals_key, Meal, SEED_MEALS)
        return cls(repository, settings)

    def is_valid(self, record: Meal) -> bool:
        return (
            bool(record.name.strip())
            and record.calories >= 0
            and record.protein >= 0
            and record.carbs >= 0
            and record.fat >= 0
            and (record.water or 0) >= 0
        )

    def summary(self, day: Union[date, str, None] = None) -> NutritionSummary:
        totals = daily_totals(self.records, day)
        goals = self.settings
        progress = [
            macro_progress("Calories", "kcal", totals.calories, goals.calorie_goal),
            macro_progress("Protein", "g", totals.protein, goals.protein_goal_g),
            macro_progress("Carbs", "g", totals.carbs, goals.carbs_goal_g),
            macro_progress("Fat", "g", totals.fat, goals.fat_goal_g),
        ]

        calories_chart = ChartData(
            labels=HISTORY_LABELS,
            datasets=[
                ChartDataset(
                    label="Calories",
                    values=series_from_history(self.records, "calories", CALORIES_BACKFILL, today=day),
                    style=CALORIES_STYLE,
                ),
            ],
        )
        macros_chart = ChartData(
            labels=HISTORY_LABELS,
            datasets=[
                ChartDataset(
                    label="Protein (g)",
                    values=series_from_history(self.records, "protein", PROTEIN_BACKFILL, today=day),
                    style=PROTEIN_STYLE,
                ),
                ChartDataset(
                    label="Carbs (g)",
                    values=series_from_history(self.records, "carbs", CARBS_BACKFILL, today=day),
                    style=CARBS_STYLE,
                ),
                ChartDataset(
                    label="Fat (g)",
                    values=series_from_history(self.records, "fat", FAT_BACKFILL, today=day),
                    style=FAT_STYLE,
                ),
            ],
        )

        return NutritionSummary(
            meals=self.records,
            totals=totals,
            progress=progress,
            calories_chart=calories_chart,
            macros_chart=macros_chart,
            notice=self.notice,
        )
