"""Nutrition schemas."""
from typing import Any, Optional, List

from pydantic import BaseModel, ConfigDict

from app.schemas.common import ChartData, MacroProgress, Notice


class Meal(BaseModel):
    """A single eaten meal."""
    name: str
    calories: int
    protein: int
    carbs: int
    fat: int
    water: Optional[float] = None
    date: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class MealCreate(BaseModel):
    """Draft submitted from the add-meal form; values are checked by the view."""
    name: Any = ""
    calories: Any = 0
    protein: Any = 0
    carbs: Any = 0
    fat: Any = 0
    water: Any = None
    date: Any = None


class NutritionTotals(BaseModel):
    """Summed macros for one day."""
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0
    water_l: float = 0


class NutritionSummary(BaseModel):
    """Meal list, daily progress and trend charts."""
    meals: List[Meal]
    totals: NutritionTotals
    progress: List[MacroProgress]
    calories_chart: ChartData
    macros_chart: ChartData
    notice: Optional[Notice] = None
