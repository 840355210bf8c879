"""Workout schemas."""
from typing import Any, Optional, List

from pydantic import BaseModel, ConfigDict

from app.schemas.common import Notice


class Exercise(BaseModel):
    """One logged exercise in today's workout."""
    name: str
    sets: int
    reps: int
    weight: float
    date: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ExerciseCreate(BaseModel):
    """
    Draft submitted from the add-exercise form.

    Fields are left loose so that a value of the wrong type is rejected by
    the view with its combined notice.
    """
    name: Any = ""
    sets: Any = 0
    reps: Any = 0
    weight: Any = 0


class WorkoutSummary(BaseModel):
    """Today's workout list and derived totals."""
    exercises: List[Exercise]
    exercise_count: int
    total_sets: int
    workout_minutes: int
    notice: Optional[Notice] = None
