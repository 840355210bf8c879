"""Workout planner view."""
from datetime import date
from typing import Optional, Union

from app.config import Settings, get_settings
from app.schemas.workout import Exercise, WorkoutSummary
from app.services.aggregator import filter_by_calendar_day, sum_field, workout_minutes
from app.services.record_view import RecordView
from app.services.repository import RecordRepository
from app.services.storage import KeyValueStore

SEED_EXERCISES = (
    Exercise(name="Bench Press", sets=3, reps=10, weight=60),
    Exercise(name="Squats", sets=4, reps=8, weight=80),
)


class WorkoutView(RecordView[Exercise]):
    """Today's exercise list."""

    blank_draft = {"name": "", "sets": 0, "reps": 0, "weight": 0}
    success_message = "Exercise added successfully!"
    rejection_message = (
        "Please enter a valid exercise name, positive sets/reps, and non-negative weight."
    )

    def __init__(self, repository: RecordRepository[Exercise], settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        super().__init__(repository, notice_auto_hide_ms=self.settings.notice_auto_hide_ms)

    @classmethod
    def from_store(cls, store: KeyValueStore, settings: Optional[Settings] = None) -> "WorkoutView":
        settings = settings or get_settings()
        repository = RecordRepository(store, settings.workout_exercises_key, Exercise, SEED_EXERCISES)
        return cls(repository, settings)

    def is_valid(self, record: Exercise) -> bool:
        return (
            bool(record.name.strip())
            and record.sets > 0
            and record.reps > 0
            and record.weight >= 0
        )

    def summary(self, day: Union[date, str, None] = None) -> WorkoutSummary:
        todays = filter_by_calendar_day(self.records, today=day)
        return WorkoutSummary(
            exercises=self.records,
            exercise_count=len(self.records),
            total_sets=int(sum_field(todays, "sets")),
            workout_minutes=int(workout_minutes(todays, self.settings.minutes_per_set)),
            notice=self.notice,
        )
