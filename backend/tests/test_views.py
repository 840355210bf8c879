"""Tests for the domain views."""
import pytest
import pytest_asyncio

from app.schemas.common import NoticeSeverity
from app.schemas.nutrition import Meal
from app.schemas.tracking import ProgressEntry
from app.schemas.workout import Exercise
from app.services.dashboard_view import DashboardView
from app.services.errors import ValidationRejected
from app.services.nutrition_view import NutritionView
from app.services.progress_view import ProgressView
from app.services.record_view import ViewState
from app.services.workout_view import WorkoutView

TODAY = "2024-05-01"


@pytest_asyncio.fixture
async def workout(store, settings):
    view = WorkoutView.from_store(store, settings)
    await view.activate()
    return view


@pytest_asyncio.fixture
async def nutrition(store, settings):
    view = NutritionView.from_store(store, settings)
    await view.activate()
    return view


@pytest_asyncio.fixture
async def progress(store, settings):
    view = ProgressView.from_store(store, settings)
    await view.activate()
    return view


class TestWorkoutView:
    """Tests for adding and deleting exercises."""

    @pytest.mark.asyncio
    async def test_seeded_on_first_activation(self, workout):
        """Test the seed exercises are shown on first activation."""
        assert [e.name for e in workout.records] == ["Bench Press", "Squats"]
        assert workout.state == ViewState.IDLE

    @pytest.mark.asyncio
    async def test_add_row(self, store, workout):
        """Test adding an exercise persists it and updates the totals."""
        draft = {"name": "Row", "sets": 3, "reps": 12, "weight": 40}
        record = await workout.add(draft)

        assert record == Exercise(name="Row", sets=3, reps=12, weight=40)
        assert len(workout.records) == 3
        assert workout.records[-1] == record
        assert store.items["workoutExercises"] == workout.repository.encode(workout.records)

        summary = workout.summary(TODAY)
        assert summary.workout_minutes == (3 + 4 + 3) * 2
        assert summary.total_sets == 10
        assert summary.exercise_count == 3

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, store, workout):
        """Test a blank name leaves the list and the store untouched."""
        with pytest.raises(ValidationRejected):
            await workout.add({"name": "", "sets": 1, "reps": 1, "weight": 0})
        assert len(workout.records) == 2
        assert "workoutExercises" not in store.items

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "draft",
        [
            {"name": "   ", "sets": 3, "reps": 10, "weight": 20},
            {"name": "Curl", "sets": 0, "reps": 10, "weight": 20},
            {"name": "Curl", "sets": 3, "reps": 0, "weight": 20},
            {"name": "Curl", "sets": 3, "reps": 10, "weight": -1},
            {"name": "Curl", "sets": "three", "reps": 10, "weight": 20},
        ],
    )
    async def test_invalid_drafts(self, workout, draft):
        """Test every invalid draft gets the combined rejection message."""
        with pytest.raises(ValidationRejected) as exc_info:
            await workout.add(draft)
        assert exc_info.value.message == WorkoutView.rejection_message

    @pytest.mark.asyncio
    async def test_zero_weight_allowed(self, workout):
        """Test bodyweight exercises with zero weight are accepted."""
        await workout.add({"name": "Push-up", "sets": 3, "reps": 15, "weight": 0})
        assert workout.records[-1].weight == 0

    @pytest.mark.asyncio
    async def test_rejection_is_idempotent(self, store, workout):
        """Test repeated rejected submits never write the store."""
        await workout.repository.save(workout.records)
        before = store.items["workoutExercises"]

        workout.edit(name="", sets=1, reps=1, weight=0)
        for _ in range(3):
            notice = await workout.submit()
            assert notice.severity == NoticeSeverity.ERROR

        assert store.items["workoutExercises"] == before
        assert len(workout.records) == 2

    @pytest.mark.asyncio
    async def test_rejected_submit_keeps_draft(self, workout):
        """Test a rejected submit keeps the draft for correction."""
        workout.edit(name="", sets=2)
        assert workout.state == ViewState.EDITING

        notice = await workout.submit()

        assert notice.message == WorkoutView.rejection_message
        assert notice.auto_hide_ms == 3000
        assert workout.state == ViewState.IDLE
        assert workout.draft == {"name": "", "sets": 2, "reps": 0, "weight": 0}

    @pytest.mark.asyncio
    async def test_accepted_submit_clears_draft(self, workout):
        """Test an accepted submit resets the draft."""
        workout.edit(name="Deadlift", sets=5, reps=5, weight=100)
        notice = await workout.submit()

        assert notice.severity == NoticeSeverity.SUCCESS
        assert notice.message == "Exercise added successfully!"
        assert workout.draft == WorkoutView.blank_draft
        assert workout.records[-1].name == "Deadlift"

    @pytest.mark.asyncio
    async def test_added_exercise_survives_reactivation(self, store, settings, workout):
        """Test an added exercise is read back by a new view."""
        await workout.add({"name": "Row", "sets": 3, "reps": 12, "weight": 40})

        reopened = WorkoutView.from_store(store, settings)
        await reopened.activate()
        assert reopened.records == workout.records

    @pytest.mark.asyncio
    async def test_dated_exercises_from_other_days_not_counted(self, workout):
        """Test exercises dated another day are not counted."""
        await workout.add({"name": "Run", "sets": 1, "reps": 1, "weight": 0, "date": "2024-04-30"})
        assert workout.summary(TODAY).workout_minutes == 14


class TestNutritionView:
    """Tests for meals and macro progress."""

    @pytest.mark.asyncio
    async def test_seeded_totals(self, nutrition):
        """Test the seeded meal totals."""
        summary = nutrition.summary(TODAY)
        assert summary.totals.calories == 1100
        assert summary.totals.protein == 55
        assert summary.totals.carbs == 105
        assert summary.totals.fat == 40
        assert summary.totals.water_l == 0

    @pytest.mark.asyncio
    async def test_progress_against_goals(self, nutrition):
        """Test macro progress against the default goals."""
        progress = {p.label: p for p in nutrition.summary(TODAY).progress}
        assert progress["Calories"].goal == 2000
        assert progress["Calories"].percent_of_goal == 55.0
        assert progress["Protein"].percent_of_goal == pytest.approx(36.7)
        assert progress["Fat"].goal == 65

    @pytest.mark.asyncio
    async def test_over_goal(self, nutrition):
        """Test an over-goal total keeps its percentage and fills the bar."""
        await nutrition.add({"name": "Feast", "calories": 1500, "protein": 10, "carbs": 10, "fat": 10})
        calories = nutrition.summary(TODAY).progress[0]
        assert calories.percent_of_goal == 130.0
        assert calories.bar_value == 100.0

    @pytest.mark.asyncio
    async def test_charts(self, nutrition):
        """Test the calorie and macro trend charts."""
        summary = nutrition.summary(TODAY)
        assert summary.calories_chart.labels[-1] == "Today"
        assert len(summary.calories_chart.labels) == 7
        assert summary.calories_chart.datasets[0].values[-1] == 1100
        assert [d.label for d in summary.macros_chart.datasets] == ["Protein (g)", "Carbs (g)", "Fat (g)"]
        assert summary.macros_chart.datasets[0].values == [90, 110, 100, 120, 105, 95, 55]

    @pytest.mark.asyncio
    async def test_meals_from_other_days_excluded(self, nutrition):
        """Test meals dated another day are listed but not summed."""
        await nutrition.add(
            {"name": "Old", "calories": 900, "protein": 1, "carbs": 1, "fat": 1, "date": "2024-04-20"}
        )
        assert nutrition.summary(TODAY).totals.calories == 1100
        assert len(nutrition.summary(TODAY).meals) == 3

    @pytest.mark.asyncio
    async def test_water(self, nutrition):
        """Test water intake is summed in litres."""
        await nutrition.add({"name": "Shake", "calories": 200, "protein": 25, "carbs": 5, "fat": 3, "water": 0.5})
        assert nutrition.summary(TODAY).totals.water_l == 0.5

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,value",
        [("name", ""), ("calories", -1), ("protein", -1), ("carbs", -1), ("fat", -1), ("water", -0.1)],
    )
    async def test_invalid_meal(self, nutrition, field, value):
        """Test each invalid field rejects the meal."""
        draft = {"name": "Dinner", "calories": 500, "protein": 30, "carbs": 50, "fat": 20, field: value}
        nutrition.edit(**draft)
        notice = await nutrition.submit()
        assert notice.severity == NoticeSeverity.ERROR
        assert notice.message == NutritionView.rejection_message
        assert len(nutrition.records) == 2

    @pytest.mark.asyncio
    async def test_zero_values_allowed(self, nutrition):
        """Test zero calories and macros are accepted."""
        nutrition.edit(name="Black coffee", calories=0, protein=0, carbs=0, fat=0)
        notice = await nutrition.submit()
        assert notice.message == "Meal added successfully!"
        assert nutrition.records[-1] == Meal(name="Black coffee", calories=0, protein=0, carbs=0, fat=0)


class TestProgressView:
    """Tests for body progress entries."""

    @pytest.mark.asyncio
    async def test_delete_first_entry(self, store, progress):
        """Test deleting the first entry persists the rest."""
        removed = await progress.delete(0)

        assert removed.date == "2024-01-01"
        assert progress.records == [
            ProgressEntry(date="2024-01-15", weight=74, body_fat=19, notes="Good progress"),
        ]
        assert store.items["progressEntries"] == progress.repository.encode(progress.records)

    @pytest.mark.asyncio
    async def test_delete_keeps_relative_order(self, progress):
        """Test deleting from the middle keeps the order of the rest."""
        await progress.add({"date": "2024-02-01", "weight": 73, "bodyFat": 18, "notes": ""})
        await progress.delete(1)
        assert [e.date for e in progress.records] == ["2024-01-01", "2024-02-01"]

    @pytest.mark.asyncio
    async def test_delete_out_of_range(self, store, progress):
        """Test an out-of-range delete raises and writes nothing."""
        with pytest.raises(IndexError):
            await progress.delete(2)
        with pytest.raises(IndexError):
            await progress.delete(-1)
        assert "progressEntries" not in store.items

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "draft",
        [
            {"date": "", "weight": 70, "bodyFat": 15, "notes": ""},
            {"date": "2024-02-01", "weight": 0, "bodyFat": 15, "notes": ""},
            {"date": "2024-02-01", "weight": 70, "bodyFat": -1, "notes": ""},
        ],
    )
    async def test_invalid_entries(self, progress, draft):
        """Test invalid progress entries are rejected."""
        with pytest.raises(ValidationRejected):
            await progress.add(draft)

    @pytest.mark.asyncio
    async def test_zero_body_fat_allowed(self, progress):
        """Test a zero body fat reading is accepted."""
        record = await progress.add({"date": "2024-02-01", "weight": 70, "bodyFat": 0, "notes": "lean"})
        assert record.body_fat == 0

    @pytest.mark.asyncio
    async def test_summary_chart(self, progress):
        """Test the weight and body fat chart."""
        summary = progress.summary()
        assert summary.chart.labels == ["2024-01-01", "2024-01-15"]
        weight, body_fat = summary.chart.datasets
        assert weight.values == [75, 74]
        assert weight.style["yAxisID"] == "y"
        assert body_fat.values == [20, 19]
        assert body_fat.style["yAxisID"] == "y1"
        assert summary.weight_current == 74
        assert summary.weight_change == -1

    @pytest.mark.asyncio
    async def test_summary_without_entries(self, progress):
        """Test the summary of an empty history."""
        await progress.delete(0)
        await progress.delete(0)
        summary = progress.summary()
        assert summary.chart.labels == []
        assert summary.weight_current is None
        assert summary.weight_change is None


class TestDashboardView:
    """Tests for the cross-domain summary."""

    @pytest.mark.asyncio
    async def test_seeded_dashboard(self, store, settings):
        """Test the dashboard built from the seed data."""
        view = DashboardView(store, settings)
        await view.activate()
        summary = view.summary(TODAY)

        assert summary.date == TODAY
        assert summary.workout_minutes == 14
        assert summary.workout_headline == "Bench Press, Squats"
        assert summary.calories_consumed == 1100
        assert summary.calories_goal == 2000
        assert summary.calories_percent_of_goal == 55.0
        assert summary.water_l == 0
        assert summary.water_goal_l == 2.5
        assert summary.weight_current == 74
        assert summary.weight_chart.labels == ["2024-01-01", "2024-01-15"]
        assert [d.label for d in summary.weight_chart.datasets] == ["Weight (kg)"]
        assert summary.recent_notes == ["Starting point", "Good progress"]

    @pytest.mark.asyncio
    async def test_reflects_other_views(self, store, settings, workout, nutrition):
        """Test the dashboard reflects changes made in other views."""
        await workout.add({"name": "Row", "sets": 3, "reps": 12, "weight": 40})
        await nutrition.delete(0)

        view = DashboardView(store, settings)
        await view.activate()
        summary = view.summary(TODAY)

        assert summary.workout_minutes == 20
        assert summary.exercises_count == 3
        assert summary.calories_consumed == 650
