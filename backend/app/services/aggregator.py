"""Pure aggregation helpers over record lists."""
from datetime import date
from typing import Any, Callable, List, Optional, Sequence, Union

FieldSelector = Union[str, Callable[[Any], Any]]

# Estimated minutes spent per working set
DEFAULT_MINUTES_PER_SET = 2


def _select(record: Any, field: FieldSelector) -> Any:
    if callable(field):
        return field(record)
    if isinstance(record, dict):
        return record.get(field)
    return getattr(record, field, None)


def _day_string(day: Union[date, str, None]) -> str:
    if day is None:
        return date.today().isoformat()
    if isinstance(day, date):
        return day.isoformat()
    return day[:10]


def sum_field(records: Sequence[Any], field: FieldSelector) -> float:
    """
    Sum a numeric field across records.

    Missing or None values count as zero, so an empty list sums to 0.
    """
    return sum((_select(record, field) or 0) for record in records)


def filter_by_calendar_day(
    records: Sequence[Any],
    day: Union[date, str, None] = None,
    today: Union[date, str, None] = None,
) -> List[Any]:
    """
    Keep records logged on the given calendar day.

    Only the date portion (YYYY-MM-DD) of a record's `date` is compared.
    Records without a date are treated as logged today.

    Args:
        records: Records to filter
        day: Calendar day to keep (defaults to today)
        today: Date assumed for undated records (defaults to the current date)

    Returns:
        Matching records in their original order
    """
    target = _day_string(day if day is not None else today)
    fallback = _day_string(today)
    return [
        record
        for record in records
        if _day_string(_select(record, "date") or fallback) == target
    ]


def percent_of_goal(total: float, goal: float) -> float:
    """Return total as a percentage of goal. Not clamped; 0 when goal is 0."""
    if not goal:
        return 0.0
    return total / goal * 100


def progress_bar_value(percent: float) -> float:
    """Saturate a percentage to the 0-100 range of a progress indicator."""
    return max(0.0, min(100.0, percent))


def series_from_history(
    records: Sequence[Any],
    field: FieldSelector,
    backfill: Sequence[float],
    day: Union[date, str, None] = None,
    today: Union[date, str, None] = None,
) -> List[float]:
    """
    Build a daily series from fixed history plus one live point.

    There is no stored daily rollup, so earlier days come from `backfill`
    and only the final point is computed from the records of `day`.
    """
    live = sum_field(filter_by_calendar_day(records, day, today), field)
    return [*backfill, live]


def chart_series(records: Sequence[Any], field: FieldSelector) -> List[Any]:
    """One value per record, in list order."""
    return [_select(record, field) for record in records]


def workout_minutes(
    records: Sequence[Any],
    minutes_per_set: int = DEFAULT_MINUTES_PER_SET,
) -> float:
    """Estimate workout duration from the number of sets."""
    return minutes_per_set * sum_field(records, "sets")


def latest(records: Sequence[Any], field: FieldSelector) -> Optional[Any]:
    """Value of a field on the last record, or None for an empty list."""
    if not records:
        return None
    return _select(records[-1], field)
