"""Body progress view."""
from typing import Optional

from app.config import Settings, get_settings
from app.schemas.common import ChartData, ChartDataset
from app.schemas.tracking import ProgressEntry, ProgressSummary
from app.services.aggregator import chart_series, latest
from app.services.record_view import RecordView
from app.services.repository import RecordRepository
from app.services.storage import KeyValueStore

SEED_ENTRIES = (
    ProgressEntry(date="2024-01-01", weight=75, body_fat=20, notes="Starting point"),
    ProgressEntry(date="2024-01-15", weight=74, body_fat=19, notes="Good progress"),
)

WEIGHT_STYLE = {"borderColor": "rgb(75, 192, 192)", "yAxisID": "y", "tension": 0.1}
BODY_FAT_STYLE = {"borderColor": "rgb(255, 99, 132)", "yAxisID": "y1", "tension": 0.1}


def weight_chart(entries: list[ProgressEntry], include_body_fat: bool = True) -> ChartData:
    """Weight (and optionally body fat) over the entry dates."""
    datasets = [
        ChartDataset(label="Weight (kg)", values=chart_series(entries, "weight"), style=WEIGHT_STYLE),
    ]
    if include_body_fat:
        datasets.append(
            ChartDataset(label="Body Fat %", values=chart_series(entries, "body_fat"), style=BODY_FAT_STYLE)
        )
    return ChartData(labels=chart_series(entries, "date"), datasets=datasets)


class ProgressView(RecordView[ProgressEntry]):
    """Body-measurement history."""

    blank_draft = {"date": "", "weight": 0, "bodyFat": 0, "notes": ""}
    success_message = "Progress entry added successfully!"
    rejection_message = "Please enter a date, positive weight, and non-negative body fat %."

    def __init__(self, repository: RecordRepository[ProgressEntry], settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        super().__init__(repository, notice_auto_hide_ms=self.settings.notice_auto_hide_ms)

    @classmethod
    def from_store(cls, store: KeyValueStore, settings: Optional[Settings] = None) -> "ProgressView":
        settings = settings or get_settings()
        repository = RecordRepository(store, settings.progress_entries_key, ProgressEntry, SEED_ENTRIES)
        return cls(repository, settings)

    def is_valid(self, record: ProgressEntry) -> bool:
        return bool(record.date.strip()) and record.weight > 0 and record.body_fat >= 0

    def summary(self) -> ProgressSummary:
        weight_current = latest(self.records, "weight")
        weight_start = self.records[0].weight if self.records else None
        weight_change = None
        if weight_current is not None and weight_start is not None:
            weight_change = round(weight_current - weight_start, 2)

        return ProgressSummary(
            entries=self.records,
            chart=weight_chart(self.records),
            weight_current=weight_current,
            weight_start=weight_start,
            weight_change=weight_change,
            notice=self.notice,
        )
