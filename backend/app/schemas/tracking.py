"""Body progress schemas."""
from typing import Any, Optional, List

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import ChartData, Notice


class ProgressEntry(BaseModel):
    """One body-measurement checkpoint."""
    date: str
    weight: float
    body_fat: float = Field(..., alias="bodyFat")
    notes: str = ""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ProgressEntryCreate(BaseModel):
    """Draft submitted from the add-entry form; values are checked by the view."""
    date: Any = ""
    weight: Any = 0
    body_fat: Any = Field(0, alias="bodyFat")
    notes: Any = ""

    model_config = ConfigDict(populate_by_name=True)


class ProgressSummary(BaseModel):
    """Entry history and weight / body fat chart."""
    entries: List[ProgressEntry]
    chart: ChartData
    weight_current: Optional[float] = None
    weight_start: Optional[float] = None
    weight_change: Optional[float] = None
    notice: Optional[Notice] = None
