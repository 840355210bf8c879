"""Shared chart and notice schemas."""
import enum
from typing import Any, List

from pydantic import BaseModel, Field


class NoticeSeverity(str, enum.Enum):
    """Severity of a transient notice."""
    SUCCESS = "success"
    ERROR = "error"


class Notice(BaseModel):
    """Transient notification shown after a mutation."""
    message: str
    severity: NoticeSeverity
    auto_hide_ms: int = 3000


class ChartDataset(BaseModel):
    """One labeled series of a line chart."""
    label: str
    values: List[float]
    style: dict[str, Any] = Field(default_factory=dict)


class ChartData(BaseModel):
    """Labeled-series data handed to the charting surface."""
    labels: List[str]
    datasets: List[ChartDataset]


class MacroProgress(BaseModel):
    """Progress of a daily total against its goal."""
    label: str
    unit: str
    total: float
    goal: float
    percent_of_goal: float
    bar_value: float
