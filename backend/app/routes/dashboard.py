"""Dashboard routes."""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.schemas.dashboard import DashboardSummary
from app.services.dashboard_view import DashboardView
from app.services.storage import KeyValueStore
from app.utils.storage import get_store

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardSummary)
async def get_dashboard(
    day: Optional[date] = Query(None, description="Day treated as today"),
    store: KeyValueStore = Depends(get_store),
):
    """Get today's workout, nutrition and weight summary."""
    view = DashboardView(store)
    await view.activate()
    return view.summary(day)
