"""Nutrition tracker routes."""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.schemas.common import NoticeSeverity
from app.schemas.nutrition import MealCreate, NutritionSummary
from app.services.record_view import mutation_lock
from app.services.nutrition_view import NutritionView
from app.services.storage import KeyValueStore
from app.utils.storage import get_store

router = APIRouter(prefix="/nutrition", tags=["Nutrition"])


@router.get("", response_model=NutritionSummary)
async def get_nutrition(
    day: Optional[date] = Query(None, description="Day treated as today"),
    store: KeyValueStore = Depends(get_store),
):
    """Get today's meals, macro progress and trend charts."""
    view = NutritionView.from_store(store)
    await view.activate()
    return view.summary(day)


@router.post("/meals", response_model=NutritionSummary, status_code=status.HTTP_201_CREATED)
async def add_meal(
    draft: MealCreate,
    day: Optional[date] = Query(None, description="Day treated as today"),
    store: KeyValueStore = Depends(get_store),
):
    """Log a meal."""
    async with mutation_lock:
        view = NutritionView.from_store(store)
        await view.activate()
        view.edit(**draft.model_dump())
        notice = await view.submit()

    if notice.severity == NoticeSeverity.ERROR:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=jsonable_encoder(view.summary(day)),
        )
    return view.summary(day)


@router.delete("/meals/{index}", response_model=NutritionSummary)
async def delete_meal(
    index: int,
    day: Optional[date] = Query(None, description="Day treated as today"),
    store: KeyValueStore = Depends(get_store),
):
    """Delete the meal at a list position."""
    async with mutation_lock:
        view = NutritionView.from_store(store)
        await view.activate()
        try:
            await view.delete(index)
        except IndexError:
            raise HTTPException(status_code=404, detail="Meal not found")

    return view.summary(day)
