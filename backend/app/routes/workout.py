"""Workout planner routes."""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.schemas.common import NoticeSeverity
from app.schemas.workout import ExerciseCreate, WorkoutSummary
from app.services.record_view import mutation_lock
from app.services.storage import KeyValueStore
from app.services.workout_view import WorkoutView
from app.utils.storage import get_store

router = APIRouter(prefix="/workout", tags=["Workout"])


@router.get("", response_model=WorkoutSummary)
async def get_workout(
    day: Optional[date] = Query(None, description="Day treated as today"),
    store: KeyValueStore = Depends(get_store),
):
    """Get today's exercises and estimated workout time."""
    view = WorkoutView.from_store(store)
    await view.activate()
    return view.summary(day)


@router.post("/exercises", response_model=WorkoutSummary, status_code=status.HTTP_201_CREATED)
async def add_exercise(
    draft: ExerciseCreate,
    day: Optional[date] = Query(None, description="Day treated as today"),
    store: KeyValueStore = Depends(get_store),
):
    """Add an exercise to today's workout."""
    async with mutation_lock:
        view = WorkoutView.from_store(store)
        await view.activate()
        view.edit(**draft.model_dump())
        notice = await view.submit()

    if notice.severity == NoticeSeverity.ERROR:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=jsonable_encoder(view.summary(day)),
        )
    return view.summary(day)


@router.delete("/exercises/{index}", response_model=WorkoutSummary)
async def delete_exercise(
    index: int,
    day: Optional[date] = Query(None, description="Day treated as today"),
    store: KeyValueStore = Depends(get_store),
):
    """Delete the exercise at a list position."""
    async with mutation_lock:
        view = WorkoutView.from_store(store)
        await view.activate()
        try:
            await view.delete(index)
        except IndexError:
            raise HTTPException(status_code=404, detail="Exercise not found")

    return view.summary(day)
