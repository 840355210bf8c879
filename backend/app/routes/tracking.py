"""Body progress routes."""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.schemas.common import NoticeSeverity
from app.schemas.tracking import ProgressEntryCreate, ProgressSummary
from app.services.record_view import mutation_lock
from app.services.progress_view import ProgressView
from app.services.storage import KeyValueStore
from app.utils.storage import get_store

router = APIRouter(prefix="/progress", tags=["Progress"])


@router.get("", response_model=ProgressSummary)
async def get_progress(
    store: KeyValueStore = Depends(get_store),
):
    """Get the entry history and weight / body fat chart."""
    view = ProgressView.from_store(store)
    await view.activate()
    return view.summary()


@router.post("/entries", response_model=ProgressSummary, status_code=status.HTTP_201_CREATED)
async def add_progress_entry(
    draft: ProgressEntryCreate,
    store: KeyValueStore = Depends(get_store),
):
    """Log a body-measurement checkpoint."""
    async with mutation_lock:
        view = ProgressView.from_store(store)
        await view.activate()
        view.edit(**draft.model_dump(by_alias=True))
        notice = await view.submit()

    if notice.severity == NoticeSeverity.ERROR:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=jsonable_encoder(view.summary()),
        )
    return view.summary()


@router.delete("/entries/{index}", response_model=ProgressSummary)
async def delete_progress_entry(
    index: int,
    store: KeyValueStore = Depends(get_store),
):
    """Delete the entry at a list position."""
    async with mutation_lock:
        view = ProgressView.from_store(store)
        await view.activate()
        try:
            await view.delete(index)
        except IndexError:
            raise HTTPException(status_code=404, detail="Progress entry not found")

    return view.summary()
