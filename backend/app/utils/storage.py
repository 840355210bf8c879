"""Storage dependencies for routes."""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.services.storage import KeyValueStore, SqlKeyValueStore


async def get_store(db: AsyncSession = Depends(get_db)) -> KeyValueStore:
    """
    Dependency to get the key-value store holding record snapshots.

    Each snapshot write is committed by the store itself, inside the
    mutation lock held by the route.
    """
    return SqlKeyValueStore(db)
