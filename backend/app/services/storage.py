"""Key-value storage backends for record snapshots."""
from typing import Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.storage import StorageEntry


class KeyValueStore(Protocol):
    """Minimal string key-value capability, shaped like browser local storage."""

    async def get_item(self, key: str) -> Optional[str]:
        ...

    async def set_item(self, key: str, value: str) -> None:
        ...

    async def remove_item(self, key: str) -> None:
        ...


class InMemoryKeyValueStore:
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.items: dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    async def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class SqlKeyValueStore:
    """
    Store backed by the storage_entries table, one row per key.

    Writes are committed immediately, so a snapshot is visible to the next
    request as soon as set_item returns.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_item(self, key: str) -> Optional[str]:
        entry = await self.session.get(StorageEntry, key)
        return entry.value if entry else None

    async def set_item(self, key: str, value: str) -> None:
        entry = await self.session.get(StorageEntry, key)
        if entry is None:
            self.session.add(StorageEntry(key=key, value=value))
        else:
            entry.value = value
        await self.session.commit()

    async def remove_item(self, key: str) -> None:
        entry = await self.session.get(StorageEntry, key)
        if entry is not None:
            await self.session.delete(entry)
            await self.session.commit()
