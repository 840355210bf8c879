"""Generic record repository over a key-value store."""
import json
import logging
from typing import Generic, List, Sequence, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from app.services.errors import DeserializationFailed
from app.services.storage import KeyValueStore

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordRepository(Generic[RecordT]):
    """
    Durable list of flat records persisted as one JSON snapshot per key.

    Every save overwrites the whole snapshot; there are no partial writes.
    Loading never fails: a missing or unreadable snapshot yields a copy of
    the domain seed list instead. An unreadable snapshot is first copied to
    a side key so the next save does not destroy it.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        record_type: Type[RecordT],
        seed: Sequence[RecordT] = (),
    ):
        """
        Bind a record type to a storage key.

        Args:
            store: Key-value capability holding the snapshot
            key: Fixed storage key for this domain
            record_type: Pydantic model of one record
            seed: Records returned when nothing usable is stored
        """
        self.store = store
        self.key = key
        self.record_type = record_type
        self.seed = tuple(seed)
        self._adapter = TypeAdapter(List[record_type])

    @property
    def unreadable_key(self) -> str:
        """Key holding the last snapshot that failed to decode."""
        return f"{self.key}.unreadable"

    def encode(self, records: Sequence[RecordT]) -> str:
        """Serialize records with their persisted field names."""
        return json.dumps(
            [record.model_dump(mode="json", by_alias=True, exclude_none=True) for record in records]
        )

    def decode(self, raw: str) -> List[RecordT]:
        """Parse a snapshot, raising DeserializationFailed when it is malformed."""
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            raise DeserializationFailed(self.key, _first_error(e)) from e

    async def load(self) -> List[RecordT]:
        """Load the stored list, falling back to the seed list."""
        raw = await self.store.get_item(self.key)
        if raw is None:
            return list(self.seed)

        try:
            return self.decode(raw)
        except DeserializationFailed as e:
            logger.warning(
                f"Using seed data for '{self.key}', unreadable snapshot kept "
                f"under '{self.unreadable_key}': {e}"
            )
            await self.store.set_item(self.unreadable_key, raw)
            return list(self.seed)

    async def save(self, records: Sequence[RecordT]) -> None:
        """Overwrite the stored snapshot with the full list."""
        await self.store.set_item(self.key, self.encode(records))


def _first_error(error: ValidationError) -> str:
    """Describe the first decoding error, naming the record it occurred in."""
    details = error.errors()[0]
    loc = list(details["loc"])
    if loc and isinstance(loc[0], int):
        field = ".".join(str(part) for part in loc[1:]) or "record"
        return f"record {loc[0]} ({field}): {details['msg']}"
    return details["msg"]
