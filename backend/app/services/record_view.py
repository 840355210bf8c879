"""Generic add/delete view over a record repository."""
import asyncio
import enum
import logging
from typing import Any, ClassVar, Generic, List, Optional

from pydantic import ValidationError

from app.schemas.common import Notice, NoticeSeverity
from app.services.errors import ValidationRejected
from app.services.repository import RecordRepository, RecordT

logger = logging.getLogger(__name__)

# Serializes load-mutate-save cycles across requests
mutation_lock = asyncio.Lock()


class ViewState(str, enum.Enum):
    """Whether a view is showing its list or holding a pending draft."""
    IDLE = "idle"
    EDITING = "editing"


class RecordView(Generic[RecordT]):
    """
    Per-domain list view with add and delete transitions.

    Subclasses declare the blank draft, the notice messages and the
    domain validation rule. The full list is written back to the
    repository after every successful mutation.
    """

    blank_draft: ClassVar[dict[str, Any]] = {}
    success_message: ClassVar[str] = "Record added successfully!"
    rejection_message: ClassVar[str] = "Please enter valid values for all fields."

    def __init__(self, repository: RecordRepository[RecordT], notice_auto_hide_ms: int = 3000):
        self.repository = repository
        self.notice_auto_hide_ms = notice_auto_hide_ms
        self.records: List[RecordT] = []
        self.state = ViewState.IDLE
        self.draft: dict[str, Any] = dict(self.blank_draft)
        self.notice: Optional[Notice] = None

    async def activate(self) -> List[RecordT]:
        """Read the stored list into memory."""
        self.records = await self.repository.load()
        self.state = ViewState.IDLE
        return self.records

    def edit(self, **fields: Any) -> None:
        """Update scratch fields of the pending draft."""
        self.draft.update(fields)
        self.state = ViewState.EDITING

    def is_valid(self, record: RecordT) -> bool:
        """Domain rule a record must satisfy before it is appended."""
        return True

    def validate(self, draft: dict[str, Any]) -> RecordT:
        """Build a record from a draft or raise ValidationRejected."""
        try:
            record = self.repository.record_type.model_validate(draft)
        except ValidationError as e:
            raise ValidationRejected(self.rejection_message) from e

        if not self.is_valid(record):
            raise ValidationRejected(self.rejection_message)
        return record

    async def add(self, draft: dict[str, Any]) -> RecordT:
        """Validate a draft, append it and persist the full list."""
        record = self.validate(draft)
        records = [*self.records, record]
        await self.repository.save(records)
        self.records = records
        logger.info(f"Added record to '{self.repository.key}' ({len(records)} total)")
        return record

    async def submit(self) -> Notice:
        """Add the pending draft and return the notice to show."""
        try:
            await self.add(self.draft)
        except ValidationRejected as e:
            self.state = ViewState.IDLE
            self.notice = self._notice(e.message, NoticeSeverity.ERROR)
            return self.notice

        self.draft = dict(self.blank_draft)
        self.state = ViewState.IDLE
        self.notice = self._notice(self.success_message, NoticeSeverity.SUCCESS)
        return self.notice

    async def delete(self, index: int) -> RecordT:
        """Remove the record at a list position and persist the rest."""
        if index < 0 or index >= len(self.records):
            raise IndexError(f"No record at position {index}")

        removed = self.records[index]
        records = self.records[:index] + self.records[index + 1:]
        await self.repository.save(records)
        self.records = records
        logger.info(f"Deleted record {index} from '{self.repository.key}'")
        return removed

    def _notice(self, message: str, severity: NoticeSeverity) -> Notice:
        return Notice(message=message, severity=severity, auto_hide_ms=self.notice_auto_hide_ms)
