"""Key-value snapshot storage model."""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class StorageEntry(Base):
    """One serialized snapshot stored under a fixed key."""

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text)
