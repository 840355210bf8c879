"""Database models."""
from app.models.base import Base
from app.models.storage import StorageEntry

__all__ = [
    "Base",
    "StorageEntry",
]
