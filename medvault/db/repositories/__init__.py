"""Repository modules for persistence operations."""

from .owned import OwnedRecordRepository

__all__ = ["OwnedRecordRepository"]
