"""
Persistence adapters.

Every adapter exposes the RecordRepository interface so services can run
against SQL in production and against memory in tests.
"""

from .base import RecordRepository, RecordStoreError
from .memory_repository import InMemoryRecordRepository
from .sql_repository import SQLRecordRepository

__all__ = ["RecordRepository", "RecordStoreError", "InMemoryRecordRepository", "SQLRecordRepository"]
