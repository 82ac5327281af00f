"""Interface shared by the record store adapters."""
from __future__ import annotations

from typing import Optional

from records_api.domain.identifiers import is_valid_record_id
from records_api.domain.records import Record, RecordFields


class RecordStoreError(Exception):
    """Raised when the underlying store fails or rejects an operation."""


class RecordRepository:
    """Store adapter contract. Ids are assigned by the adapter on create."""

    def initialize(self) -> None:
        """Prepare the backend (connections, tables). Default is a no-op."""

    def is_valid_id(self, record_id: str | None) -> bool:
        return is_valid_record_id(record_id)

    def list_records(self) -> list[Record]:
        """All records, newest first."""
        raise NotImplementedError

    def create_record(self, fields: RecordFields) -> Record:
        raise NotImplementedError

    def get_record(self, record_id: str) -> Optional[Record]:
        raise NotImplementedError

    def update_record(self, record_id: str, fields: RecordFields) -> Optional[Record]:
        """Replace all mutable fields; None when no record matches."""
        raise NotImplementedError

    def delete_record(self, record_id: str) -> bool:
        """Return False when no record matches."""
        raise NotImplementedError
