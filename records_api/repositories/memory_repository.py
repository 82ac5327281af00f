"""Process-local record store, used by tests and RECORD_STORE=memory."""
from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from records_api.domain.identifiers import new_record_id
from records_api.domain.records import Record, RecordFields

from .base import RecordRepository


class InMemoryRecordRepository(RecordRepository):
    def __init__(self) -> None:
        self._records: Dict[str, Tuple[int, Record]] = {}
        self._sequence = itertools.count()
        self._lock = threading.Lock()

    def list_records(self) -> list[Record]:
        with self._lock:
            entries = list(self._records.values())
        entries.sort(key=lambda entry: (entry[1].created_at, entry[0]), reverse=True)
        return [record for _seq, record in entries]

    def create_record(self, fields: RecordFields) -> Record:
        record = Record(
            id=new_record_id(),
            name=fields.name,
            email=fields.email,
            phone_number=fields.phone_number,
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._records[record.id] = (next(self._sequence), record)
        return record

    def get_record(self, record_id: str) -> Optional[Record]:
        with self._lock:
            entry = self._records.get(record_id)
        return entry[1] if entry else None

    def update_record(self, record_id: str, fields: RecordFields) -> Optional[Record]:
        with self._lock:
            entry = self._records.get(record_id)
            if not entry:
                return None
            seq, current = entry
            updated = replace(current, name=fields.name, email=fields.email, phone_number=fields.phone_number)
            self._records[record_id] = (seq, updated)
            return updated

    def delete_record(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None
