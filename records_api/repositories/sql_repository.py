"""Record store backed by SQLAlchemy."""
from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from records_api.db.create_tables import create_all
from records_api.db.models import RecordRow
from records_api.db.session import get_session
from records_api.domain.identifiers import new_record_id
from records_api.domain.records import Record, RecordFields

from .base import RecordRepository, RecordStoreError


@contextmanager
def _store_errors() -> Iterator[None]:
    try:
        yield
    except (SQLAlchemyError, RuntimeError) as exc:
        raise RecordStoreError(str(exc)) from exc


def _to_record(row: RecordRow) -> Record:
    return Record(
        id=row.id,
        name=row.name,
        email=row.email,
        phone_number=row.phone_number,
        created_at=row.created_at,
    )


class SQLRecordRepository(RecordRepository):
    """CRUD helpers wrapping the SQLAlchemy session."""

    def initialize(self) -> None:
        with _store_errors():
            create_all()

    def list_records(self) -> list[Record]:
        stmt = select(RecordRow).order_by(RecordRow.created_at.desc(), RecordRow.id.desc())
        with _store_errors(), get_session() as session:
            return [_to_record(row) for row in session.execute(stmt).scalars().all()]

    def create_record(self, fields: RecordFields) -> Record:
        row = RecordRow(
            id=new_record_id(),
            name=fields.name,
            email=fields.email,
            phone_number=fields.phone_number,
            created_at=datetime.now(timezone.utc),
        )
        with _store_errors(), get_session() as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return _to_record(row)

    def get_record(self, record_id: str) -> Optional[Record]:
        with _store_errors(), get_session() as session:
            row = session.get(RecordRow, record_id)
            return _to_record(row) if row else None

    def update_record(self, record_id: str, fields: RecordFields) -> Optional[Record]:
        with _store_errors(), get_session() as session:
            row = session.get(RecordRow, record_id)
            if not row:
                return None
            row.name = fields.name
            row.email = fields.email
            row.phone_number = fields.phone_number
            session.commit()
            session.refresh(row)
            return _to_record(row)

    def delete_record(self, record_id: str) -> bool:
        with _store_errors(), get_session() as session:
            result = session.execute(delete(RecordRow).where(RecordRow.id == record_id))
            session.commit()
            return bool(result.rowcount)
