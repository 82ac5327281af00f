"""Record use cases (create, fetch, update, delete, list)."""
from __future__ import annotations

import logging
from typing import Any

from records_api.domain.records import Record, RecordFields, has_record_fields
from records_api.domain.validation import validate_record
from records_api.repositories.base import RecordRepository

logger = logging.getLogger(__name__)


class RecordError(Exception):
    """Base exception for record workflows; carries the HTTP status to report."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRecordIdError(RecordError):
    def __init__(self) -> None:
        super().__init__("Invalid ID format")


class RecordNotFoundError(RecordError):
    status_code = 404

    def __init__(self) -> None:
        super().__init__("Record not found")


class EmptyRecordBodyError(RecordError):
    def __init__(self) -> None:
        super().__init__("Empty request body or invalid JSON format")


class RecordValidationError(RecordError):
    """Raised when a body breaks one or more field rules."""

    def __init__(self, errors: list[str]):
        super().__init__("Validation failed")
        self.errors = errors


def ensure_valid(body: Any) -> RecordFields:
    errors = validate_record(body)
    if errors:
        raise RecordValidationError(errors)
    return RecordFields.from_body(body)


class RecordService:
    """Orchestrates id checks, placeholder defaults and store calls."""

    def __init__(self, repository: RecordRepository, *, validate_on_create: bool = False) -> None:
        self.repository = repository
        self.validate_on_create = validate_on_create

    def _check_id(self, record_id: str) -> None:
        if not self.repository.is_valid_id(record_id):
            raise InvalidRecordIdError()

    def list_records(self) -> list[Record]:
        return self.repository.list_records()

    def create_record(self, body: Any) -> Record:
        if not has_record_fields(body):
            raise EmptyRecordBodyError()
        if self.validate_on_create:
            fields = ensure_valid(body)
        else:
            fields = RecordFields.with_placeholders(body)
        record = self.repository.create_record(fields)
        logger.info("Record %s created", record.id)
        return record

    def get_record(self, record_id: str) -> Record:
        self._check_id(record_id)
        record = self.repository.get_record(record_id)
        if record is None:
            raise RecordNotFoundError()
        return record

    def update_record(self, record_id: str, fields: RecordFields) -> Record:
        self._check_id(record_id)
        record = self.repository.update_record(record_id, fields)
        if record is None:
            raise RecordNotFoundError()
        logger.info("Record %s updated", record_id)
        return record

    def delete_record(self, record_id: str) -> None:
        self._check_id(record_id)
        if not self.repository.delete_record(record_id):
            raise RecordNotFoundError()
        logger.info("Record %s deleted", record_id)
