from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from records_api.core.responses import envelope, failure
from records_api.domain.records import RecordFields
from records_api.middleware.validation import read_request_body, validated_record_fields
from records_api.repositories.base import RecordStoreError
from records_api.services.record_service import RecordError, RecordService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/records", tags=["records"])


def _get_record_service(request: Request) -> RecordService:
    svc = getattr(getattr(request.app, "state", None), "record_service", None)
    if not svc:
        raise RuntimeError("RecordService not configured")
    return svc


def _record_error(exc: RecordError):
    return failure(exc.status_code, exc.message, errors=getattr(exc, "errors", None))


def _store_error(exc: RecordStoreError, status_code: int, action: str):
    logger.error("Store failure while %s: %s", action, exc, exc_info=exc)
    return failure(status_code, str(exc))


@router.get("")
def list_records(request: Request):
    svc = _get_record_service(request)
    try:
        records = svc.list_records()
    except RecordStoreError as exc:
        return _store_error(exc, 500, "listing records")
    return envelope(200, count=len(records), data=records)


@router.post("")
def create_record(request: Request, body: Any = Depends(read_request_body)):
    svc = _get_record_service(request)
    try:
        record = svc.create_record(body)
    except RecordError as exc:
        return _record_error(exc)
    except RecordStoreError as exc:
        return _store_error(exc, 400, "creating a record")
    return envelope(201, message="Record created successfully", data=record)


@router.get("/{record_id}")
def get_record(record_id: str, request: Request):
    svc = _get_record_service(request)
    try:
        record = svc.get_record(record_id)
    except RecordError as exc:
        return _record_error(exc)
    except RecordStoreError as exc:
        return _store_error(exc, 500, f"fetching record {record_id}")
    return envelope(200, data=record)


@router.put("/{record_id}")
def update_record(
    record_id: str,
    request: Request,
    fields: RecordFields = Depends(validated_record_fields),
):
    svc = _get_record_service(request)
    try:
        record = svc.update_record(record_id, fields)
    except RecordError as exc:
        return _record_error(exc)
    except RecordStoreError as exc:
        return _store_error(exc, 400, f"updating record {record_id}")
    return envelope(200, message="Record updated successfully", data=record)


@router.delete("/{record_id}")
def delete_record(record_id: str, request: Request):
    svc = _get_record_service(request)
    try:
        svc.delete_record(record_id)
    except RecordError as exc:
        return _record_error(exc)
    except RecordStoreError as exc:
        return _store_error(exc, 500, f"deleting record {record_id}")
    return envelope(200, message="Record deleted successfully")
