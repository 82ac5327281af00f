from __future__ import annotations

import pytest

from records_api.domain.identifiers import new_record_id
from records_api.domain.records import RecordFields
from records_api.repositories import InMemoryRecordRepository
from records_api.services.record_service import (
    EmptyRecordBodyError,
    InvalidRecordIdError,
    RecordNotFoundError,
    RecordService,
    RecordValidationError,
)


@pytest.fixture()
def svc():
    return RecordService(InMemoryRecordRepository())


@pytest.mark.parametrize("body", [{}, None, [], "x", {"unrelated": 1}])
def test_create_rejects_bodies_without_record_fields(svc, body):
    with pytest.raises(EmptyRecordBodyError) as info:
        svc.create_record(body)
    assert info.value.status_code == 400
    assert info.value.message == "Empty request body or invalid JSON format"


def test_create_substitutes_placeholders(svc):
    record = svc.create_record({"name": "Zed", "email": ""})
    assert record.name == "Zed"
    assert record.email == "default@example.com"
    assert record.phone_number == "0000000000"


def test_create_skips_format_checks_by_default(svc):
    record = svc.create_record({"name": "A", "email": "bad", "phoneNumber": 12})
    assert (record.name, record.email, record.phone_number) == ("A", "bad", "12")


def test_create_validates_when_enabled():
    svc = RecordService(InMemoryRecordRepository(), validate_on_create=True)
    with pytest.raises(RecordValidationError) as info:
        svc.create_record({"name": "A"})
    assert info.value.errors == [
        "Name must be at least 2 characters long",
        "Email is required",
        "Phone number is required",
    ]
    record = svc.create_record({"name": "Al", "email": "a@b.co", "phoneNumber": "12345"})
    assert record.name == "Al"


def test_malformed_id_wins_over_not_found(svc):
    fields = RecordFields(name="Al", email="a@b.co", phone_number="12345")
    for call in (
        lambda: svc.get_record("nope"),
        lambda: svc.update_record("nope", fields),
        lambda: svc.delete_record("nope"),
    ):
        with pytest.raises(InvalidRecordIdError):
            call()


def test_not_found(svc):
    missing = new_record_id()
    with pytest.raises(RecordNotFoundError) as info:
        svc.get_record(missing)
    assert info.value.status_code == 404
    with pytest.raises(RecordNotFoundError):
        svc.delete_record(missing)
