"""Record entity and its JSON representation."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

RECORD_FIELDS = ("name", "email", "phoneNumber")

PLACEHOLDERS = {
    "name": "Default Name",
    "email": "default@example.com",
    "phoneNumber": "0000000000",
}


@dataclass(frozen=True)
class RecordFields:
    """The three client-controlled fields of a record."""

    name: str
    email: str
    phone_number: str

    @classmethod
    def with_placeholders(cls, body: Mapping[str, Any]) -> "RecordFields":
        """Take supplied values, falling back to placeholders for absent or empty ones."""
        values = {field: _as_text(body.get(field) or None) or PLACEHOLDERS[field] for field in RECORD_FIELDS}
        return cls(name=values["name"], email=values["email"], phone_number=values["phoneNumber"])

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> "RecordFields":
        return cls(
            name=_as_text(body.get("name")),
            email=_as_text(body.get("email")),
            phone_number=_as_text(body.get("phoneNumber")),
        )


@dataclass(frozen=True)
class Record:
    id: str
    name: str
    email: str
    phone_number: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phoneNumber": self.phone_number,
            "createdAt": format_timestamp(self.created_at),
        }


def has_record_fields(body: Any) -> bool:
    """True when body is a mapping carrying at least one of the record fields."""
    if not isinstance(body, Mapping):
        return False
    return any(field in body for field in RECORD_FIELDS)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render as ISO-8601 UTC with milliseconds, e.g. 2024-05-01T12:00:00.000Z."""
    if value is None:
        return None
    # SQLite hands back naive datetimes; everything is stored in UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)
