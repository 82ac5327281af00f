"""Field rules applied to record request bodies."""
from __future__ import annotations

import re
from typing import Any, Mapping

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
NAME_MIN_LENGTH = 2
PHONE_MIN_LENGTH = 5


def _raw(body: Mapping[str, Any], field: str) -> str:
    value = body.get(field)
    # non-strings count as missing
    return value if isinstance(value, str) else ""


def _text(body: Mapping[str, Any], field: str) -> str:
    return _raw(body, field).strip()


def validate_record(body: Any) -> list[str]:
    """
    Check name/email/phoneNumber and return every violated rule.

    An empty list means the body is acceptable. Rules are independent, so a
    body missing all three fields yields three errors.
    """
    if not isinstance(body, Mapping):
        body = {}
    errors: list[str] = []

    name = _text(body, "name")
    if not name:
        errors.append("Name is required")
    elif len(name) < NAME_MIN_LENGTH:
        errors.append("Name must be at least 2 characters long")

    # the pattern runs on the value as stored, surrounding whitespace included
    email = _raw(body, "email")
    if not email.strip():
        errors.append("Email is required")
    elif not EMAIL_PATTERN.fullmatch(email):
        errors.append("Invalid email format")

    phone = _text(body, "phoneNumber")
    if not phone:
        errors.append("Phone number is required")
    elif len(phone) < PHONE_MIN_LENGTH:
        errors.append("Phone number must be at least 5 characters")

    return errors
