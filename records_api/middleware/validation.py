"""Request body parsing and the record field check used before writes."""
from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import Depends, Request

from records_api.domain.records import RecordFields
from records_api.services.record_service import ensure_valid

logger = logging.getLogger(__name__)


async def read_request_body(request: Request) -> Any:
    """
    Return the parsed body: a dict for JSON objects and url-encoded forms,
    ``{}`` for an empty body and None when the payload cannot be parsed.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/x-www-form-urlencoded"):
        form = await request.form()
        body: Any = {key: value for key, value in form.items()}
    else:
        raw = await request.body()
        if not raw.strip():
            body = {}
        else:
            try:
                body = json.loads(raw)
            # nesting deeper than the interpreter stack raises RecursionError
            except (ValueError, RecursionError):
                body = None
    logger.debug("Body: %r", body)
    return body


async def validated_record_fields(body: Any = Depends(read_request_body)) -> RecordFields:
    """Raise RecordValidationError listing every broken rule; otherwise return the fields."""
    return ensure_valid(body)
