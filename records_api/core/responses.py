"""Uniform JSON envelope returned by every API endpoint."""
from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from fastapi.responses import JSONResponse

from records_api.domain.records import Record


def _jsonable(data: Any) -> Any:
    if isinstance(data, Record):
        return data.to_dict()
    if isinstance(data, (list, tuple)):
        return [_jsonable(item) for item in data]
    return data


def envelope(
    status_code: int = 200,
    *,
    success: bool = True,
    message: Optional[str] = None,
    data: Any = None,
    count: Optional[int] = None,
    errors: Optional[Sequence[str]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """
    Build ``{success, message?, data?, count?, errors?}``.

    Keys left as None are omitted from the body.
    """
    body: dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    if count is not None:
        body["count"] = count
    if data is not None:
        body["data"] = _jsonable(data)
    if errors is not None:
        body["errors"] = list(errors)
    return JSONResponse(status_code=status_code, content=body, headers=dict(headers) if headers else None)


def failure(
    status_code: int,
    message: str,
    errors: Optional[Sequence[str]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    return envelope(status_code, success=False, message=message, errors=errors, headers=headers)
