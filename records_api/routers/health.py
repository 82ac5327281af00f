from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from records_api.domain.records import format_timestamp

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/test")
def api_test():
    """Liveness probe; does not touch the store."""
    return {
        "success": True,
        "message": "API is working correctly",
        "timestamp": format_timestamp(datetime.now(timezone.utc)),
    }
