"""
Application factory for the Records API.

``create_app`` builds one store adapter, wraps it in a RecordService and
attaches both to ``app.state``; routers fetch them from there.

    uvicorn records_api.app:app --reload
"""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates

from records_api.core.config import STORE_MEMORY, Settings, get_settings
from records_api.core.logging_config import setup_logging
from records_api.core.responses import failure
from records_api.middleware.http import CORS_HEADERS, CorsHeadersMiddleware, RequestLoggingMiddleware
from records_api.repositories import (
    InMemoryRecordRepository,
    RecordRepository,
    RecordStoreError,
    SQLRecordRepository,
)
from records_api.routers import health as health_router
from records_api.routers import pages as pages_router
from records_api.routers import records as records_router
from records_api.services.record_service import RecordService, RecordValidationError

logger = logging.getLogger(__name__)

BASE = os.path.dirname(__file__)


def build_repository(settings: Settings) -> RecordRepository:
    if settings.record_store == STORE_MEMORY:
        return InMemoryRecordRepository()
    return SQLRecordRepository()


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[RecordRepository] = None,
) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn; tests pass their own repository."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    store = repository if repository is not None else build_repository(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        # A store that cannot be reached must not keep the server from starting.
        try:
            store.initialize()
        except RecordStoreError as exc:
            logger.error("Could not initialise record store: %s", exc)
        else:
            logger.info("Record store ready (%s)", type(store).__name__)
        yield

    app = FastAPI(title="Records API", lifespan=lifespan)
    app.state.settings = settings
    app.state.record_service = RecordService(store, validate_on_create=settings.validate_on_create)
    app.state.templates = Jinja2Templates(directory=os.path.join(BASE, "templates"))

    # last added runs first: CORS headers wrap the logged request
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorsHeadersMiddleware)

    @app.exception_handler(RecordValidationError)
    async def _validation_failed(request: Request, exc: RecordValidationError):
        logger.info("Validation failed for %s %s: %s", request.method, request.url.path, exc.errors)
        return failure(exc.status_code, exc.message, errors=exc.errors)

    # Handled by the outermost error middleware, outside CorsHeadersMiddleware.
    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return failure(500, str(exc) or "Internal Server Error", headers=CORS_HEADERS)

    app.include_router(health_router.router)
    app.include_router(records_router.router)
    app.include_router(pages_router.router)
    return app


app = create_app()
