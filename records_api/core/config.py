"""
Configuration helpers for the Records API.

Settings are read once from the environment (and an optional .env file) so
that routers/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

STORE_SQL = "sql"
STORE_MEMORY = "memory"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    database_url: str
    record_store: str
    validate_on_create: bool
    log_level: str
    log_file: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    # Variables already present in the environment take precedence.
    load_dotenv(override=False)

    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    store = (os.getenv("RECORD_STORE") or STORE_SQL).strip().lower()
    if store not in {STORE_SQL, STORE_MEMORY}:
        store = STORE_SQL

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "8000"), 8000),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./records.db").strip(),
        record_store=store,
        validate_on_create=_bool(os.getenv("VALIDATE_ON_CREATE"), False),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE", "").strip(),
    )
