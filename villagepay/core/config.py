"""
Configuration helpers for the Village Pay backend.

Everything is read from environment variables once and exposed as a frozen
Config so routers/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[2] / "db.json"
DEV_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Config:
    """Typed view of environment variables."""

    app_env: str
    data_file: Path
    store_url: str
    store_timeout: float
    admin_username: str
    default_common_fee: int
    default_contact_number: str
    cors_origins: tuple[str, ...]
    log_level: str
    log_json: bool


@lru_cache
def get_config() -> Config:
    """Read the current environment and build a Config instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _float(value: str, default: float = 0.0) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    app_env = (os.getenv("APP_ENV") or "dev").lower()
    origins = {o.strip().rstrip("/") for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()}
    if app_env != "prod":
        origins.update(DEV_ORIGINS)

    return Config(
        app_env=app_env,
        data_file=Path(os.getenv("DATA_FILE") or DEFAULT_DATA_FILE),
        store_url=os.getenv("STORE_URL", "").strip().rstrip("/"),
        store_timeout=_float(os.getenv("STORE_TIMEOUT", "10"), 10.0),
        admin_username=os.getenv("ADMIN_USERNAME", "admin").strip() or "admin",
        default_common_fee=_int(os.getenv("DEFAULT_COMMON_FEE", "500"), 500),
        default_contact_number=os.getenv("DEFAULT_CONTACT_NUMBER", "02-123-4567"),
        cors_origins=tuple(sorted(origins)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_json=_bool(os.getenv("LOG_JSON"), False),
    )
