"""Environment-based settings for the SPM Café service."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


def load_env(dotenv_path: str | None = None) -> None:
    """Load variables from a .env file without overriding existing values."""
    path = Path(dotenv_path or ".env")
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def current_env() -> str:
    return (os.getenv("SPM_ENV") or os.getenv("ENVIRONMENT") or os.getenv("ENV") or "development").lower()


_DEFAULT_LOG_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    env: str
    host: str
    port: int
    public_origin: str
    qris_expiry_seconds: int
    staff_session_hours: int
    cors_origins: tuple[str, ...]
    log_dir: str
    log_level: str

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    load_env()
    env = current_env()
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        env=env,
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int_env("PORT", 5000),
        public_origin=os.getenv("PUBLIC_ORIGIN", "http://localhost:3000").rstrip("/"),
        qris_expiry_seconds=_int_env("QRIS_EXPIRY_SECONDS", 15 * 60),
        staff_session_hours=_int_env("STAFF_SESSION_HOURS", 12),
        cors_origins=tuple(origin.strip() for origin in origins.split(",") if origin.strip()),
        log_dir=os.getenv("LOG_DIR", "logs"),
        log_level=os.getenv("LOG_LEVEL", _DEFAULT_LOG_LEVELS.get(env, "INFO")).upper(),
    )
