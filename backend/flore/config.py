from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Florê API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 5000

    # JSON document store
    data_file: str = "data/db.json"

    # Admin credential. ADMIN_PASSWORD is only read when the store is bootstrapped
    admin_password: str = ""
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = 8
    bcrypt_rounds: int = 10

    # Analytics retention (0 keeps every event)
    analytics_max_events: int = 10_000

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_store: str = "INFO"            # Document store + JSON backend
    log_level_auth: str = "INFO"             # Login / token checks
    log_level_http: str = "WARNING"          # httpx / httpcore
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
