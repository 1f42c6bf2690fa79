import logging
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Home Wiki API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./home_wiki.db"
    cors_origins: list[str] = ["http://localhost:3020"]

    # Demo content inserted on startup when the store is empty
    seed_demo_data: bool = False
    default_page_size: int = 10

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_repository: str = "INFO"       # generic repository / mappers
    log_level_services: str = "INFO"         # application services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @field_validator("default_page_size")
    @classmethod
    def _positive_page_size(cls, value: int) -> int:
        if value < 1:
            _config_logger.warning("default_page_size=%s is invalid; using 1", value)
            return 1
        return value

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
