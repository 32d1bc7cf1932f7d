"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from __future__ import annotations

from sqlalchemy.engine import make_url
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    APP_NAME: str = "Users CRUD API"
    APP_VERSION: str = "0.1.0"

    # ── Database ──────────────────────────────
    DATABASE_URL: str = "sqlite+aiosqlite:///./usersdata.db"
    SQL_ECHO: bool = False

    # ── HTTP server ───────────────────────────
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: list[str] = ["*"]

    # ── Logging ───────────────────────────────
    LOG_LEVEL: str | None = None
    LOG_FORMAT: str = "console"  # console | json

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}

    @property
    def effective_log_level(self) -> str:
        """LOG_LEVEL when set, otherwise DEBUG in development and INFO elsewhere."""
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "DEBUG" if self.APP_ENV == "development" else "INFO"

    @property
    def SQLITE_PATH(self) -> str | None:
        """Filesystem path of the SQLite database, or None for other backends."""
        url = make_url(self.DATABASE_URL)
        if url.get_backend_name() != "sqlite":
            return None
        if not url.database or url.database == ":memory:":
            return None
        return url.database


settings = Settings()
