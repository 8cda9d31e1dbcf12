# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./plates.db"
    PLATES_COLLECTION: str = "veiculos"     # Collection every plate document is written to

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "0.0.0.0"
    BACKEND_PORT: int = 8080

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "plates.log"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
