"""Application configuration via environment variables."""
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DB_USER: str = ""
    DB_PASS: str = ""
    DB_HOST: str = ""
    DB_NAME: str = "civiconnect_events"
    DATABASE_URL: Optional[str] = None
    PORT: int = 3000
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    AUTO_CREATE_TABLES: bool = True

    class Config:
        env_file = ".env"

    @property
    def database_url(self) -> str:
        """Explicit DATABASE_URL wins, then DB_* credentials, then a local SQLite file."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST:
            return f"postgresql://{self.DB_USER}:{self.DB_PASS}@{self.DB_HOST}/{self.DB_NAME}"
        return "sqlite:///./civiconnect.db"


settings = Settings()
