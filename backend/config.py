# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str

    # Session cookie signing
    SESSION_SECRET: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    SESSION_MAX_AGE_DAYS: int = 7
    SESSION_COOKIE_NAME: str = "sid"

    ENVIRONMENT: str = "development"
    FRONTEND_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    # Pre-built client bundle, served when present
    STATIC_DIR: str = "static"

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

settings = Settings()
