"""Application configuration."""
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.
    
    Environment variables take precedence over .env file.
    This makes it compatible with Docker (uses env vars) and 
    local development (uses .env file).
    """
    
    APP_NAME: str = "Tool Crib"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Database
    DATABASE_URL: str = "sqlite:///./toolcrib.db"
    
    # JWT Settings
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480
    
    CORS_ORIGINS: List[str] = ["*"]
    
    # Where returned tools go back to
    SHOWROOM_LOCATION: str = "Showroom"
    # Maximum rows served by the history view
    HISTORY_LIMIT: int = 100
    
    # Bootstrap administrator (scripts/create_admin.py)
    ADMIN_NAME: str = "System Administrator"
    ADMIN_EMAIL: str = "admin@example.com"
    ADMIN_WORKER_ID: str = "00001"
    ADMIN_PASSWORD: str = "admin123"
    
    model_config = SettingsConfigDict(
        # Only load .env file if it exists (for local dev)
        # Docker will use environment variables directly
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        # Environment variables take precedence over .env file
        extra="ignore",
    )


settings = Settings()
