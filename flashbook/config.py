from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from pathlib import Path

# Get the project root directory (parent of flashbook folder)
PROJECT_ROOT = Path(__file__).parent.parent

class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""
    database_url: str = f"sqlite:///{PROJECT_ROOT / 'flashbook.db'}"
    
    # Logging
    log_level: str = "WARNING"
    
    # Review sessions: cap on cards per session (None = whole deck)
    session_limit: Optional[int] = None
    
    model_config = SettingsConfigDict(
        env_prefix="FLASHBOOK_",
        env_file=str(PROJECT_ROOT / ".env"),
        extra="ignore"
    )

settings = Settings()
