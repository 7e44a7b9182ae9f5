# teamforge/config/settings.py

from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    ENV: str = "development"
    TEAM_SIZE_DEFAULT: int = 3
    SWAP_MAX_PASSES: Optional[int] = None  # None -> members squared
    CATEGORIES_FILE: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
