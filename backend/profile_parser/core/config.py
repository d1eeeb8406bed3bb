"""
Application configuration using Pydantic Settings
"""
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "LinkedIn Profile Parser"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Observability
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # File Upload
    MAX_UPLOAD_SIZE_MB: int = 10
    ALLOWED_FILE_EXTENSIONS: List[str] = ["pdf"]
    UPLOAD_DIR: str = "./uploads"

    # Parsing
    EMAIL_LOOKAHEAD: int = Field(default=4, ge=1)  # tokens after the full name searched for an email
    PAGE_MARKER: str = "Page"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
