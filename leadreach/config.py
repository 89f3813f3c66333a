"""Configuration settings for LeadReach."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = Field(default="LeadReach", env="APP_NAME")
    debug: bool = Field(default=False, env="DEBUG")
    app_env: str = Field(default="development", env="APP_ENV")

    # Database
    database_url: str = Field(
        default="sqlite:///./leadreach.db", env="DATABASE_URL"
    )

    # Logging
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    log_file: Optional[str] = Field(default="leadreach.log", env="LOG_FILE")

    # Template limits
    template_name_max_length: int = Field(default=100, env="TEMPLATE_NAME_MAX_LENGTH")
    subject_max_length: int = Field(default=200, env="SUBJECT_MAX_LENGTH")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Create global settings instance
settings = Settings()
