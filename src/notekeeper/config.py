"""
App configuration - using pydantic settings for env vars
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings - loads from .env file"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # basic app stuff
    app_name: str = Field(default="NoteKeeper API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)  # set to True for dev
    environment: str = Field(default="development", description="Environment name")

    # server config
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    reload: bool = Field(default=False)

    # DB settings - no default, the connection string must come from the env
    database_url: str = Field(description="SQLAlchemy async database URL")
    database_echo: bool = Field(default=False)  # useful for debugging
    create_tables_on_startup: bool = Field(
        default=True, description="Run metadata.create_all during app startup"
    )

    # JWT
    secret_key: str = Field(min_length=16, description="JWT signing secret")
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_days: int = Field(
        default=7, ge=1, description="Access token lifetime in days"
    )

    # Password hashing cost (bcrypt log rounds)
    password_hash_rounds: int = Field(default=12, ge=10, le=31)

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"], description="CORS allowed origins"
    )
    cors_allow_credentials: bool = Field(default=True, description="CORS allow credentials")

    # Pagination
    default_page_size: int = Field(default=5, ge=1, description="Default notes per page")
    max_page_size: int = Field(default=100, ge=1, description="Maximum notes per page")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[str] = Field(
        default=None, description="Optional path of a rotating log file"
    )


@lru_cache
def get_settings() -> Settings:
    """Get application settings (built once per process)."""
    return Settings()
