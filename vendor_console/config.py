"""
Application Configuration
"""
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "Vendor Management Console"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Database
    database_url: str = "sqlite:///./vendor_management.db"
    db_pool_size: int = 10
    db_max_overflow: int = 0
    db_pool_timeout: float = 30.0
    db_echo: bool = False

    # Authentication
    secret_key: str = "change-me-in-production"
    access_token_expire_minutes: int = 60
    algorithm: str = "HS256"

    # Bootstrap administrator, created only when the users table is empty
    default_admin_email: str = "admin@example.com"
    default_admin_password: str = "admin123!"
    default_admin_name: str = "System Administrator"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
