"""Configuration settings for Portfolio Service."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "portfolio"
    mongo_timeout_ms: int = 5000

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    request_timeout_seconds: float = 30.0

    # Service
    service_name: str = "portfolio-service"
    service_version: str = "0.1.0"

    # Contact form (EmailJS-compatible REST API)
    email_api_url: str = "https://api.emailjs.com/api/v1.0/email/send"
    email_service_id: str = ""
    email_template_id: str = ""
    email_public_key: str = ""
    contact_recipient: str = ""

    # Media ingestion, 0 / empty disables the limit
    media_max_bytes: int = 0
    media_allowed_types: list[str] = []

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
