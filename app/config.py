from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SITE_URL = "http://localhost:3000"


class Settings(BaseSettings):
    # App config
    app_name: str = "Guide Validator Web Service"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "console"
    log_config_path: Optional[str] = None

    # Public base URL for generated links
    site_url: str = Field(
        default=DEFAULT_SITE_URL,
        validation_alias=AliasChoices("NEXT_PUBLIC_SITE_URL", "SITE_URL"),
    )

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_key: str = ""
    supabase_storage_host: str = "vhqzmunorymtoisijiqb.supabase.co"

    # Page cache; in-process when no Redis URL is configured
    redis_url: Optional[str] = None
    page_cache_ttl_seconds: int = 300

    # Static bearer token for the admin API
    admin_api_token: Optional[str] = None

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator('site_url')
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip("/") or DEFAULT_SITE_URL

    @field_validator('page_cache_ttl_seconds')
    @classmethod
    def validate_ttl(cls, v):
        if v < 1:
            raise ValueError('Page cache TTL must be at least 1 second')
        return v

    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings instance"""
    return Settings()
