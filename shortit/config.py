from functools import lru_cache
from typing import Literal, Optional
import os

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file (skipped when ENV=production)
    3. Default values below
    
    PORT has no default: the server refuses to start without it.
    """
    
    # Environment
    env: str = "development"
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    
    # Server
    host: str = "0.0.0.0"
    port: int
    base_url: Optional[str] = None  # Derived from the request when unset
    
    # Mapping store
    store_backend: Literal["memory", "mongodb", "sql", "redis"] = "memory"
    
    mongodb_uri: Optional[str] = None
    mongodb_database: str = "urls"
    mongodb_collection: str = "beta"
    mongodb_timeout_ms: int = 5000
    
    database_url: str = "sqlite:///./url_shortener.db"
    redis_url: str = "redis://localhost:6379/0"
    
    # Short key generation
    key_strategy: Literal["shortuuid", "random"] = "shortuuid"
    key_length: int = 8  # Used by the "random" strategy only
    
    # Static client build, served at / in production
    static_dir: str = "./client/.next"
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def check_store_requirements(self) -> "Settings":
        if self.store_backend == "mongodb" and not self.mongodb_uri:
            raise ValueError("MONGODB_URI environment variable is not set")
        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Build settings once per process.
    
    The .env file is only read outside production, mirroring how the
    service is deployed (real environment in production, .env locally).
    
    Raises:
        pydantic.ValidationError: if PORT is missing or the selected
            store lacks its connection settings
    """
    env_file = None if os.getenv("ENV") == "production" else ".env"
    return Settings(_env_file=env_file)
