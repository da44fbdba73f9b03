"""
Configuration management using Pydantic settings.
Handles database URL, JWT secrets, canonical site URL and environment variables.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import Optional, List
from functools import lru_cache


DEFAULT_SITE_URL = "https://example.com"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application configuration
    app_name: str = "Real Notice Board API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    testing: bool = False

    # Database configuration
    database_url: str = "postgresql+asyncpg://postgres:postgres@db:5432/noticeboard"

    # JWT configuration
    jwt_secret_key: str = "your-secret-key-change-in-production"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30
    jwt_refresh_token_expire_days: int = 7

    # Media upload configuration
    upload_dir: str = "./uploads"
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    allowed_file_types: List[str] = ["image/jpeg", "image/png", "image/webp"]

    # API configuration
    api_v1_prefix: str = "/api/v1"
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Pagination defaults
    default_page_size: int = 10
    max_page_size: int = 100

    # Canonical site URL, same variables the frontend deployment exports
    next_public_server_url: Optional[str] = None
    vercel_project_production_url: Optional[str] = None

    # Sitemap generation
    sitemap_max_records: int = 1000
    robots_disallow: List[str] = ["/admin/*"]
    additional_sitemaps: List[str] = [
        "pages-sitemap.xml",
        "posts-sitemap.xml",
        "properties-sitemap.xml",
        "categories-sitemap.xml",
        "knowledge-base-sitemap.xml",
        "faqs-sitemap.xml",
    ]

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v):
        """Ensure an async driver is used."""
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        if v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret_key(cls, v):
        """Validate JWT secret key strength."""
        if not v:
            raise ValueError("JWT_SECRET_KEY is required")
        if len(v) < 32 and v != "your-secret-key-change-in-production":
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters long")
        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing" or self.testing

    @property
    def site_url(self) -> str:
        """
        Canonical base URL of the public site.

        NEXT_PUBLIC_SERVER_URL wins over VERCEL_PROJECT_PRODUCTION_URL; the
        latter is a bare host name, so a scheme is added when missing.
        """
        url = self.next_public_server_url or self.vercel_project_production_url or DEFAULT_SITE_URL
        if "://" not in url:
            url = f"https://{url}"
        return url.rstrip("/")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the app lifecycle.
    """
    return Settings()


# Global settings instance
settings = get_settings()
