"""Configuration management using environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Audit settings loaded from environment variables."""

    # HTTP
    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; WebAuditBot/1.0)",
        alias="SITEAUDIT_USER_AGENT"
    )
    page_timeout: float = Field(
        default=10.0,
        gt=0,
        alias="SITEAUDIT_PAGE_TIMEOUT"
    )
    auxiliary_timeout: float = Field(
        default=5.0,
        gt=0,
        alias="SITEAUDIT_AUXILIARY_TIMEOUT"
    )
    discovery_timeout: float = Field(
        default=5.0,
        gt=0,
        alias="SITEAUDIT_DISCOVERY_TIMEOUT"
    )
    max_redirects: int = Field(
        default=3,
        ge=0,
        alias="SITEAUDIT_MAX_REDIRECTS"
    )

    # Crawl limits
    max_pages: int = Field(
        default=10,
        gt=0,
        alias="SITEAUDIT_MAX_PAGES"
    )
    concurrency: int = Field(
        default=3,
        gt=0,
        alias="SITEAUDIT_CONCURRENCY"
    )
    crawl_deadline: float = Field(
        default=120.0,
        gt=0,
        alias="SITEAUDIT_CRAWL_DEADLINE"
    )

    # Scoring
    exclude_failed_dimensions: bool = Field(
        default=False,
        alias="SITEAUDIT_EXCLUDE_FAILED_DIMENSIONS"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        populate_by_name = True


def get_settings() -> Settings:
    """Get audit settings."""
    return Settings()
