"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://lookbook:lookbook_dev_password@db:5432/lookbook"

    # Catalog backend: "database" or "memory" (bundled sample catalog)
    catalog_backend: str = "database"

    # Catalog queries
    default_page_size: int = 12
    related_limit: int = 4

    # Fuzzy search
    fuzzy_search_enabled: bool = True
    fuzzy_min_query_length: int = 2
    fuzzy_min_score: int | None = None
    # Widening mode: when a search finds fewer literal matches than this,
    # append near-miss items scoring at least fuzzy_fallback_score. 0 disables.
    fuzzy_fallback_min_results: int = 0
    fuzzy_fallback_score: int = 60

    # Logging
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
