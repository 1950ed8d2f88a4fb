"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded in production)
    - get_settings() is cached (lru_cache) — single instance per process
    - Page size and latest-invoice limit are settings, not literals in queries

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - Route paths (login, home, protected prefix) live here so the access gate
      and the mutation redirects agree on a single source
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://dashboard:dashboard@db:5432/dashboard"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres provides postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    store_timeout_seconds: float = 10.0

    # Queries
    invoices_page_size: int = 6
    latest_invoices_limit: int = 5
    view_cache_ttl_seconds: float = 30.0
    view_cache_max_entries: int = 256

    # Routing / access
    protected_prefix: str = "/dashboard"
    public_paths: list[str] = ["/login"]
    login_path: str = "/login"
    home_path: str = "/dashboard"
    invoices_path: str = "/dashboard/invoices"

    # Session
    session_cookie_name: str = "dashboard_session"
    session_secret: str = "dev-session-secret-change-me"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
