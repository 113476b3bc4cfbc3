"""
Configuration helpers for the DYMNDS storefront.

Routers and services read settings through get_settings() instead of
fetching os.environ directly, so tests can swap the environment and clear
the cache.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    public_base_url: str
    database_url: str
    log_level: str
    admin_emails: frozenset[str]
    admin_session_ttl_seconds: int
    cleanup_retention_days: int
    brand_assets_dir: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _csv(value: str | None) -> frozenset[str]:
        return frozenset(x.strip().lower() for x in (value or "").split(",") if x.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        public_base_url=os.getenv("PUBLIC_BASE_URL", "https://dymnds.ca").rstrip("/"),
        database_url=os.getenv("DATABASE_URL", ""),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        admin_emails=_csv(os.getenv("ADMIN_EMAILS")),
        admin_session_ttl_seconds=max(600, _int(os.getenv("ADMIN_SESSION_TTL_SECONDS", "43200"), 43200)),
        cleanup_retention_days=_int(os.getenv("CLEANUP_RETENTION_DAYS", "90"), 90),
        brand_assets_dir=os.getenv("BRAND_ASSETS_DIR", "").strip(),
    )
