"""Configuration management for urlfeed."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RSS_", extra="ignore")

    # Channel defaults for a feed file that does not exist yet
    title: str = "My Feed"
    link: str = "http://localhost"
    description: str = "Generated feed"

    # Feed storage
    feed_path: str = "rss.xml"

    # Fetching
    fetch_timeout: float = Field(default=15.0, gt=0)
    user_agent: str = "urlfeed/1.0"
    max_body_bytes: int = Field(default=10 * 1024 * 1024, gt=0)

    # Extraction
    max_html_depth: int = Field(default=256, gt=0)
    link_source: bool = True  # prefix descriptions with a link to the input URL

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
