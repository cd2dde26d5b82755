"""Application settings and configuration."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".stockwatch"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STOCKWATCH_",
    )

    app_name: str = "Stock Watch"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Data directory (settings database lives here)
    data_dir: Optional[Path] = None
    database_url: Optional[str] = None
    settings_backend: Literal["sqlite", "memory"] = "sqlite"

    # Watch-list configuration
    watchlist_key: str = "stockCodeList"
    initial_watchlist: list[str] = Field(default_factory=list)
    default_instrument_code: str = "1.000001"
    default_instrument_label: str = "上证指数"

    # Refresh cadence
    refresh_interval_ms: int = 3000

    # Quote provider
    quote_provider: Literal["eastmoney", "stub"] = "eastmoney"
    quote_api_url: str = "http://push2.eastmoney.com/api/qt/ulist.np/get"
    quote_fields: str = "f12,f13,f14,f2,f4,f3,f18"
    quote_request_timeout_seconds: Optional[float] = None

    website_url: str = "https://www.eastmoney.com/"

    @field_validator("refresh_interval_ms")
    @classmethod
    def _positive_interval(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("refresh_interval_ms must be positive")
        return value

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "settings.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
