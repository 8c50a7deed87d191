"""
Application settings loaded from the environment (and an optional .env file).
"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Symbol handling
    market_suffix: str = ".TW"

    # Upstream calls
    upstream_timeout_seconds: float = 8.0
    upstream_max_workers: int = 16
    intraday_interval: str = "5m"
    intraday_lookback_hours: int = 24
    news_fetch_count: int = 10
    institutional_lookback_days: int = 10
    finmind_api_url: str = "https://api.finmindtrade.com/api/v4/data"
    finmind_token: Optional[str] = None

    # Error responses
    expose_upstream_errors: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "structured"  # 'structured' or 'plain'

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("upstream_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("Upstream timeout must be greater than 0 seconds")
        return v

    @field_validator(
        "intraday_lookback_hours",
        "news_fetch_count",
        "institutional_lookback_days",
        "upstream_max_workers",
    )
    @classmethod
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        valid_formats = ["structured", "plain"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
