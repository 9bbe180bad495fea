"""
Dhan Dashboard - Configuration Settings
"""

from pydantic_settings import BaseSettings
from typing import List, Optional
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    dash_port: int = 5020
    dash_host: str = "0.0.0.0"

    # Dhan broker
    dhan_api_base: str = "https://api.dhan.co"
    dhan_access_token: str = ""
    dhan_timeout: Optional[float] = None  # None = wait for the broker indefinitely

    # Equity series sampling
    equity_series_capacity: int = 600
    equity_min_interval_ms: int = 5000
    equity_change_threshold: float = 0.001  # 0.1% of last equity
    equity_synthetic_seed: bool = False  # backfill 60 demo points on first poll

    # Frontend CORS
    cors_origins: str = '["*"]'

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from JSON string."""
        try:
            return json.loads(self.cors_origins)
        except (json.JSONDecodeError, TypeError):
            return ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
