"""
brewCOGS Configuration

Settings loaded from environment variables (prefix BREWCOGS_) or a .env file.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App info
    app_name: str = "brewCOGS"
    debug: bool = False

    # Storage
    data_dir: str = "./data"
    catalog_file: str = "products.json"

    # Rounding at the persistence/display boundary
    cost_decimals: int = 4
    price_decimals: int = 2
    servings_decimals: int = 2

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "BREWCOGS_"
        case_sensitive = False

    @property
    def catalog_path(self) -> Path:
        """Full path of the JSON product catalog."""
        return Path(self.data_dir) / self.catalog_file


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for scripts and notebooks."""
    settings = get_settings()
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logging.getLogger(__name__).debug(f"{settings.app_name} logging configured at {level}")
