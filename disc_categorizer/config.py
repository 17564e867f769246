"""Configuration management using pydantic-settings."""
import logging
import sys
from functools import lru_cache
from typing import Literal, Optional

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CategorizeSettings(BaseSettings):
    """Categorization configuration loaded from environment variables.

    All settings prefixed with CATEGORIZE_ (e.g., CATEGORIZE_MATCH_THRESHOLD=0.3)
    """

    # Reference Data API
    reference_api_url: str = Field(
        default="https://drn-api-v2.discrescuenetwork.com",
        description="Base URL of the brands/discs reference API"
    )
    brands_path: str = Field(
        default="/brands",
        description="Path of the brand collection endpoint"
    )
    discs_path: str = Field(
        default="/discs",
        description="Path of the disc mold collection endpoint"
    )
    fetch_timeout: float = Field(
        default=10.0,
        gt=0.0,
        le=120.0,
        description="Upper bound in seconds for each reference fetch"
    )
    allow_partial_vocabulary: bool = Field(
        default=False,
        description="Classify with the surviving vocabulary when only one fetch fails"
    )

    # Fuzzy Matching
    match_threshold: float = Field(
        default=0.35,
        ge=0.0,
        le=1.0,
        description="Maximum match distance (0 = exact only, 1 = match anything)"
    )
    max_candidates: Optional[int] = Field(
        default=None,
        ge=1,
        description="Cap on matches returned per query (None = all)"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    environment: Literal["development", "staging", "production"] = "development"

    model_config = SettingsConfigDict(
        env_prefix="CATEGORIZE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> CategorizeSettings:
    """Return the cached settings instance."""
    return CategorizeSettings()


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog on top of stdlib logging.

    JSON output for production, colored console output otherwise.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    shared_processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
