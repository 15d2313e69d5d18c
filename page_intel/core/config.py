"""Configuration management for the Page Intelligence engine."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    # Environment variables should be set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    PAGE_INTEL_ENV: str = Field(default="dev", description="Environment: dev, staging, prod, test")

    # Section lock lookup: "fuzzy" falls back to substring matching on section names,
    # "exact" only accepts an identical section name
    SECTION_LOCK_MATCH: Literal["fuzzy", "exact"] = Field(
        default="fuzzy", description="Locked-section lookup policy"
    )

    # Intelligence scoring
    MARKET_RESEARCH_BONUS_POINTS: int = Field(
        default=10, ge=0, le=100, description="Points added once market research completes"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    return Settings()
