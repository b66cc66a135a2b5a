"""Filter DSL settings."""

import logging

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Settings for the filter DSL, read from ``FILTER_DSL_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="FILTER_DSL_", extra="ignore")

    # Logging
    logging_level: int = logging.INFO

    # Wire format
    date_format: str = "%Y-%m-%d"

    # Query state
    default_page_size: int = Field(default=10, ge=0)
    compare_updates: bool = True

    @field_validator("logging_level", mode="before")
    @classmethod
    def parse_logging_level(cls, value):
        if isinstance(value, str) and not value.isdigit():
            level = getattr(logging, value.upper(), None)
            if not isinstance(level, int):
                raise ValueError(f"Unknown logging level: {value}")
            return level
        return value


settings = Settings()
