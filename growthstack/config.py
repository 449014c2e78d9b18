"""Pydantic settings for the GrowthStack API."""

from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from growthstack.core.report import DEFAULT_TITLE


class Settings(BaseSettings):
    """Application settings loaded from GROWTHSTACK_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GROWTHSTACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        description="Origins allowed to call /api/*",
    )

    report_title: str = Field(default=DEFAULT_TITLE, description="First line of the text report")
    report_filename: str = Field(default="growthstack_report.csv", description="Download name for /api/report")

    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse comma-separated origins."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v or []

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
