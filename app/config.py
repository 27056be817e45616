"""Application configuration with comprehensive validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with production-grade validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "IIICI Certification Scoring Service"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Redis result cache
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_ENABLED: bool = True
    CACHE_TTL_SCORES: int = Field(default=3600, ge=1, le=86400)  # 1 hour

    # Certification thresholds (overall score, 0-100)
    GOLD_THRESHOLD: float = Field(default=80.0, ge=0, le=100)
    CERTIFIED_THRESHOLD: float = Field(default=60.0, ge=0, le=100)

    # Pillars below this average get a recommendation
    IMPROVEMENT_THRESHOLD: float = Field(default=60.0, ge=0, le=100)

    @model_validator(mode="after")
    def validate_thresholds(self):
        """Gold must sit strictly above Certified."""
        if self.GOLD_THRESHOLD <= self.CERTIFIED_THRESHOLD:
            raise ValueError(
                f"GOLD_THRESHOLD ({self.GOLD_THRESHOLD}) must be greater than "
                f"CERTIFIED_THRESHOLD ({self.CERTIFIED_THRESHOLD})"
            )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
