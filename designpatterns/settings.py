"""
Settings for the design pattern exercises.

Loads configuration from environment variables (.env file) with sensible defaults.
All settings can be overridden via environment variables.
"""

import os
from datetime import timedelta

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load .env file if present
load_dotenv()


class MonitoringSettings(BaseModel):
    """Performance monitoring proxy configuration."""

    threshold_ms: float = Field(
        default_factory=lambda: float(os.getenv("MONITORING_THRESHOLD_MS", "100")),
        description="Calls slower than this are logged (milliseconds)",
    )
    demo_delay_ms: float = Field(
        default_factory=lambda: float(os.getenv("DEMO_SERVICE_DELAY_MS", "150")),
        description="Delay used by the demo SlowService (milliseconds)",
    )

    @field_validator("threshold_ms", "demo_delay_ms")
    def validate_non_negative(cls, v):
        if v < 0:
            raise ValueError("Duration must not be negative")
        return v

    @property
    def threshold(self) -> timedelta:
        """Threshold as a timedelta."""
        return timedelta(milliseconds=self.threshold_ms)

    @property
    def demo_delay(self) -> timedelta:
        """Demo service delay as a timedelta."""
        return timedelta(milliseconds=self.demo_delay_ms)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    env: str = Field(
        default_factory=lambda: os.getenv("ENV", "development"),
        description="Runtime environment: 'production' switches to JSON logs",
    )
    level: str = Field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper(),
        description="Root log level",
    )

    @field_validator("level")
    def validate_level(cls, v):
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            return "INFO"
        return v


class Settings(BaseModel):
    """Global configuration.

    Configuration priority:
    1. Environment variables (.env file or system)
    2. Defaults specified below
    """

    monitoring: MonitoringSettings = Field(
        default_factory=MonitoringSettings,
        description="Performance monitoring proxy configuration",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    model_config = ConfigDict(
        extra="forbid",  # Prevent typos in environment variables
        validate_assignment=True,  # Validate on attribute assignment
    )


# Global settings instance
settings = Settings()
