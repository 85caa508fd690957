"""Logging configuration settings."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseModel):
    """Logging-specific configuration settings."""

    model_config = ConfigDict(validate_assignment=True)

    level: str = Field(
        default="INFO",
        description="Log level for oaiprovider loggers",
    )

    json_logs: bool = Field(
        default=False,
        description="Render log records as JSON instead of console output",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize the log level."""
        upper_v = v.upper()
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return upper_v
