"""Configuration module for the OpenAI-compatible provider."""

from .logging import LoggingSettings
from .settings import ConfigurationError, Settings, get_settings


__all__ = [
    "Settings",
    "get_settings",
    "LoggingSettings",
    "ConfigurationError",
]
