"""Core abstractions shared by the translation modules."""

from oaiprovider.core.errors import (
    EmptyResponseError,
    JsonParseError,
    ProviderError,
    ResponseParseError,
    SerializationError,
)
from oaiprovider.core.logging import get_logger, setup_logging


__all__ = [
    # Error types
    "ProviderError",
    "SerializationError",
    "JsonParseError",
    "ResponseParseError",
    "EmptyResponseError",
    # Logging
    "get_logger",
    "setup_logging",
]
