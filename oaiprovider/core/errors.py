"""Core error types for the provider translation layer."""

from typing import Any


class ProviderError(Exception):
    """Base exception for all provider translation errors.

    Every error carries a human-readable message and a stable machine code
    that hosts can match on.
    """

    code: str = "PROVIDER_ERROR"

    def __init__(self, message: str, cause: Exception | None = None):
        """Initialize with a message and optional cause.

        Args:
            message: The error message
            cause: The underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause:
            # Use Python's exception chaining
            self.__cause__ = cause

    def to_dict(self) -> dict[str, str]:
        """Return the error as a ``{"message", "code"}`` mapping."""
        return {"message": self.message, "code": self.code}


class SerializationError(ProviderError):
    """Raised when an outgoing request body cannot be serialized."""

    code = "SERIALIZATION_ERROR"

    def __init__(self, message: str, data: Any = None, cause: Exception | None = None):
        """Initialize with a message, optional data, and cause.

        Args:
            message: The error message
            data: The body that failed to serialize
            cause: The underlying exception
        """
        super().__init__(message, cause)
        self.data = data


class JsonParseError(ProviderError):
    """Raised when host-supplied JSON text (the message list) is invalid."""

    code = "JSON_PARSE_ERROR"


class ResponseParseError(ProviderError):
    """Raised when a response body does not match the chat-completions shape."""

    code = "PARSE_ERROR"


class EmptyResponseError(ProviderError):
    """Raised when a response parses but carries no choices."""

    code = "EMPTY_RESPONSE"


__all__ = [
    "ProviderError",
    "SerializationError",
    "JsonParseError",
    "ResponseParseError",
    "EmptyResponseError",
]
