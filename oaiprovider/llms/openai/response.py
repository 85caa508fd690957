"""Parsing of non-streaming chat-completions responses."""

from __future__ import annotations

from pydantic import ValidationError

from oaiprovider.core.errors import EmptyResponseError, ResponseParseError
from oaiprovider.core.logging import get_logger
from oaiprovider.models import AssistantMessage, ToolCall

from .models import ChatCompletionResponse


logger = get_logger(__name__)


def parse_response(body: str | bytes, model: str = "") -> AssistantMessage:
    """Convert a complete response body into an assistant message.

    Only the first choice is read. Tool-call arguments are copied verbatim and
    are not decoded.

    Args:
        body: Raw JSON response body
        model: Model the request was made for, used for log context only

    Returns:
        The assistant text (possibly ``None``) and its tool calls

    Raises:
        ResponseParseError: If the body is not a chat-completions response
        EmptyResponseError: If the response has no choices
    """
    try:
        response = ChatCompletionResponse.model_validate_json(body)
    except ValidationError as e:
        logger.debug(
            "response_parse_failed",
            model=model,
            error_count=e.error_count(),
            operation="parse_response",
        )
        raise ResponseParseError(f"Failed to parse response: {e}", cause=e) from e

    if not response.choices:
        raise EmptyResponseError("No choices in response")

    message = response.choices[0].message
    tool_calls = [
        ToolCall(
            id=call.id,
            name=call.function.name,
            arguments=call.function.arguments,
        )
        for call in message.tool_calls or []
    ]

    logger.debug(
        "format_conversion_completed",
        model=model,
        response_id=response.id,
        choice_count=len(response.choices),
        content_length=len(message.content) if message.content else 0,
        tool_calls_count=len(tool_calls),
        operation="parse_response",
    )
    return AssistantMessage(content=message.content, tool_calls=tool_calls)


__all__ = ["parse_response"]
