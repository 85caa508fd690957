"""Translation between host messages and the OpenAI chat-completions API."""

from .content import normalize_content
from .request import (
    build_request_body,
    convert_message,
    convert_tool_definitions,
    convert_tool_specs,
    format_request,
    format_request_from_json,
    resolve_tool_choice,
    serialize_request_body,
    tool_choice_from_json,
)
from .response import parse_response
from .streaming import extract_sse_data, handle_stream_chunk, iter_stream_deltas


__all__ = [
    # Content
    "normalize_content",
    # Requests
    "format_request",
    "format_request_from_json",
    "build_request_body",
    "serialize_request_body",
    "convert_message",
    "convert_tool_specs",
    "convert_tool_definitions",
    "tool_choice_from_json",
    "resolve_tool_choice",
    # Responses
    "parse_response",
    # Streaming
    "extract_sse_data",
    "handle_stream_chunk",
    "iter_stream_deltas",
]
