"""oaiprovider - translation between host agent messages and OpenAI-compatible APIs.

Request bodies are built with :func:`format_request` or
:func:`format_request_from_json`; complete responses are read with
:func:`parse_response` and SSE fragments with :func:`handle_stream_chunk`.
"""

from oaiprovider.core.errors import (
    EmptyResponseError,
    JsonParseError,
    ProviderError,
    ResponseParseError,
    SerializationError,
)
from oaiprovider.llms.openai import (
    build_request_body,
    format_request,
    format_request_from_json,
    handle_stream_chunk,
    iter_stream_deltas,
    normalize_content,
    parse_response,
)
from oaiprovider.models import (
    AssistantMessage,
    ContentDelta,
    GenerationConfig,
    Message,
    ProviderConfig,
    RawToolChoice,
    Role,
    SpecificToolChoice,
    StreamDone,
    TextDelta,
    ToolCall,
    ToolCallDelta,
    ToolChoiceMode,
    ToolSpec,
)
from oaiprovider.provider import (
    OpenAIProvider,
    get_api_url,
    get_extension_metadata,
    get_provider_metadata,
    list_capabilities,
    supports_streaming,
)


__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Facade
    "OpenAIProvider",
    "format_request",
    "format_request_from_json",
    "build_request_body",
    "parse_response",
    "handle_stream_chunk",
    "iter_stream_deltas",
    "normalize_content",
    "get_api_url",
    "supports_streaming",
    "get_provider_metadata",
    "get_extension_metadata",
    "list_capabilities",
    # Models
    "Role",
    "Message",
    "ToolSpec",
    "ToolCall",
    "AssistantMessage",
    "ToolChoiceMode",
    "SpecificToolChoice",
    "RawToolChoice",
    "ContentDelta",
    "TextDelta",
    "ToolCallDelta",
    "StreamDone",
    "ProviderConfig",
    "GenerationConfig",
    # Errors
    "ProviderError",
    "SerializationError",
    "JsonParseError",
    "ResponseParseError",
    "EmptyResponseError",
]
