"""OpenAI-compatible provider facade.

Exposes the translation functions under the operation names the host runtime
calls, plus the static metadata and endpoint helpers. Every operation is a
pure function of its arguments; :class:`OpenAIProvider` only adds optional
stored configuration for convenience calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from oaiprovider.config import Settings
from oaiprovider.llms.openai import (
    build_request_body,
    format_request,
    format_request_from_json,
    handle_stream_chunk,
    parse_response,
    serialize_request_body,
)
from oaiprovider.models import (
    AssistantMessage,
    ContentDelta,
    ExtensionMetadata,
    GenerationConfig,
    Message,
    ProviderConfig,
    ProviderFeatures,
    ProviderMetadata,
    ToolChoicePolicy,
    ToolSpec,
)


PROVIDER_ID = "openai-unofficial"
PROVIDER_VERSION = "0.1.0"
EXTENSION_API_VERSION = "0.3.0"
DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"
CHAT_COMPLETIONS_PATH = "/chat/completions"

PROVIDER_METADATA = ProviderMetadata(
    name=PROVIDER_ID,
    version=PROVIDER_VERSION,
    description="OpenAI-compatible API provider - works with any OpenAI-compatible endpoint",
    supported_models="any",
    features=ProviderFeatures(streaming=True, function_calling=True, vision=False),
    default_model=DEFAULT_MODEL,
)

EXTENSION_METADATA = ExtensionMetadata(
    id=PROVIDER_ID,
    name="OpenAI Unofficial Provider",
    version=PROVIDER_VERSION,
    api_version=EXTENSION_API_VERSION,
    description="OpenAI-compatible API provider with streaming and function calling",
)


def get_api_url(base_url: str, model: str = "") -> str:
    """Return the chat-completions endpoint for ``base_url``.

    One trailing slash on ``base_url`` is dropped. ``model`` does not affect
    the URL for this provider.
    """
    return f"{base_url.removesuffix('/')}{CHAT_COMPLETIONS_PATH}"


def supports_streaming(model: str = "") -> bool:
    """Every model behind an OpenAI-compatible endpoint can stream."""
    return True


def get_provider_metadata() -> str:
    """Return the static capability descriptor as compact JSON."""
    return PROVIDER_METADATA.model_dump_json()


def get_extension_metadata() -> ExtensionMetadata:
    """Return the identity the extension registers with the host runtime."""
    return EXTENSION_METADATA


def list_capabilities() -> list[str]:
    """Return the capability names this extension implements."""
    return ["provider"]


class OpenAIProvider:
    """Provider extension surface for OpenAI-compatible endpoints.

    The methods mirror the module-level functions. An instance may also hold
    a provider and generation configuration, used by :meth:`build_request`
    and :meth:`api_url`.
    """

    def __init__(
        self,
        config: ProviderConfig | None = None,
        generation: GenerationConfig | None = None,
    ) -> None:
        self.config = config or ProviderConfig(
            base_url=DEFAULT_BASE_URL, default_model=DEFAULT_MODEL
        )
        self.generation = generation or GenerationConfig(
            model=self.config.default_model
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> OpenAIProvider:
        """Create a provider from loaded settings."""
        return cls(
            config=settings.provider_config(),
            generation=settings.generation_config(),
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(base_url={self.config.base_url!r}, "
            f"model={self.generation.model!r})"
        )

    # Extension core
    def get_metadata(self) -> ExtensionMetadata:
        return get_extension_metadata()

    def list_capabilities(self) -> list[str]:
        return list_capabilities()

    # Provider operations
    def get_provider_metadata(self) -> str:
        return get_provider_metadata()

    def format_request(
        self,
        messages: Sequence[Message],
        config: ProviderConfig,
        tools: Sequence[ToolSpec] | None = None,
    ) -> str:
        return format_request(messages, config, tools)

    def format_request_from_json(
        self,
        messages_json: str,
        model: str,
        tools_json: str | None = None,
        tool_choice_json: str | None = None,
        max_tokens: int | None = None,
        temperature: float = 0.7,
        enable_streaming: bool = False,
    ) -> str:
        return format_request_from_json(
            messages_json,
            model,
            tools_json=tools_json,
            tool_choice_json=tool_choice_json,
            max_tokens=max_tokens,
            temperature=temperature,
            enable_streaming=enable_streaming,
        )

    def parse_response(self, body: str | bytes, model: str = "") -> AssistantMessage:
        return parse_response(body, model)

    def handle_stream_chunk(self, chunk: str) -> ContentDelta | None:
        return handle_stream_chunk(chunk)

    def get_api_url(self, base_url: str, model: str = "") -> str:
        return get_api_url(base_url, model)

    def supports_streaming(self, model: str = "") -> bool:
        return supports_streaming(model)

    # Convenience calls using the stored configuration
    def build_request(
        self,
        messages: Sequence[Message | dict[str, Any]],
        tools: Sequence[dict[str, Any]] | None = None,
        tool_choice: ToolChoicePolicy | None = None,
    ) -> str:
        """Serialize a request using the stored generation parameters.

        Raises:
            SerializationError: If the body cannot be serialized
        """
        body = build_request_body(messages, self.generation, tools, tool_choice)
        return serialize_request_body(body)

    def api_url(self) -> str:
        return get_api_url(self.config.base_url, self.generation.model)


__all__ = [
    "PROVIDER_ID",
    "PROVIDER_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL",
    "PROVIDER_METADATA",
    "EXTENSION_METADATA",
    "OpenAIProvider",
    "get_api_url",
    "supports_streaming",
    "get_provider_metadata",
    "get_extension_metadata",
    "list_capabilities",
]
