"""Tests for the provider facade and its static metadata."""

import json

import pytest

from oaiprovider import (
    OpenAIProvider,
    get_api_url,
    get_extension_metadata,
    get_provider_metadata,
    list_capabilities,
    supports_streaming,
)
from oaiprovider.config import Settings
from oaiprovider.models import (
    GenerationConfig,
    Message,
    ProviderConfig,
    Role,
    StreamDone,
    ToolChoiceMode,
)


@pytest.mark.unit
class TestApiUrl:
    @pytest.mark.parametrize(
        ("base_url", "expected"),
        [
            ("https://api.openai.com/v1", "https://api.openai.com/v1/chat/completions"),
            (
                "https://api.openai.com/v1/",
                "https://api.openai.com/v1/chat/completions",
            ),
            ("http://localhost:11434/v1", "http://localhost:11434/v1/chat/completions"),
            ("", "/chat/completions"),
        ],
    )
    def test_get_api_url(self, base_url: str, expected: str) -> None:
        assert get_api_url(base_url, "gpt-4o") == expected

    def test_only_one_trailing_slash_is_removed(self) -> None:
        assert get_api_url("https://host/v1//") == "https://host/v1//chat/completions"

    def test_model_does_not_change_url(self) -> None:
        assert get_api_url("https://x/v1", "a") == get_api_url("https://x/v1", "b")


@pytest.mark.unit
class TestMetadata:
    @pytest.mark.parametrize("model", ["", "gpt-4o", "some-local-model"])
    def test_supports_streaming(self, model: str) -> None:
        assert supports_streaming(model) is True

    def test_provider_metadata(self) -> None:
        metadata = json.loads(get_provider_metadata())

        assert metadata == {
            "name": "openai-unofficial",
            "version": "0.1.0",
            "description": (
                "OpenAI-compatible API provider - works with any "
                "OpenAI-compatible endpoint"
            ),
            "supported_models": "any",
            "features": {
                "streaming": True,
                "function_calling": True,
                "vision": False,
            },
            "default_model": "gpt-4o-mini",
        }

    def test_provider_metadata_is_stable(self) -> None:
        assert get_provider_metadata() == get_provider_metadata()

    def test_extension_metadata(self) -> None:
        metadata = get_extension_metadata()

        assert metadata.id == "openai-unofficial"
        assert metadata.name == "OpenAI Unofficial Provider"
        assert metadata.api_version == "0.3.0"

    def test_capabilities(self) -> None:
        assert list_capabilities() == ["provider"]


@pytest.mark.unit
class TestOpenAIProvider:
    def test_defaults(self) -> None:
        provider = OpenAIProvider()

        assert provider.config.base_url == "https://api.openai.com/v1"
        assert provider.generation.model == "gpt-4o-mini"
        assert provider.api_url() == "https://api.openai.com/v1/chat/completions"
        assert "gpt-4o-mini" in repr(provider)

    def test_methods_delegate(self, provider_config: ProviderConfig) -> None:
        provider = OpenAIProvider(provider_config)
        messages = [Message(role=Role.USER, content="Hi")]

        assert json.loads(provider.format_request(messages, provider_config)) == {
            "model": "gpt-4o",
            "messages": [{"role": "user", "content": "Hi"}],
        }
        assert provider.handle_stream_chunk("data: [DONE]") == StreamDone()
        assert provider.supports_streaming("gpt-4o") is True
        assert provider.list_capabilities() == ["provider"]
        assert provider.get_metadata() == get_extension_metadata()
        assert provider.get_provider_metadata() == get_provider_metadata()
        assert provider.get_api_url("https://x/v1/") == "https://x/v1/chat/completions"

    def test_format_request_from_json(self) -> None:
        provider = OpenAIProvider()

        body = json.loads(
            provider.format_request_from_json(
                '[{"role": "user", "content": "Hi"}]',
                "gpt-4o",
                max_tokens=5,
                enable_streaming=True,
            )
        )

        assert body["max_tokens"] == 5
        assert body["stream"] is True

    def test_parse_response(self) -> None:
        body = '{"choices":[{"message":{"role":"assistant","content":"Hi"}}]}'

        assert OpenAIProvider().parse_response(body, "gpt-4o").content == "Hi"

    def test_build_request_uses_stored_generation(self) -> None:
        provider = OpenAIProvider(
            generation=GenerationConfig(
                model="gpt-4o", temperature=0.1, max_tokens=64, streaming=True
            )
        )

        body = json.loads(
            provider.build_request(
                [{"role": "user", "content": "Hi"}],
                tool_choice=ToolChoiceMode.AUTO,
            )
        )

        assert body == {
            "model": "gpt-4o",
            "messages": [{"role": "user", "content": "Hi"}],
            "temperature": 0.1,
            "max_tokens": 64,
            "stream": True,
            "tool_choice": "auto",
        }

    def test_from_settings(self) -> None:
        settings = Settings(
            base_url="http://localhost:8080/v1/",
            api_key="sk-local",
            default_model="llama3",
            temperature=0.3,
            streaming=False,
        )

        provider = OpenAIProvider.from_settings(settings)

        assert provider.config.api_key == "sk-local"
        assert provider.generation.model == "llama3"
        assert provider.generation.temperature == 0.3
        assert provider.generation.streaming is False
        assert provider.api_url() == "http://localhost:8080/v1/chat/completions"
