"""Shared test fixtures for oaiprovider tests.

Everything under test is a pure function, so fixtures only provide sample
host values and wire payloads.
"""

import json
from collections.abc import Generator
from typing import Any

import pytest

from oaiprovider.config import get_settings
from oaiprovider.models import Message, ProviderConfig, Role, ToolSpec


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig(
        base_url="https://api.openai.com/v1",
        api_key="test-key",
        default_model="gpt-4o",
    )


@pytest.fixture
def weather_tool() -> ToolSpec:
    return ToolSpec(
        name="get_weather",
        description="Get the current weather for a location",
        parameters=json.dumps(
            {
                "type": "object",
                "properties": {"location": {"type": "string"}},
                "required": ["location"],
            }
        ),
    )


@pytest.fixture
def conversation() -> list[Message]:
    return [
        Message(role=Role.SYSTEM, content="You are a helpful assistant."),
        Message(role=Role.USER, content="What's the weather in NYC?"),
    ]


@pytest.fixture
def tool_call_response() -> dict[str, Any]:
    """A non-streaming response where the assistant only calls a tool."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [
                        {
                            "id": "call_123",
                            "type": "function",
                            "function": {
                                "name": "get_weather",
                                "arguments": '{"location":"NYC"}',
                            },
                        }
                    ],
                },
                "finish_reason": "tool_calls",
            }
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 9, "total_tokens": 21},
    }


@pytest.fixture
def clean_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
