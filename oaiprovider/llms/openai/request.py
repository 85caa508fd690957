"""Request building for the OpenAI chat-completions API.

Two entry points exist. :func:`format_request` handles plain ``Message``
records with string-schema tools. :func:`format_request_from_json` handles the
host's full message list (tool results, assistant tool calls, tool choice and
generation parameters) delivered as JSON text, and delegates the actual
conversion to :func:`build_request_body`.

Only the envelope can fail: an unparseable message list raises
``JsonParseError``; invalid generation parameters or an unserializable body
raise ``SerializationError``.
Malformed tools or tool-choice values are dropped from the body instead.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from oaiprovider.core.errors import JsonParseError, SerializationError
from oaiprovider.core.logging import get_logger
from oaiprovider.models import (
    GenerationConfig,
    Message,
    ProviderConfig,
    RawToolChoice,
    SpecificToolChoice,
    ToolChoiceMode,
    ToolChoicePolicy,
    ToolSpec,
)

from .content import normalize_content


logger = get_logger(__name__)


# Host spellings accepted for the bare tool-choice modes
TOOL_CHOICE_MODE_ALIASES: dict[str, ToolChoiceMode] = {
    "Auto": ToolChoiceMode.AUTO,
    "auto": ToolChoiceMode.AUTO,
    "Required": ToolChoiceMode.REQUIRED,
    "required": ToolChoiceMode.REQUIRED,
    "None": ToolChoiceMode.NONE,
    "none": ToolChoiceMode.NONE,
}


def serialize_request_body(body: dict[str, Any]) -> str:
    """Encode a request body as compact JSON; NaN and infinity are rejected."""
    try:
        return json.dumps(
            body, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Failed to serialize request: {e}", data=body, cause=e
        ) from e


def _function_tool(name: Any, description: Any, parameters: Any) -> dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": name,
            "description": description,
            "parameters": parameters,
        },
    }


def convert_tool_specs(tools: Sequence[ToolSpec]) -> list[dict[str, Any]]:
    """Wrap tool specs into wire function tools.

    Each tool's ``parameters`` text must decode to a JSON object; tools that
    fail are left out of the result.
    """
    openai_tools: list[dict[str, Any]] = []
    for tool in tools:
        try:
            params = json.loads(tool.parameters)
        except (json.JSONDecodeError, TypeError) as e:
            logger.debug(
                "tool_schema_dropped",
                tool_name=tool.name,
                error=str(e),
                operation="convert_tool_specs",
            )
            continue
        if not isinstance(params, dict):
            logger.debug(
                "tool_schema_dropped",
                tool_name=tool.name,
                error="parameters is not a JSON object",
                operation="convert_tool_specs",
            )
            continue
        openai_tools.append(_function_tool(tool.name, tool.description, params))
    return openai_tools


def convert_tool_definitions(tools: Sequence[Any]) -> list[dict[str, Any]]:
    """Wrap already-decoded tool objects into wire function tools.

    Fields are copied as-is (missing ones become ``null``); entries that are
    not JSON objects are skipped.
    """
    openai_tools: list[dict[str, Any]] = []
    for tool in tools:
        if not isinstance(tool, dict):
            logger.debug(
                "tool_definition_dropped",
                tool_type=type(tool).__name__,
                operation="convert_tool_definitions",
            )
            continue
        openai_tools.append(
            _function_tool(
                tool.get("name"), tool.get("description"), tool.get("parameters")
            )
        )
    return openai_tools


def tool_choice_from_json(value: Any) -> ToolChoicePolicy | None:
    """Map a decoded host tool-choice value onto a policy.

    Returns ``None`` for shapes that are not recognized.
    """
    if isinstance(value, str):
        return TOOL_CHOICE_MODE_ALIASES.get(value)
    if isinstance(value, dict):
        specific = value.get("Specific")
        if isinstance(specific, str):
            return SpecificToolChoice(name=specific)
        if "type" in value:
            return RawToolChoice(value=value)
    return None


def resolve_tool_choice(policy: ToolChoicePolicy) -> str | dict[str, Any]:
    """Render a tool-choice policy as its wire value."""
    if isinstance(policy, ToolChoiceMode):
        return policy.value
    if isinstance(policy, SpecificToolChoice):
        return {"type": "function", "function": {"name": policy.name}}
    return policy.value


def _as_mapping(message: Any) -> dict[str, Any]:
    if isinstance(message, Message):
        return message.model_dump(mode="json")
    if isinstance(message, dict):
        return message
    return {}


def convert_message(message: Any) -> dict[str, Any]:
    """Convert one host message into its role-specific wire shape."""
    msg = _as_mapping(message)
    role = msg.get("role")
    if not isinstance(role, str):
        role = "user"

    if role == "tool":
        tool_call_id = msg.get("tool_call_id")
        return {
            "role": "tool",
            "tool_call_id": tool_call_id if isinstance(tool_call_id, str) else "",
            "content": normalize_content(msg.get("content")),
        }

    if role == "assistant":
        # The API wants an explicit null content next to tool_calls
        assistant_msg: dict[str, Any] = {"role": "assistant", "content": None}

        content = normalize_content(msg.get("content"))
        if content:
            assistant_msg["content"] = content

        metadata = msg.get("metadata")
        if isinstance(metadata, dict):
            tool_calls = metadata.get("tool_calls")
            if isinstance(tool_calls, list) and tool_calls:
                assistant_msg["tool_calls"] = tool_calls

        return assistant_msg

    return {"role": role, "content": normalize_content(msg.get("content"))}


def format_request(
    messages: Sequence[Message],
    config: ProviderConfig,
    tools: Sequence[ToolSpec] | None = None,
) -> str:
    """Serialize plain messages into a chat-completions request body.

    Args:
        messages: Messages to send, mapped to ``{role, content}`` in order
        config: Provider configuration; its default model is used
        tools: Optional tool specs with JSON-schema text parameters

    Returns:
        The request body as compact JSON text

    Raises:
        SerializationError: If the body cannot be serialized
    """
    body: dict[str, Any] = {
        "model": config.default_model,
        "messages": [
            {
                "role": message.role.value,
                "content": normalize_content(message.content),
            }
            for message in messages
        ],
    }

    if tools:
        openai_tools = convert_tool_specs(tools)
        if openai_tools:
            body["tools"] = openai_tools

    return serialize_request_body(body)


def build_request_body(
    messages: Sequence[Any],
    generation: GenerationConfig,
    tools: Sequence[Any] | None = None,
    tool_choice: ToolChoicePolicy | None = None,
) -> dict[str, Any]:
    """Assemble the full request body as a dict.

    Args:
        messages: Decoded host messages (dicts) or ``Message`` records
        generation: Model and sampling parameters
        tools: Decoded tool objects with ``name``/``description``/``parameters``
        tool_choice: Optional tool-choice policy

    Returns:
        The wire request body
    """
    body: dict[str, Any] = {
        "model": generation.model,
        "messages": [convert_message(message) for message in messages],
        "temperature": generation.temperature,
    }

    if generation.max_tokens is not None:
        body["max_tokens"] = generation.max_tokens

    if generation.streaming:
        body["stream"] = True

    if tools:
        openai_tools = convert_tool_definitions(tools)
        if openai_tools:
            body["tools"] = openai_tools

    if tool_choice is not None:
        body["tool_choice"] = resolve_tool_choice(tool_choice)

    logger.debug(
        "format_conversion_completed",
        model=generation.model,
        message_count=len(body["messages"]),
        has_tools="tools" in body,
        has_tool_choice="tool_choice" in body,
        stream=generation.streaming,
        operation="build_request_body",
    )
    return body


def _decode_tools(tools_json: str) -> list[Any] | None:
    try:
        tools = json.loads(tools_json)
    except (json.JSONDecodeError, TypeError) as e:
        logger.debug("tools_json_ignored", error=str(e), operation="decode_tools")
        return None
    if not isinstance(tools, list):
        logger.debug(
            "tools_json_ignored",
            error="tools JSON is not an array",
            operation="decode_tools",
        )
        return None
    return tools


def _decode_tool_choice(tool_choice_json: str) -> ToolChoicePolicy | None:
    try:
        value = json.loads(tool_choice_json)
    except (json.JSONDecodeError, TypeError) as e:
        logger.debug("tool_choice_ignored", error=str(e), operation="decode_tool_choice")
        return None
    policy = tool_choice_from_json(value)
    if policy is None:
        logger.debug(
            "tool_choice_ignored",
            error="unrecognized tool choice shape",
            operation="decode_tool_choice",
        )
    return policy


def format_request_from_json(
    messages_json: str,
    model: str,
    tools_json: str | None = None,
    tool_choice_json: str | None = None,
    max_tokens: int | None = None,
    temperature: float = 0.7,
    enable_streaming: bool = False,
) -> str:
    """Serialize a JSON-encoded host conversation into a request body.

    Args:
        messages_json: JSON array of host messages
        model: Model identifier
        tools_json: Optional JSON array of tool objects
        tool_choice_json: Optional JSON tool-choice value
        max_tokens: Optional output token limit
        temperature: Sampling temperature, always sent
        enable_streaming: Adds ``"stream": true`` when set

    Returns:
        The request body as compact JSON text

    Raises:
        JsonParseError: If ``messages_json`` is not a JSON array
        SerializationError: If the generation parameters are invalid (such
            as a negative ``max_tokens``) or the body cannot be serialized
    """
    try:
        messages = json.loads(messages_json)
    except (json.JSONDecodeError, TypeError) as e:
        raise JsonParseError(f"Failed to parse messages JSON: {e}", cause=e) from e
    if not isinstance(messages, list):
        raise JsonParseError(
            f"Failed to parse messages JSON: expected an array, got {type(messages).__name__}"
        )

    try:
        generation = GenerationConfig(
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
            streaming=enable_streaming,
        )
    except ValidationError as e:
        raise SerializationError(
            f"Failed to serialize request: invalid generation parameters: {e}",
            data={
                "model": model,
                "max_tokens": max_tokens,
                "temperature": temperature,
            },
            cause=e,
        ) from e

    tools = _decode_tools(tools_json) if tools_json is not None else None
    tool_choice = (
        _decode_tool_choice(tool_choice_json) if tool_choice_json is not None else None
    )

    body = build_request_body(messages, generation, tools, tool_choice)
    return serialize_request_body(body)


__all__ = [
    "TOOL_CHOICE_MODE_ALIASES",
    "serialize_request_body",
    "convert_message",
    "convert_tool_specs",
    "convert_tool_definitions",
    "tool_choice_from_json",
    "resolve_tool_choice",
    "format_request",
    "build_request_body",
    "format_request_from_json",
]
