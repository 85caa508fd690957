"""Host-side message, tool and result records."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Conversation roles understood by the host framework."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class MessageMetadata(BaseModel):
    """Per-message metadata attached by the host."""

    model_config = ConfigDict(frozen=True)

    tool_calls: list[dict[str, Any]] | None = Field(
        None,
        description="Wire-shaped tool calls previously emitted by the assistant.",
    )


class Message(BaseModel):
    """A single chat message as supplied by the host."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str | dict[str, Any] | list[Any] | None = ""
    tool_call_id: str | None = None
    metadata: MessageMetadata | None = None


class ToolSpec(BaseModel):
    """A tool definition whose parameter schema is carried as JSON text."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    parameters: str = Field(
        ..., description="JSON schema of the tool arguments, as text."
    )


class ToolCall(BaseModel):
    """A tool invocation requested by the model.

    ``arguments`` is kept as the raw JSON text produced by the model; it is
    never decoded at this layer.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = ""
    arguments: str = ""


class AssistantMessage(BaseModel):
    """Normalized result of a non-streaming completion."""

    model_config = ConfigDict(frozen=True)

    content: str | None = None
    tool_calls: list[ToolCall] = Field(default_factory=list)


__all__ = [
    "Role",
    "MessageMetadata",
    "Message",
    "ToolSpec",
    "ToolCall",
    "AssistantMessage",
]
