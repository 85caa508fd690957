"""Data models exchanged between the host and the translation layer."""

from .config import GenerationConfig, ProviderConfig
from .deltas import ContentDelta, StreamDone, TextDelta, ToolCallDelta
from .messages import (
    AssistantMessage,
    Message,
    MessageMetadata,
    Role,
    ToolCall,
    ToolSpec,
)
from .metadata import ExtensionMetadata, ProviderFeatures, ProviderMetadata
from .tool_choice import (
    RawToolChoice,
    SpecificToolChoice,
    ToolChoiceMode,
    ToolChoicePolicy,
)


__all__ = [
    # Messages
    "Role",
    "Message",
    "MessageMetadata",
    "ToolSpec",
    "ToolCall",
    "AssistantMessage",
    # Tool choice
    "ToolChoiceMode",
    "SpecificToolChoice",
    "RawToolChoice",
    "ToolChoicePolicy",
    # Streaming
    "ContentDelta",
    "TextDelta",
    "ToolCallDelta",
    "StreamDone",
    # Configuration
    "ProviderConfig",
    "GenerationConfig",
    # Metadata
    "ProviderFeatures",
    "ProviderMetadata",
    "ExtensionMetadata",
]
