"""Streaming delta variants produced one per SSE fragment.

A fragment that carries nothing recognizable maps to ``None`` rather than to
a dedicated variant, so callers can simply skip falsy results.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .messages import ToolCall


class TextDelta(BaseModel):
    """A fragment of assistant text."""

    model_config = ConfigDict(frozen=True)

    type: Literal["content"] = "content"
    text: str


class ToolCallDelta(BaseModel):
    """A fragment of a tool call.

    Absent string fields are reported as ``""``; ``index`` is ``None`` when the
    fragment did not carry a usable index.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["tool_call"] = "tool_call"
    index: int | None = None
    tool_call: ToolCall


class StreamDone(BaseModel):
    """The ``[DONE]`` sentinel that terminates a stream."""

    model_config = ConfigDict(frozen=True)

    type: Literal["done"] = "done"


ContentDelta = TextDelta | ToolCallDelta | StreamDone


__all__ = ["TextDelta", "ToolCallDelta", "StreamDone", "ContentDelta"]
