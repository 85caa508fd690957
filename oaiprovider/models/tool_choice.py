"""Tool-choice policy variants."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ToolChoiceMode(str, Enum):
    """Tool-choice policies that map onto a bare wire string."""

    AUTO = "auto"
    REQUIRED = "required"
    NONE = "none"


class SpecificToolChoice(BaseModel):
    """Force the model to call the named function."""

    model_config = ConfigDict(frozen=True)

    name: str


class RawToolChoice(BaseModel):
    """A tool choice already shaped for the wire (it has a ``type`` key)."""

    model_config = ConfigDict(frozen=True)

    value: dict[str, Any]


ToolChoicePolicy = ToolChoiceMode | SpecificToolChoice | RawToolChoice


__all__ = [
    "ToolChoiceMode",
    "SpecificToolChoice",
    "RawToolChoice",
    "ToolChoicePolicy",
]
