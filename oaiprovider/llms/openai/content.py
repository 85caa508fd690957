"""Content normalization for the chat-completions wire format."""

import json
from typing import Any


def normalize_content(content: Any) -> str:
    """Collapse a host content value into the string the wire format expects.

    Strings pass through unchanged, objects and arrays are re-serialized to
    compact JSON text, and every other shape (``None``, numbers, booleans)
    becomes ``""``. Never raises.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, dict | list):
        try:
            return json.dumps(content, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError):
            return ""
    return ""


__all__ = ["normalize_content"]
