"""Per-fragment extraction of deltas from chat-completions SSE streams.

Each call looks at exactly one fragment and keeps no state between calls;
reassembling frames split across reads is the transport's job. A fragment
that is not a ``data:`` event, is not valid JSON, or carries nothing usable
yields ``None``. Extraction never raises.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from typing import Any

from oaiprovider.core.logging import get_logger
from oaiprovider.models import (
    ContentDelta,
    StreamDone,
    TextDelta,
    ToolCall,
    ToolCallDelta,
)


logger = get_logger(__name__)

SSE_DATA_PREFIX = "data: "
SSE_DONE_SENTINEL = "[DONE]"


def _get(value: Any, *path: str | int) -> Any:
    """Follow ``path`` through nested dicts/lists, returning ``None`` when absent."""
    for key in path:
        if isinstance(key, int):
            if not isinstance(value, list) or not 0 <= key < len(value):
                return None
            value = value[key]
        elif isinstance(value, dict):
            value = value.get(key)
        else:
            return None
    return value


def _get_str(value: Any, *path: str | int) -> str | None:
    found = _get(value, *path)
    return found if isinstance(found, str) else None


def _get_index(value: Any, *path: str | int) -> int | None:
    found = _get(value, *path)
    if isinstance(found, bool) or not isinstance(found, int) or found < 0:
        return None
    return found


def extract_sse_data(chunk: str) -> str | None:
    """Return the payload of a ``data:`` event, or ``None`` if there is none.

    A fragment may start with the data line or carry it after an
    ``event:`` line; in the latter case everything after the first
    ``\\ndata: `` is the payload.
    """
    chunk = chunk.strip()
    if chunk.startswith(SSE_DATA_PREFIX):
        return chunk[len(SSE_DATA_PREFIX) :]
    marker = "\n" + SSE_DATA_PREFIX
    pos = chunk.find(marker)
    if pos == -1:
        return None
    return chunk[pos + len(marker) :]


def handle_stream_chunk(chunk: str) -> ContentDelta | None:
    """Decode one SSE fragment into at most one delta.

    Text content is checked before tool calls and wins if a fragment
    somehow carries both. For tool calls only the first entry is read.
    """
    data = extract_sse_data(chunk)
    if data is None:
        return None

    if data == SSE_DONE_SENTINEL:
        return StreamDone()

    try:
        payload = json.loads(data)
    except json.JSONDecodeError:
        logger.debug(
            "stream_chunk_parse_failed",
            chunk_data=data[:100] + "..." if len(data) > 100 else data,
            operation="handle_stream_chunk",
        )
        return None

    choices = _get(payload, "choices")
    if not isinstance(choices, list) or not choices:
        return None

    delta = _get(choices, 0, "delta")

    content = _get_str(delta, "content")
    if content is not None:
        return TextDelta(text=content)

    tool_calls = _get(delta, "tool_calls")
    if isinstance(tool_calls, list) and tool_calls:
        tc = tool_calls[0]
        call_id = _get_str(tc, "id")
        name = _get_str(tc, "function", "name")
        arguments = _get_str(tc, "function", "arguments")

        # An index-only fragment carries nothing to act on
        if call_id is None and name is None and arguments is None:
            return None

        return ToolCallDelta(
            index=_get_index(tc, "index"),
            tool_call=ToolCall(
                id=call_id or "",
                name=name or "",
                arguments=arguments or "",
            ),
        )

    return None


def iter_stream_deltas(chunks: Iterable[str]) -> Iterator[ContentDelta]:
    """Yield the deltas of a fragment sequence in order, stopping at ``[DONE]``.

    Fragments without a recognizable payload are skipped.
    """
    for chunk in chunks:
        delta = handle_stream_chunk(chunk)
        if delta is None:
            continue
        yield delta
        if isinstance(delta, StreamDone):
            return


__all__ = [
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "extract_sse_data",
    "handle_stream_chunk",
    "iter_stream_deltas",
]
