"""
Pydantic V2 models for the OpenAI /v1/chat/completions response bodies.

Only the fields the translation layer reads are declared; anything else in
the payload is ignored. Streaming chunks are deliberately not modelled here,
since fragments are navigated field by field so that a partial or odd chunk
never raises.
"""

from typing import Any

from pydantic import BaseModel


# ==============================================================================
# Chat Completions Endpoint (/v1/chat/completions)
# ==============================================================================

# --- Response Models (Non-streaming) ---


class FunctionCall(BaseModel):
    name: str
    arguments: str


class ToolCall(BaseModel):
    id: str
    type: str
    function: FunctionCall


class ResponseMessage(BaseModel):
    role: str
    content: str | None = None
    tool_calls: list[ToolCall] | None = None
    refusal: str | None = None


class Choice(BaseModel):
    message: ResponseMessage
    index: int | None = None
    finish_reason: str | None = None
    logprobs: dict[str, Any] | None = None


class CompletionUsage(BaseModel):
    completion_tokens: int | None = None
    prompt_tokens: int | None = None
    total_tokens: int | None = None


class ChatCompletionResponse(BaseModel):
    id: str | None = None
    choices: list[Choice]
    created: int | None = None
    model: str | None = None
    object: str | None = None
    usage: CompletionUsage | None = None


__all__ = [
    "FunctionCall",
    "ToolCall",
    "ResponseMessage",
    "Choice",
    "CompletionUsage",
    "ChatCompletionResponse",
]
