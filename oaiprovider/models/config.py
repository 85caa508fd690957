"""Provider and generation parameter records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProviderConfig(BaseModel):
    """Endpoint configuration handed over by the host.

    ``api_key`` is opaque here; it is carried for the transport and never
    read by the translation functions.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    api_key: str = ""
    default_model: str


class GenerationConfig(BaseModel):
    """Sampling and output parameters for a single request."""

    model_config = ConfigDict(frozen=True)

    model: str
    max_tokens: int | None = Field(None, ge=0)
    temperature: float = 0.7
    streaming: bool = False


__all__ = ["ProviderConfig", "GenerationConfig"]
