"""Static capability descriptors."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ProviderFeatures(BaseModel):
    model_config = ConfigDict(frozen=True)

    streaming: bool = True
    function_calling: bool = True
    vision: bool = False


class ProviderMetadata(BaseModel):
    """Capability descriptor reported to the host."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    description: str
    supported_models: str = "any"
    features: ProviderFeatures = ProviderFeatures()
    default_model: str


class ExtensionMetadata(BaseModel):
    """Identity of the extension as registered with the host runtime."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    version: str
    api_version: str
    description: str


__all__ = ["ProviderFeatures", "ProviderMetadata", "ExtensionMetadata"]
