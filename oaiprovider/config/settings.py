import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from oaiprovider.core.logging import get_logger
from oaiprovider.models import GenerationConfig, ProviderConfig

from .logging import LoggingSettings


__all__ = ["Settings", "ConfigurationError", "get_settings"]


ENV_PREFIX = "OAIPROVIDER_"
CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG_FILE"


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class Settings(BaseSettings):
    """
    Configuration settings for the OpenAI-compatible provider.

    Settings are loaded from environment variables (``OAIPROVIDER_`` prefix,
    ``__`` for nested keys), a ``.env`` file, and optionally a TOML file.
    Environment variables take precedence over TOML values.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
        validate_assignment=True,
    )

    base_url: str = Field(
        default="https://api.openai.com/v1",
        description="Base URL of the OpenAI-compatible API",
    )

    api_key: str | None = Field(
        default=None,
        description="API key handed to the transport (never read by the translators)",
    )

    default_model: str = Field(
        default="gpt-4o-mini",
        description="Model used when the host does not name one",
    )

    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature sent with every request",
    )

    max_tokens: int | None = Field(
        default=None,
        ge=0,
        description="Output token limit; omitted from requests when unset",
    )

    streaming: bool = Field(
        default=True,
        description="Request server-sent event streaming",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    def provider_config(self) -> ProviderConfig:
        """Build the provider configuration record."""
        return ProviderConfig(
            base_url=self.base_url,
            api_key=self.api_key or "",
            default_model=self.default_model,
        )

    def generation_config(self, model: str | None = None) -> GenerationConfig:
        """Build generation parameters, optionally for a different model."""
        return GenerationConfig(
            model=model or self.default_model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            streaming=self.streaming,
        )

    @classmethod
    def load_toml_config(cls, toml_path: Path) -> dict[str, Any]:
        """Load configuration from a TOML file."""
        try:
            with toml_path.open("rb") as f:
                return tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read TOML config file {toml_path}: {e}"
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML syntax in {toml_path}: {e}") from e

    @classmethod
    def from_config(
        cls,
        config_path: Path | str | None = None,
        **kwargs: Any,
    ) -> "Settings":
        """Create a Settings instance from an optional TOML file.

        Keyword arguments override both the file and the environment.
        """
        if config_path is None:
            config_path_env = os.environ.get(CONFIG_FILE_ENV)
            if config_path_env:
                config_path = Path(config_path_env)

        if isinstance(config_path, str):
            config_path = Path(config_path)

        config_data: dict[str, Any] = {}
        if config_path is not None:
            if not config_path.exists():
                raise ConfigurationError(f"Config file not found: {config_path}")
            config_data = cls.load_toml_config(config_path)
            logger.info(
                "config_file_loaded",
                path=str(config_path),
                category="config",
            )

        settings = cls()

        try:
            for key, value in config_data.items():
                if key not in cls.model_fields:
                    continue
                if key == "logging" and isinstance(value, dict):
                    for nested_key, nested_value in value.items():
                        env_key = f"{ENV_PREFIX}{key.upper()}__{nested_key.upper()}"
                        if os.getenv(env_key) is None:
                            setattr(settings.logging, nested_key, nested_value)
                else:
                    env_key = f"{ENV_PREFIX}{key.upper()}"
                    if os.getenv(env_key) is None:
                        setattr(settings, key, value)

            for key, value in kwargs.items():
                setattr(settings, key, value)
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        return settings


logger = get_logger(__name__)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings.from_config()
