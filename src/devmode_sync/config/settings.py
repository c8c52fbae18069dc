"""Runtime configuration settings for devmode-sync.

This module uses Pydantic Settings for configuration that can be
overridden via environment variables (DEVSYNC_ prefix), including values
loaded from a project .env file by the CLI.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from devmode_sync.constants import (
    DEFAULT_ENGINE_COMMAND_TIMEOUT_SECONDS,
    DEFAULT_SYNC_ENGINE,
)


class EngineSettings(BaseSettings):
    """Sync engine settings.

    Can be overridden via environment variables with DEVSYNC_ENGINE_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="DEVSYNC_ENGINE_")

    name: str = Field(default=DEFAULT_SYNC_ENGINE, description="Sync engine to drive")
    binary_path: str | None = Field(
        default=None, description="Path to the engine binary (PATH lookup if unset)"
    )
    data_dir: str | None = Field(
        default=None, description="Engine data directory, isolates its session registry"
    )
    command_timeout_seconds: float = Field(
        default=DEFAULT_ENGINE_COMMAND_TIMEOUT_SECONDS,
        description="Engine command timeout in seconds",
    )


class KubectlSettings(BaseSettings):
    """kubectl settings used to build exec tunnel destinations.

    Can be overridden via environment variables with DEVSYNC_KUBECTL_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="DEVSYNC_KUBECTL_")

    binary_path: str | None = Field(default=None, description="Path to kubectl")
    context: str | None = Field(default=None, description="kubectl context override")
    kubeconfig: str | None = Field(default=None, description="kubeconfig file override")


def get_engine_settings() -> EngineSettings:
    """Read engine settings from the current environment."""
    return EngineSettings()


def get_kubectl_settings() -> KubectlSettings:
    """Read kubectl settings from the current environment."""
    return KubectlSettings()
