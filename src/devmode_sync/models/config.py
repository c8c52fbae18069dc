"""Configuration models for devmode-sync."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pydantic
import yaml
from pydantic import Field

from devmode_sync.constants import (
    DEFAULT_NAMESPACE,
    ERROR_INVALID_CONFIG,
    ERROR_INVALID_YAML,
    ERROR_READ_FILE,
    ERROR_UNKNOWN_SERVICE,
)
from devmode_sync.exceptions import ConfigurationError, ValidationError
from devmode_sync.models.sync import CamelModel, DevModeDefaults, KubernetesDevModeSpec

logger = logging.getLogger(__name__)


class ProviderDevModeConfig(CamelModel):
    """Provider-level dev mode settings."""

    defaults: DevModeDefaults | None = Field(
        default=None, description="Defaults applied to every dev mode sync"
    )


class ProviderConfig(CamelModel):
    """Kubernetes provider configuration."""

    namespace: str = Field(default=DEFAULT_NAMESPACE, description="Default namespace")
    context: str | None = Field(default=None, description="kubectl context to use")
    dev_mode: ProviderDevModeConfig | None = Field(
        default=None, description="Provider-level dev mode settings"
    )

    def get_dev_mode_defaults(self) -> DevModeDefaults:
        """Return the configured defaults, or an empty set when absent."""
        if self.dev_mode is None or self.dev_mode.defaults is None:
            return DevModeDefaults()
        return self.dev_mode.defaults


class ServiceConfig(CamelModel):
    """A service whose workload can be run in dev mode."""

    name: str = Field(description="Service name")
    module_root: str = Field(
        default=".", description="Directory sync sources are relative to"
    )
    manifest: str = Field(description="Path to the workload manifest (YAML)")
    dev_mode: KubernetesDevModeSpec = Field(
        default_factory=KubernetesDevModeSpec, description="Dev mode settings"
    )


class DevSyncConfig(CamelModel):
    """Main devmode-sync configuration (devsync.yaml)."""

    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    services: list[ServiceConfig] = Field(default_factory=list)

    @classmethod
    def load(cls, config_path: Path) -> "DevSyncConfig":
        """Load configuration from file.

        A missing or empty file yields the default configuration.

        Raises:
            ConfigurationError: If the file cannot be read or is not valid YAML.
            ValidationError: If the file content does not match the schema.
        """
        if not config_path.exists():
            logger.debug(f"No config at {config_path}, using defaults")
            return cls()

        data = _read_yaml(config_path, yaml.safe_load)
        if not data:
            return cls()

        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise ValidationError(
                ERROR_INVALID_CONFIG.format(config_file=config_path, error=first["msg"]),
                field=field,
                value=first.get("input"),
                config_file=config_path,
            ) from e

    def save(self, config_path: Path) -> None:
        """Save configuration to file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            yaml.safe_dump(
                self.model_dump(mode="json", by_alias=True, exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    def get_service(self, name: str, config_file: Path | None = None) -> ServiceConfig:
        """Look up a service by name.

        Raises:
            ConfigurationError: If no service has that name.
        """
        for service in self.services:
            if service.name == name:
                return service
        raise ConfigurationError(
            ERROR_UNKNOWN_SERVICE.format(service=name, config_file=config_file),
            config_file=config_file,
            key="services",
        )


def _read_yaml(path: Path, loader: Callable[[Any], Any]) -> Any:
    """Parse a YAML file, reporting read and syntax errors against the file."""
    try:
        with open(path) as f:
            return loader(f)
    except OSError as e:
        raise ConfigurationError(
            ERROR_READ_FILE.format(path=path, error=e.strerror or e), config_file=path
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            ERROR_INVALID_YAML.format(path=path, error=e), config_file=path
        ) from e


def load_manifests(path: Path) -> list[dict[str, Any]]:
    """Read every non-empty YAML document from a manifest file.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid YAML.
    """
    return [doc for doc in _read_yaml(path, lambda f: list(yaml.safe_load_all(f))) if doc]


def dump_manifests(manifests: list[dict[str, Any]]) -> str:
    """Serialize manifests as a multi-document YAML string."""
    return yaml.safe_dump_all(manifests, default_flow_style=False, sort_keys=False)
