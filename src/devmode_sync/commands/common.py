"""Shared helpers for devsync commands."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from devmode_sync.constants import ERROR_NO_WORKLOAD
from devmode_sync.exceptions import ConfigurationError
from devmode_sync.kubernetes.workloads import get_resource_label, is_workload
from devmode_sync.models.config import DevSyncConfig, ServiceConfig, load_manifests


@dataclass
class ServiceContext:
    """A service resolved from the config file, with paths made absolute."""

    config: DevSyncConfig
    service: ServiceConfig
    config_path: Path
    module_root: Path
    manifest_path: Path


def load_service_context(
    config_path: Path, service_name: str, manifest_path: Path | None = None
) -> ServiceContext:
    """Load config and resolve a service's module root and manifest path.

    Relative paths in the config file are relative to the file's directory.
    """
    config_path = config_path.resolve()
    config = DevSyncConfig.load(config_path)
    service = config.get_service(service_name, config_file=config_path)
    base_dir = config_path.parent
    return ServiceContext(
        config=config,
        service=service,
        config_path=config_path,
        module_root=(base_dir / service.module_root).resolve(),
        manifest_path=manifest_path or (base_dir / service.manifest),
    )


def select_workload(
    manifests: list[dict[str, Any]], manifest_path: Path, resource: str | None = None
) -> dict[str, Any]:
    """Pick the workload to operate on: by "{kind}/{name}" label or the first one.

    Raises:
        ConfigurationError: If no matching workload is in the manifest.
    """
    for manifest in manifests:
        if not is_workload(manifest):
            continue
        if resource is None or get_resource_label(manifest) == resource:
            return manifest
    raise ConfigurationError(
        ERROR_NO_WORKLOAD.format(manifest=manifest_path),
        resource=resource,
        config_file=manifest_path,
    )


def load_workload(
    manifest_path: Path, resource: str | None = None
) -> tuple[list[dict[str, Any]], dict[str, Any]]:
    """Load a manifest file and return all documents plus the selected workload."""
    manifests = load_manifests(manifest_path)
    return manifests, select_workload(manifests, manifest_path, resource)
