"""Workload adapters for dev mode.

Resources are plain manifest dicts as loaded from YAML. Each supported kind
gets an adapter exposing its metadata, pod spec and containers, so the
patcher and orchestrator treat Deployments, DaemonSets and StatefulSets
uniformly.
"""

from abc import ABC
from typing import Any

from devmode_sync.constants import (
    DEV_MODE_ANNOTATION_KEY,
    DEV_MODE_ANNOTATION_VALUE,
    ERROR_CONTAINER_NOT_FOUND,
    ERROR_NO_CONTAINERS,
    ERROR_UNKNOWN_KIND,
    ERROR_UNKNOWN_KIND_EXPECTED,
)
from devmode_sync.exceptions import ConfigurationError
from devmode_sync.models.enums import WorkloadKind


Manifest = dict[str, Any]


def get_resource_label(resource: Manifest) -> str:
    """Return the "{kind}/{name}" label used in messages and kubectl commands."""
    metadata = resource.get("metadata") or {}
    return f"{resource.get('kind')}/{metadata.get('name')}"


class WorkloadAdapter(ABC):
    """Capability interface over a workload manifest with a pod template.

    Args:
        resource: The manifest dict. The adapter reads and mutates it in place.
    """

    kind: WorkloadKind

    def __init__(self, resource: Manifest) -> None:
        self.resource = resource

    @property
    def metadata(self) -> dict[str, Any]:
        return self.resource.setdefault("metadata", {})

    @property
    def name(self) -> str:
        return str(self.metadata.get("name", ""))

    @property
    def namespace(self) -> str | None:
        return self.metadata.get("namespace")

    @property
    def label(self) -> str:
        return get_resource_label(self.resource)

    @property
    def annotations(self) -> dict[str, str]:
        """Annotations dict, created on first access."""
        annotations = self.metadata.get("annotations")
        if annotations is None:
            annotations = self.metadata["annotations"] = {}
        return annotations

    @property
    def pod_spec(self) -> dict[str, Any] | None:
        """The pod template spec, or None if the manifest has none."""
        template = (self.resource.get("spec") or {}).get("template") or {}
        pod_spec: dict[str, Any] | None = template.get("spec")
        return pod_spec

    @property
    def containers(self) -> list[dict[str, Any]]:
        pod_spec = self.pod_spec
        if not pod_spec:
            return []
        return pod_spec.get("containers") or []

    def get_container(self, container_name: str | None = None) -> dict[str, Any]:
        """Return the named container, or the first one if no name is given.

        Raises:
            ConfigurationError: If the workload has no containers or none
                with the given name.
        """
        containers = self.containers
        if not containers:
            raise ConfigurationError(
                ERROR_NO_CONTAINERS.format(resource=self.label), resource=self.label
            )
        if container_name is None:
            return containers[0]
        for container in containers:
            if container.get("name") == container_name:
                return container
        raise ConfigurationError(
            ERROR_CONTAINER_NOT_FOUND.format(resource=self.label, container=container_name),
            resource=self.label,
        )

    def is_dev_mode(self) -> bool:
        annotations = self.metadata.get("annotations") or {}
        return annotations.get(DEV_MODE_ANNOTATION_KEY) == DEV_MODE_ANNOTATION_VALUE


class DeploymentAdapter(WorkloadAdapter):
    kind = WorkloadKind.DEPLOYMENT


class DaemonSetAdapter(WorkloadAdapter):
    kind = WorkloadKind.DAEMON_SET


class StatefulSetAdapter(WorkloadAdapter):
    kind = WorkloadKind.STATEFUL_SET


_ADAPTERS: dict[str, type[WorkloadAdapter]] = {
    WorkloadKind.DEPLOYMENT.value: DeploymentAdapter,
    WorkloadKind.DAEMON_SET.value: DaemonSetAdapter,
    WorkloadKind.STATEFUL_SET.value: StatefulSetAdapter,
}


def is_workload(resource: Manifest) -> bool:
    """Whether the manifest is one of the supported workload kinds."""
    return resource.get("kind") in _ADAPTERS


def get_workload_adapter(resource: Manifest) -> WorkloadAdapter:
    """Create the adapter for a workload manifest.

    Raises:
        ConfigurationError: If the kind is not a supported workload kind.
    """
    kind = resource.get("kind")
    adapter_cls = _ADAPTERS.get(str(kind))
    if adapter_cls is None:
        label = get_resource_label(resource)
        raise ConfigurationError(
            ERROR_UNKNOWN_KIND.format(resource=label, kind=kind)
            + f" (expected {ERROR_UNKNOWN_KIND_EXPECTED.format(kinds=WorkloadKind.values())})",
            resource=label,
        )
    return adapter_cls(resource)


def get_resource_pod_spec(resource: Manifest) -> dict[str, Any] | None:
    """Return the pod spec of a workload manifest, if any."""
    return get_workload_adapter(resource).pod_spec


def get_resource_container(resource: Manifest, container_name: str | None = None) -> dict[str, Any]:
    """Return the main container of a workload manifest."""
    return get_workload_adapter(resource).get_container(container_name)


def is_configured_for_dev_mode(resource: Manifest) -> bool:
    """Whether the workload carries the dev mode annotation."""
    return get_workload_adapter(resource).is_dev_mode()
