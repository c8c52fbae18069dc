"""Workload patcher: configures a Deployment, DaemonSet or StatefulSet for dev mode.

The patch tags the workload with the dev mode annotation, applies command and
args overrides to the main container and, when there is anything to sync,
injects the sync agent:

- an ``emptyDir`` volume shared by the init container and the main container
- an init container copying the Mutagen agent binary into that volume
- a mount of that volume in the main container

The patch is not self-guarding. Applying it twice appends a second volume,
init container and mount, so callers must patch each resource exactly once.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any

from devmode_sync.constants import (
    DEV_MODE_ANNOTATION_KEY,
    DEV_MODE_ANNOTATION_VALUE,
    LOG_PATCHED,
    MUTAGEN_AGENT_PATH,
    MUTAGEN_AGENT_SOURCE_PATH,
    SYNC_IMAGE_PULL_POLICY,
    SYNC_INIT_CONTAINER_NAME,
    SYNC_UTIL_IMAGE,
    SYNC_VOLUME_MOUNT_PATH,
    SYNC_VOLUME_NAME,
)
from devmode_sync.kubernetes.workloads import Manifest, get_workload_adapter
from devmode_sync.models.sync import ContainerDevModeSpec

logger = logging.getLogger(__name__)


@dataclass
class DevModePatch:
    """Describes which fields of a workload a dev mode patch touches.

    Attributes:
        annotations: Annotation keys set on the workload metadata.
        container_fields: Main container fields replaced or extended.
        pod_fields: Pod spec fields extended.
    """

    annotations: list[str] = field(default_factory=list)
    container_fields: list[str] = field(default_factory=list)
    pod_fields: list[str] = field(default_factory=list)

    @property
    def injects_agent(self) -> bool:
        return bool(self.pod_fields)


def describe_dev_mode_patch(spec: ContainerDevModeSpec) -> DevModePatch:
    """Describe the fields configure_dev_mode() will touch for a spec."""
    patch = DevModePatch(annotations=[DEV_MODE_ANNOTATION_KEY])
    if spec.command is not None:
        patch.container_fields.append("command")
    if spec.args is not None:
        patch.container_fields.append("args")
    if spec.sync:
        patch.container_fields.append("volumeMounts")
        patch.pod_fields.extend(["volumes", "initContainers"])
    return patch


def _sync_volume_mount() -> dict[str, Any]:
    return {"name": SYNC_VOLUME_NAME, "mountPath": SYNC_VOLUME_MOUNT_PATH}


def _sync_init_container() -> dict[str, Any]:
    return {
        "name": SYNC_INIT_CONTAINER_NAME,
        "image": SYNC_UTIL_IMAGE,
        "command": ["/bin/sh", "-c", f"cp {MUTAGEN_AGENT_SOURCE_PATH} {MUTAGEN_AGENT_PATH}"],
        "imagePullPolicy": SYNC_IMAGE_PULL_POLICY,
        "volumeMounts": [_sync_volume_mount()],
    }


def configure_dev_mode(
    target: Manifest,
    spec: ContainerDevModeSpec,
    container_name: str | None = None,
    in_place: bool = True,
) -> Manifest:
    """Configure a workload manifest for dev mode.

    Args:
        target: Workload manifest dict.
        spec: Dev mode spec with optional command/args overrides and sync rules.
        container_name: Container to patch; the first container if None.
        in_place: Mutate ``target`` directly. If False, a deep copy is patched
            and ``target`` is left untouched.

    Returns:
        The patched manifest (``target`` itself when ``in_place`` is True).

    Raises:
        ConfigurationError: If the workload kind is unsupported or it has no
            matching container.
    """
    if not in_place:
        target = copy.deepcopy(target)

    workload = get_workload_adapter(target)
    workload.annotations[DEV_MODE_ANNOTATION_KEY] = DEV_MODE_ANNOTATION_VALUE
    main_container = workload.get_container(container_name)

    # Full replacement, never merged
    if spec.command is not None:
        main_container["command"] = list(spec.command)
    if spec.args is not None:
        main_container["args"] = list(spec.args)

    if not spec.sync:
        logger.debug(LOG_PATCHED.format(resource=workload.label, count=0))
        return target

    pod_spec = workload.pod_spec
    if pod_spec is None:
        return target

    if pod_spec.get("volumes") is None:
        pod_spec["volumes"] = []
    pod_spec["volumes"].append({"name": SYNC_VOLUME_NAME, "emptyDir": {}})

    if pod_spec.get("initContainers") is None:
        pod_spec["initContainers"] = []
    pod_spec["initContainers"].append(_sync_init_container())

    if main_container.get("volumeMounts") is None:
        main_container["volumeMounts"] = []
    main_container["volumeMounts"].append(_sync_volume_mount())

    logger.info(LOG_PATCHED.format(resource=workload.label, count=len(spec.sync)))
    return target
