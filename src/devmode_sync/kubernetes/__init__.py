"""Kubernetes workload handling for dev mode.

Workload adapters, the dev mode pod-spec patcher and kubectl exec
destinations for the sync engine.
"""

from devmode_sync.kubernetes.exec import KubectlExecResolver
from devmode_sync.kubernetes.patcher import (
    DevModePatch,
    configure_dev_mode,
    describe_dev_mode_patch,
)
from devmode_sync.kubernetes.workloads import (
    WorkloadAdapter,
    get_resource_container,
    get_resource_label,
    get_resource_pod_spec,
    get_workload_adapter,
    is_configured_for_dev_mode,
    is_workload,
)

__all__ = [
    "DevModePatch",
    "KubectlExecResolver",
    "WorkloadAdapter",
    "configure_dev_mode",
    "describe_dev_mode_patch",
    "get_resource_container",
    "get_resource_label",
    "get_resource_pod_spec",
    "get_workload_adapter",
    "is_configured_for_dev_mode",
    "is_workload",
]
