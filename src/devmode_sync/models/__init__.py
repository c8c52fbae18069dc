"""Data models for devmode-sync"""

from .config import DevSyncConfig, ProviderConfig, ProviderDevModeConfig, ServiceConfig
from .enums import SyncMode, WorkloadKind
from .sync import (
    ContainerDevModeSpec,
    DevModeDefaults,
    DevModeSyncSpec,
    KubernetesDevModeSpec,
    SyncConfig,
)

__all__ = [
    "ContainerDevModeSpec",
    "DevModeDefaults",
    "DevModeSyncSpec",
    "DevSyncConfig",
    "KubernetesDevModeSpec",
    "ProviderConfig",
    "ProviderDevModeConfig",
    "ServiceConfig",
    "SyncConfig",
    "SyncMode",
    "WorkloadKind",
]
