"""Runtime settings for devmode-sync."""

from devmode_sync.config.settings import (
    EngineSettings,
    KubectlSettings,
    get_engine_settings,
    get_kubectl_settings,
)

__all__ = [
    "EngineSettings",
    "KubectlSettings",
    "get_engine_settings",
    "get_kubectl_settings",
]
