"""Merge provider-level dev mode defaults with a per-path sync spec."""

from typing import Any

from devmode_sync.constants import BUILT_IN_EXCLUDES
from devmode_sync.models.sync import DevModeDefaults, DevModeSyncSpec, SyncConfig


def _override(explicit: Any, default: Any) -> Any:
    return default if explicit is None else explicit


def make_sync_config(
    local_path: str,
    remote_destination: str,
    defaults: DevModeDefaults | None,
    spec: DevModeSyncSpec,
) -> SyncConfig:
    """Build the engine-facing config for one sync path.

    For reverse modes the container is authoritative, so alpha is the remote
    destination and beta the local path; every other mode is the opposite.
    Ignore patterns are the built-in excludes, then the defaults, then the
    spec's own excludes, kept in order and not deduplicated. Ownership and
    permission fields come from the spec when explicitly set, else from the
    defaults, else stay None so the engine applies its own default.

    Args:
        local_path: Local endpoint of the sync.
        remote_destination: Remote endpoint, as resolved for the container.
        defaults: Provider-level defaults; None is treated as empty.
        spec: The sync spec for this path.

    Returns:
        The resolved SyncConfig.
    """
    d = defaults or DevModeDefaults()
    reverse = spec.mode.is_reverse

    return SyncConfig(
        alpha=remote_destination if reverse else local_path,
        beta=local_path if reverse else remote_destination,
        mode=spec.mode,
        ignore=[*BUILT_IN_EXCLUDES, *(d.exclude or []), *(spec.exclude or [])],
        default_owner=_override(spec.explicit("default_owner"), d.owner),
        default_group=_override(spec.explicit("default_group"), d.group),
        default_directory_mode=_override(
            spec.explicit("default_directory_mode"), d.directory_mode
        ),
        default_file_mode=_override(spec.explicit("default_file_mode"), d.file_mode),
    )
