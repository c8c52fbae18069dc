"""Factory for creating sync engines from configuration."""

from devmode_sync.config.settings import EngineSettings
from devmode_sync.constants import (
    DEFAULT_ENGINE_COMMAND_TIMEOUT_SECONDS,
    ERROR_UNKNOWN_ENGINE,
    SYNC_ENGINE_MUTAGEN,
    VALID_SYNC_ENGINES,
)
from devmode_sync.exceptions import ValidationError
from devmode_sync.sync.base import SyncEngine
from devmode_sync.sync.mutagen import MutagenEngine


def create_sync_engine(
    engine: str,
    binary_path: str | None = None,
    data_dir: str | None = None,
    timeout: float = DEFAULT_ENGINE_COMMAND_TIMEOUT_SECONDS,
) -> SyncEngine:
    """Create a sync engine from configuration.

    Args:
        engine: Engine name ("mutagen").
        binary_path: Custom path to the engine binary.
        data_dir: Engine data directory.
        timeout: Per-command timeout in seconds.

    Returns:
        Configured SyncEngine instance.

    Raises:
        ValidationError: If the engine name is invalid.
    """
    if engine == SYNC_ENGINE_MUTAGEN:
        return MutagenEngine(binary_path=binary_path, data_dir=data_dir, timeout=timeout)
    raise ValidationError(
        ERROR_UNKNOWN_ENGINE.format(engine=engine),
        field="engine",
        value=engine,
        expected=f"one of {list(VALID_SYNC_ENGINES)}",
    )


def create_sync_engine_from_settings(settings: EngineSettings) -> SyncEngine:
    """Create the sync engine described by environment settings."""
    return create_sync_engine(
        settings.name,
        binary_path=settings.binary_path,
        data_dir=settings.data_dir,
        timeout=settings.command_timeout_seconds,
    )
