"""Sync engine integration for devmode-sync.

Provides the engine and destination resolver interfaces, the Mutagen CLI
engine and the named lock serializing session changes.
"""

from devmode_sync.sync.base import (
    DestinationResolver,
    SyncEngine,
    SyncSession,
    SyncSessionRequest,
)
from devmode_sync.sync.factory import create_sync_engine, create_sync_engine_from_settings
from devmode_sync.sync.lock import KeyedLock, sync_config_lock
from devmode_sync.sync.mutagen import MutagenEngine

__all__ = [
    "DestinationResolver",
    "KeyedLock",
    "MutagenEngine",
    "SyncEngine",
    "SyncSession",
    "SyncSessionRequest",
    "create_sync_engine",
    "create_sync_engine_from_settings",
    "sync_config_lock",
]
