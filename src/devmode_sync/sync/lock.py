"""Named asyncio locks.

The sync engine keeps one session registry for the whole machine, so every
operation that creates or replaces sessions runs under the same named lock.
Holders are released on every exit path, including errors. There is no
acquire timeout: a caller waits for as long as the current holder runs.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)


class KeyedLock:
    """A set of mutual-exclusion locks addressed by name.

    Locks are created lazily, one ``asyncio.Lock`` per key. Callers sharing a
    key serialize; different keys do not block each other.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}

    def _get_lock(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    @asynccontextmanager
    async def acquire(self, key: str) -> AsyncIterator[None]:
        """Hold the lock for ``key`` for the duration of the ``async with`` block."""
        lock = self._get_lock(key)
        if lock.locked():
            logger.debug(f"Waiting for lock '{key}'")
        async with lock:
            yield

    def is_locked(self, key: str) -> bool:
        """Whether some task currently holds the lock for ``key``."""
        lock = self._locks.get(key)
        return lock is not None and lock.locked()


# Shared by every orchestrator in the process
sync_config_lock = KeyedLock()
