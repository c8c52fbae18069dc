"""Enum types for devmode-sync.

Type-safe enumerations for sync modes and supported workload kinds.
"""

from enum import Enum


class SyncMode(str, Enum):
    """Synchronization direction and conflict policy for a sync path."""

    ONE_WAY = "one-way"
    ONE_WAY_SAFE = "one-way-safe"
    ONE_WAY_REPLICA = "one-way-replica"
    ONE_WAY_REVERSE = "one-way-reverse"
    ONE_WAY_REPLICA_REVERSE = "one-way-replica-reverse"
    TWO_WAY = "two-way"
    TWO_WAY_SAFE = "two-way-safe"
    TWO_WAY_RESOLVED = "two-way-resolved"

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all sync mode values."""
        return [m.value for m in cls]

    @property
    def is_reverse(self) -> bool:
        """Whether the container side is authoritative (remote to local)."""
        return self in (SyncMode.ONE_WAY_REVERSE, SyncMode.ONE_WAY_REPLICA_REVERSE)


class WorkloadKind(str, Enum):
    """Workload kinds that carry a pod template and can run in dev mode."""

    DEPLOYMENT = "Deployment"
    DAEMON_SET = "DaemonSet"
    STATEFUL_SET = "StatefulSet"

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all workload kinds."""
        return [k.value for k in cls]
