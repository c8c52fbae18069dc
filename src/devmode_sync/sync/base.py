"""Base classes for sync engines and remote destination resolvers.

Defines the abstract interfaces the orchestrator drives and the shared data
structures describing sync sessions.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from devmode_sync.models.sync import SyncConfig


@dataclass
class SyncSession:
    """A sync session as reported by the engine.

    Attributes:
        name: Session key, ``{kind}--{namespace}--{name}-{index}``.
        alpha: Alpha endpoint URL.
        beta: Beta endpoint URL.
        mode: Engine-native sync mode.
        paused: Whether the session is paused.
        status: Engine status string (e.g. "watching").
        labels: Session labels.
    """

    name: str
    alpha: str
    beta: str
    mode: str | None = None
    paused: bool = False
    status: str | None = None
    labels: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for display."""
        return {
            "name": self.name,
            "alpha": self.alpha,
            "beta": self.beta,
            "mode": self.mode,
            "paused": self.paused,
            "status": self.status,
            "labels": dict(self.labels),
        }


@dataclass
class SyncSessionRequest:
    """A session the orchestrator asked the engine to establish."""

    key: str
    config: SyncConfig
    source_description: str
    target_description: str


class SyncEngine(ABC):
    """Abstract base class for external sync engines.

    ``ensure_sync`` is a create-or-update keyed by session name: calling it
    again with the same key and config leaves the session running.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Engine name."""
        ...

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if the engine binary is installed."""
        ...

    @abstractmethod
    async def ensure_sync(
        self,
        key: str,
        config: SyncConfig,
        source_description: str,
        target_description: str,
    ) -> None:
        """Create the session, or replace it if its config changed.

        Args:
            key: Session name.
            config: Resolved sync config.
            source_description: Human readable source, for logging.
            target_description: Human readable target, for logging.

        Raises:
            SyncEngineError: If the engine rejects the session.
        """
        ...

    @abstractmethod
    async def list_sessions(self) -> list[SyncSession]:
        """List sessions managed by this tool."""
        ...

    @abstractmethod
    async def terminate_sync(self, key: str) -> None:
        """Terminate a session by name."""
        ...


class DestinationResolver(ABC):
    """Resolves a path inside a running container to an engine endpoint."""

    @abstractmethod
    async def resolve_destination(
        self,
        namespace: str,
        container_name: str,
        resource_name: str,
        target_path: str,
    ) -> str:
        """Build the remote endpoint for ``target_path``.

        Args:
            namespace: Namespace of the workload.
            container_name: Container to reach.
            resource_name: Workload label, ``{kind}/{name}``.
            target_path: Absolute path inside the container.

        Returns:
            Endpoint string the sync engine can connect to.
        """
        ...
