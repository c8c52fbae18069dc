"""Sync orchestrator: starts dev mode sync sessions for a workload.

Session establishment for every workload runs under one process-wide named
lock, because the sync engine's session registry is shared by the whole
process. Sync paths are handled one at a time, in declared order; the first
failure aborts the remaining paths and propagates to the caller.
"""

import logging
import posixpath

from devmode_sync.constants import (
    ERROR_NO_CONTAINERS,
    ERROR_NOT_IN_DEV_MODE,
    LOG_SYNCING,
    START_SYNC_LOCK_KEY,
)
from devmode_sync.exceptions import ConfigurationError
from devmode_sync.kubernetes.workloads import Manifest, get_workload_adapter
from devmode_sync.merge import make_sync_config
from devmode_sync.models.config import ProviderConfig
from devmode_sync.models.sync import ContainerDevModeSpec, DevModeSyncSpec
from devmode_sync.sync.base import DestinationResolver, SyncEngine, SyncSessionRequest
from devmode_sync.sync.lock import KeyedLock, sync_config_lock

logger = logging.getLogger(__name__)


def get_session_key_base(kind: str, namespace: str, name: str) -> str:
    """Prefix of the session keys for a workload; the path index is appended."""
    return f"{kind}--{namespace}--{name}"


def get_local_path(module_root: str, source: str) -> str:
    """Join module root and sync source as a POSIX path with spaces escaped."""
    root = module_root.replace("\\", "/")
    local_path = posixpath.normpath(posixpath.join(root, source.replace("\\", "/")))
    return local_path.replace(" ", "\\ ")


def describe_sync(spec: DevModeSyncSpec, resource_label: str) -> tuple[str, str]:
    """Return (source, target) descriptions oriented by the sync direction."""
    local_description = spec.source
    remote_description = f"{spec.target} in {resource_label}"
    if spec.mode.is_reverse:
        return remote_description, local_description
    return local_description, remote_description


class SyncOrchestrator:
    """Establishes sync sessions for dev mode workloads.

    Args:
        engine: Sync engine that creates and updates sessions.
        resolver: Resolves container paths to engine endpoints.
        provider: Provider config supplying dev mode defaults.
        lock: Named lock guarding session changes. Defaults to the
            process-wide lock, so separate orchestrators still serialize.
    """

    def __init__(
        self,
        engine: SyncEngine,
        resolver: DestinationResolver,
        provider: ProviderConfig | None = None,
        lock: KeyedLock | None = None,
    ) -> None:
        self.engine = engine
        self.resolver = resolver
        self.provider = provider or ProviderConfig()
        self.lock = lock or sync_config_lock

    async def start_dev_mode_sync(
        self,
        target: Manifest,
        spec: ContainerDevModeSpec,
        namespace: str,
        module_root: str,
        service_name: str,
        container_name: str | None = None,
    ) -> list[SyncSessionRequest]:
        """Start (or update) one sync session per sync path of ``spec``.

        Args:
            target: Deployed workload manifest, already configured for dev mode.
            spec: Dev mode spec whose sync paths to start.
            namespace: Fallback namespace when the manifest sets none.
            module_root: Directory sync sources are relative to.
            service_name: Service name, used in log messages.
            container_name: Container to sync to; the first container if None.

        Returns:
            The sessions requested from the engine, in declared order.

        Raises:
            ConfigurationError: If the workload is not in dev mode or has no
                containers.
            SyncEngineError: If the engine fails to establish a session.
        """
        if not spec.sync:
            return []

        workload = get_workload_adapter(target)
        namespace = workload.namespace or namespace
        resource_label = workload.label
        key_base = get_session_key_base(workload.kind.value, namespace, workload.name)

        async with self.lock.acquire(START_SYNC_LOCK_KEY):
            if not workload.is_dev_mode():
                raise ConfigurationError(
                    ERROR_NOT_IN_DEV_MODE.format(resource=resource_label),
                    resource=resource_label,
                )

            if not container_name:
                containers = workload.containers
                container_name = containers[0].get("name") if containers else None
            if not container_name:
                raise ConfigurationError(
                    ERROR_NO_CONTAINERS.format(resource=resource_label),
                    resource=resource_label,
                )

            defaults = self.provider.get_dev_mode_defaults()
            requests: list[SyncSessionRequest] = []

            for i, sync_spec in enumerate(spec.sync):
                key = f"{key_base}-{i}"
                local_path = get_local_path(module_root, sync_spec.source)
                remote_destination = await self.resolver.resolve_destination(
                    namespace=namespace,
                    container_name=container_name,
                    resource_name=resource_label,
                    target_path=sync_spec.target,
                )

                source_description, target_description = describe_sync(
                    sync_spec, resource_label
                )
                logger.info(
                    LOG_SYNCING.format(
                        service=service_name,
                        description=f"{source_description} to {target_description}",
                        mode=sync_spec.mode.value,
                    )
                )

                request = SyncSessionRequest(
                    key=key,
                    config=make_sync_config(
                        local_path=local_path,
                        remote_destination=remote_destination,
                        defaults=defaults,
                        spec=sync_spec,
                    ),
                    source_description=source_description,
                    target_description=target_description,
                )
                await self.engine.ensure_sync(
                    key,
                    request.config,
                    source_description=source_description,
                    target_description=target_description,
                )
                requests.append(request)

        return requests


async def start_dev_mode_sync(
    engine: SyncEngine,
    resolver: DestinationResolver,
    target: Manifest,
    spec: ContainerDevModeSpec,
    namespace: str,
    module_root: str,
    service_name: str,
    container_name: str | None = None,
    provider: ProviderConfig | None = None,
) -> list[SyncSessionRequest]:
    """Start dev mode syncs with a one-off orchestrator sharing the process lock."""
    orchestrator = SyncOrchestrator(engine, resolver, provider=provider)
    return await orchestrator.start_dev_mode_sync(
        target,
        spec,
        namespace=namespace,
        module_root=module_root,
        service_name=service_name,
        container_name=container_name,
    )
