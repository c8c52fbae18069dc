"""Sync commands: start dev mode syncs and manage sync sessions."""

import asyncio
from pathlib import Path

import typer
from rich.table import Table

from devmode_sync.commands.common import load_service_context, load_workload
from devmode_sync.config.settings import get_engine_settings, get_kubectl_settings
from devmode_sync.exceptions import DevSyncError
from devmode_sync.kubernetes.exec import KubectlExecResolver
from devmode_sync.orchestrator import SyncOrchestrator
from devmode_sync.sync.factory import create_sync_engine_from_settings
from devmode_sync.utils import get_console, print_error, print_info, print_success


def start_command(
    service_name: str,
    config_path: Path,
    manifest_path: Path | None = None,
    resource: str | None = None,
) -> None:
    """Start sync sessions for a service deployed in dev mode.

    Args:
        service_name: Service name in the config file.
        config_path: Path to devsync.yaml.
        manifest_path: Deployed (patched) manifest; the service manifest if None.
        resource: Workload as "{kind}/{name}"; the first workload if None.
    """
    try:
        ctx = load_service_context(config_path, service_name, manifest_path)
        _, workload = load_workload(ctx.manifest_path, resource)

        kubectl = get_kubectl_settings()
        orchestrator = SyncOrchestrator(
            engine=create_sync_engine_from_settings(get_engine_settings()),
            resolver=KubectlExecResolver(
                kubectl_path=kubectl.binary_path,
                context=kubectl.context or ctx.config.provider.context,
                kubeconfig=kubectl.kubeconfig,
            ),
            provider=ctx.config.provider,
        )
        dev_mode = ctx.service.dev_mode
        requests = asyncio.run(
            orchestrator.start_dev_mode_sync(
                workload,
                dev_mode,
                namespace=ctx.config.provider.namespace,
                module_root=str(ctx.module_root),
                service_name=ctx.service.name,
                container_name=dev_mode.container_name,
            )
        )
    except DevSyncError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not requests:
        print_info(f"No sync paths configured for {service_name}")
        return
    for request in requests:
        print_success(
            f"{request.key}: {request.source_description} to {request.target_description}"
        )


def sessions_command() -> None:
    """List sync sessions managed by devsync."""
    try:
        engine = create_sync_engine_from_settings(get_engine_settings())
        sessions = asyncio.run(engine.list_sessions())
    except DevSyncError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not sessions:
        print_info("No active sync sessions")
        return

    table = Table(title="Sync Sessions")
    table.add_column("Name", style="cyan")
    table.add_column("Mode")
    table.add_column("Status", style="green")
    table.add_column("Alpha")
    table.add_column("Beta")
    for session in sessions:
        status = "[yellow]paused[/yellow]" if session.paused else (session.status or "")
        table.add_row(session.name, session.mode or "", status, session.alpha, session.beta)
    get_console().print(table)


def terminate_command(key: str) -> None:
    """Terminate a sync session by name."""
    try:
        engine = create_sync_engine_from_settings(get_engine_settings())
        asyncio.run(engine.terminate_sync(key))
    except DevSyncError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Terminated {key}")
