"""Patch command: render a workload manifest configured for dev mode."""

from pathlib import Path

import typer

from devmode_sync.commands.common import load_service_context, load_workload
from devmode_sync.exceptions import DevSyncError
from devmode_sync.kubernetes.patcher import configure_dev_mode, describe_dev_mode_patch
from devmode_sync.kubernetes.workloads import get_resource_label, is_configured_for_dev_mode
from devmode_sync.models.config import dump_manifests
from devmode_sync.utils import print_error, print_info, print_success, print_warning


def patch_command(
    service_name: str,
    config_path: Path,
    output: Path | None = None,
    resource: str | None = None,
) -> None:
    """Configure a service's workload for dev mode and write the manifest.

    The manifest is patched once per invocation; the source file is never
    modified. Output goes to ``output`` or stdout.

    Args:
        service_name: Service name in the config file.
        config_path: Path to devsync.yaml.
        output: File to write the patched manifest to.
        resource: Workload to patch as "{kind}/{name}"; the first workload if None.
    """
    try:
        ctx = load_service_context(config_path, service_name)
        manifests, workload = load_workload(ctx.manifest_path, resource)
        dev_mode = ctx.service.dev_mode
        if is_configured_for_dev_mode(workload) and dev_mode.sync:
            print_warning(
                f"{get_resource_label(workload)} is already in dev mode; "
                "the sync agent will be injected again"
            )
        configure_dev_mode(workload, dev_mode, container_name=dev_mode.container_name)
    except DevSyncError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    rendered = dump_manifests(manifests)
    if output is None:
        typer.echo(rendered, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")

    patch = describe_dev_mode_patch(dev_mode)
    print_success(f"Configured {get_resource_label(workload)} for dev mode -> {output}")
    if patch.container_fields:
        print_info(f"  container: {', '.join(patch.container_fields)}")
    if patch.injects_agent:
        print_info(f"  pod: {', '.join(patch.pod_fields)}")
