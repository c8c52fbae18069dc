"""Main CLI entry point for devmode-sync."""

from pathlib import Path

import typer
from dotenv import load_dotenv

from devmode_sync.commands.patch_cmd import patch_command
from devmode_sync.commands.sync_cmd import sessions_command, start_command, terminate_command
from devmode_sync.constants import CONFIG_FILENAME, ENV_FILENAME, VERSION
from devmode_sync.utils import configure_logging, print_info

# Load .env file from current directory if it exists
load_dotenv(Path.cwd() / ENV_FILENAME, verbose=False)

app = typer.Typer(
    name="devsync",
    help="Sync local source into Kubernetes workloads running in dev mode.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

CONFIG_OPTION = typer.Option(
    Path(CONFIG_FILENAME),
    "--config",
    "-c",
    help="Path to the devsync config file",
)
RESOURCE_OPTION = typer.Option(
    None,
    "--resource",
    "-r",
    help="Workload to use as Kind/name (default: first workload in the manifest)",
)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """devsync - dev mode code synchronization for Kubernetes."""
    configure_logging(log_level)


@app.command("patch")
def patch(
    service: str = typer.Argument(..., help="Service name from the config file"),
    config: Path = CONFIG_OPTION,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the patched manifest to this file instead of stdout",
    ),
    resource: str | None = RESOURCE_OPTION,
) -> None:
    """Render the service's workload manifest configured for dev mode.

    Adds the dev mode annotation, command/args overrides and, when sync paths
    are configured, the sync agent volume, init container and mount. Apply the
    output once; patching an already patched manifest duplicates the agent.
    """
    patch_command(service, config, output=output, resource=resource)


@app.command("start")
def start(
    service: str = typer.Argument(..., help="Service name from the config file"),
    config: Path = CONFIG_OPTION,
    manifest: Path | None = typer.Option(
        None,
        "--manifest",
        "-m",
        help="Deployed (patched) manifest, defaults to the service manifest",
    ),
    resource: str | None = RESOURCE_OPTION,
) -> None:
    """Start or update sync sessions for a service deployed in dev mode."""
    start_command(service, config, manifest_path=manifest, resource=resource)


@app.command("sessions")
def sessions() -> None:
    """List sync sessions managed by devsync."""
    sessions_command()


@app.command("terminate")
def terminate(
    key: str = typer.Argument(..., help="Session name, e.g. Deployment--default--api-0"),
) -> None:
    """Terminate a sync session."""
    terminate_command(key)


@app.command("version")
def version() -> None:
    """Show version information."""
    print_info(f"devsync version {VERSION}")


if __name__ == "__main__":
    app()
