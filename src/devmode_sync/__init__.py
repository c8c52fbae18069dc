"""devmode-sync: dev-mode code synchronization for Kubernetes workloads."""

import tomllib
from pathlib import Path

try:
    # Prefer pyproject.toml when running from a source checkout
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)
    __version__ = data["project"]["version"]
except (OSError, KeyError, tomllib.TOMLDecodeError):
    # Installed (non-editable) package: use distribution metadata
    try:
        from importlib.metadata import PackageNotFoundError, version

        __version__ = version("devmode-sync")
    except PackageNotFoundError:
        __version__ = "0.0.0-dev"
