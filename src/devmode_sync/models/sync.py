"""Sync spec models for devmode-sync.

Pydantic models describing dev mode sync rules as written in configuration,
plus the resolved, engine-facing sync config record.
"""

from dataclasses import dataclass, field
from posixpath import isabs

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from devmode_sync.constants import (
    DEFAULT_SYNC_MODE,
    MAX_PERMISSION_MODE,
    MIN_PERMISSION_MODE,
)
from devmode_sync.models.enums import SyncMode

# Integer id or user/group name
OwnerId = int | str


class CamelModel(BaseModel):
    """Base for config models read from camelCase YAML keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


def _validate_sub_paths(paths: list[str] | None) -> list[str] | None:
    """Reject absolute paths and parent-directory segments in exclude globs."""
    if paths is None:
        return None
    for path in paths:
        if isabs(path):
            raise ValueError(f"'{path}' must be a relative POSIX path")
        if ".." in path.split("/"):
            raise ValueError(f"'{path}' must not reference a parent directory")
        if "\\" in path:
            raise ValueError(f"'{path}' must use POSIX separators")
    return paths


class DevModeSyncSpec(CamelModel):
    """A single sync rule: a local source kept in sync with a container path."""

    source: str = Field(
        default=".",
        description="POSIX path or glob relative to the module root",
    )
    target: str = Field(description="Absolute POSIX path inside the container")
    mode: SyncMode = Field(
        default=SyncMode(DEFAULT_SYNC_MODE),
        description="Sync direction and conflict policy",
    )
    exclude: list[str] | None = Field(
        default=None,
        description="POSIX paths or globs excluded from the sync, in addition to defaults",
    )
    default_file_mode: int | None = Field(
        default=None,
        ge=MIN_PERMISSION_MODE,
        le=MAX_PERMISSION_MODE,
        description="Permission bits set on files at the sync target",
    )
    default_directory_mode: int | None = Field(
        default=None,
        ge=MIN_PERMISSION_MODE,
        le=MAX_PERMISSION_MODE,
        description="Permission bits set on directories at the sync target",
    )
    default_owner: OwnerId | None = Field(
        default=None, description="Owner of files and directories at the target"
    )
    default_group: OwnerId | None = Field(
        default=None, description="Group of files and directories at the target"
    )

    @field_validator("source")
    @classmethod
    def _source_is_sub_path(cls, value: str) -> str:
        _validate_sub_paths([value])
        return value

    @field_validator("target")
    @classmethod
    def _target_is_absolute(cls, value: str) -> str:
        if not isabs(value):
            raise ValueError(f"'{value}' must be an absolute POSIX path")
        return value

    @field_validator("exclude")
    @classmethod
    def _exclude_are_sub_paths(cls, value: list[str] | None) -> list[str] | None:
        return _validate_sub_paths(value)

    def explicit(self, name: str) -> int | str | None:
        """Return a per-path override only when it was explicitly set.

        A field counts as set when it appears in the source data with a
        non-null value, so an explicit ``0`` is kept while an omitted field
        returns None and inherits the provider default.
        """
        if name not in self.model_fields_set:
            return None
        value: int | str | None = getattr(self, name)
        return value


class ContainerDevModeSpec(CamelModel):
    """Dev mode settings for a container: command overrides and sync rules."""

    args: list[str] | None = Field(
        default=None, description="Override the default container arguments in dev mode"
    )
    command: list[str] | None = Field(
        default=None, description="Override the default container command in dev mode"
    )
    sync: list[DevModeSyncSpec] = Field(
        default_factory=list,
        description="Source files or directories to sync with the running container",
    )


class KubernetesDevModeSpec(ContainerDevModeSpec):
    """Dev mode settings for a Kubernetes workload."""

    container_name: str | None = Field(
        default=None,
        description="Container to sync to; the first container in the workload if unset",
    )


class DevModeDefaults(CamelModel):
    """Provider-level defaults, overridden or extended by individual sync specs."""

    exclude: list[str] | None = Field(
        default=None, description="Exclusions applied to every sync"
    )
    file_mode: int | None = Field(default=None, ge=MIN_PERMISSION_MODE, le=MAX_PERMISSION_MODE)
    directory_mode: int | None = Field(
        default=None, ge=MIN_PERMISSION_MODE, le=MAX_PERMISSION_MODE
    )
    owner: OwnerId | None = None
    group: OwnerId | None = None

    @field_validator("exclude")
    @classmethod
    def _exclude_are_sub_paths(cls, value: list[str] | None) -> list[str] | None:
        return _validate_sub_paths(value)


@dataclass
class SyncConfig:
    """Fully resolved, engine-ready sync configuration.

    Attributes:
        alpha: First endpoint as named by the sync engine.
        beta: Second endpoint as named by the sync engine.
        mode: Sync mode, passed through from the sync spec.
        ignore: Built-in excludes, then provider defaults, then per-path excludes.
        default_owner: Owner at the target, None for the engine default.
        default_group: Group at the target, None for the engine default.
        default_directory_mode: Directory permission bits, None for the engine default.
        default_file_mode: File permission bits, None for the engine default.
    """

    alpha: str
    beta: str
    mode: SyncMode
    ignore: list[str] = field(default_factory=list)
    default_owner: OwnerId | None = None
    default_group: OwnerId | None = None
    default_directory_mode: int | None = None
    default_file_mode: int | None = None
