"""Constants for devmode-sync.

This module contains:
- VERSION: Package version
- Reserved pod-spec names injected by the workload patcher
- Sync defaults (built-in excludes, mode names, lock key)
- Mutagen and kubectl command fragments
- Error and log message templates

For runtime settings, import from devmode_sync.config.settings.
For type-safe enums, import from devmode_sync.models.enums.
"""

from devmode_sync import __version__

# =============================================================================
# Version
# =============================================================================

VERSION = __version__

# =============================================================================
# Reserved pod-spec names (not configurable)
# =============================================================================

DEV_MODE_ANNOTATION_KEY = "garden.io/dev-mode"
DEV_MODE_ANNOTATION_VALUE = "true"

SYNC_VOLUME_NAME = "garden"
SYNC_VOLUME_MOUNT_PATH = "/.garden"
SYNC_INIT_CONTAINER_NAME = "garden-dev-init"
SYNC_UTIL_IMAGE = "gardendev/k8s-sync:0.1.1"
SYNC_IMAGE_PULL_POLICY = "IfNotPresent"

# Agent binary shipped in the utility image and its location in the shared volume
MUTAGEN_AGENT_SOURCE_PATH = "/usr/local/bin/mutagen-agent"
MUTAGEN_AGENT_PATH = f"{SYNC_VOLUME_MOUNT_PATH}/mutagen-agent"
MUTAGEN_AGENT_SUBCOMMAND = "synchronizer"

# =============================================================================
# Sync defaults
# =============================================================================

# Always prepended to every ignore list
BUILT_IN_EXCLUDES: tuple[str, ...] = ("/**/*.git", "**/*.garden")

DEFAULT_SYNC_MODE = "one-way-safe"

# Permission bits accepted for defaultFileMode / defaultDirectoryMode
MIN_PERMISSION_MODE = 0
MAX_PERMISSION_MODE = 0o777

START_SYNC_LOCK_KEY = "start-sync"

# =============================================================================
# Configuration files
# =============================================================================

CONFIG_FILENAME = "devsync.yaml"
DEFAULT_NAMESPACE = "default"
ENV_FILENAME = ".env"

# =============================================================================
# Sync engine
# =============================================================================

SYNC_ENGINE_MUTAGEN = "mutagen"
VALID_SYNC_ENGINES = (SYNC_ENGINE_MUTAGEN,)
DEFAULT_SYNC_ENGINE = SYNC_ENGINE_MUTAGEN
DEFAULT_ENGINE_COMMAND_TIMEOUT_SECONDS = 30.0

MUTAGEN_DATA_DIR_ENV = "MUTAGEN_DATA_DIRECTORY"
MUTAGEN_SUBCOMMAND_SYNC = "sync"
MUTAGEN_SYNC_CREATE = "create"
MUTAGEN_SYNC_LIST = "list"
MUTAGEN_SYNC_TERMINATE = "terminate"
MUTAGEN_LIST_TEMPLATE = "{{json .}}"
MUTAGEN_MANAGED_LABEL_KEY = "managed-by"
MUTAGEN_MANAGED_LABEL_VALUE = "devmode-sync"
MUTAGEN_MANAGED_LABEL = f"{MUTAGEN_MANAGED_LABEL_KEY}={MUTAGEN_MANAGED_LABEL_VALUE}"

# Mutagen has no reverse modes: direction is carried by alpha/beta ordering
MUTAGEN_MODE_MAP: dict[str, str] = {
    "one-way": "one-way-safe",
    "one-way-safe": "one-way-safe",
    "one-way-replica": "one-way-replica",
    "one-way-reverse": "one-way-safe",
    "one-way-replica-reverse": "one-way-replica",
    "two-way": "two-way-safe",
    "two-way-safe": "two-way-safe",
    "two-way-resolved": "two-way-resolved",
}

KUBECTL_BINARY = "kubectl"
EXEC_DESTINATION_TEMPLATE = "exec:'{command}':{target_path}"

# =============================================================================
# Messages
# =============================================================================

ERROR_NOT_IN_DEV_MODE = "Resource {resource} is not deployed in dev mode"
ERROR_NO_CONTAINERS = "Resource {resource} doesn't have any containers"
ERROR_CONTAINER_NOT_FOUND = "Resource {resource} has no container named '{container}'"
ERROR_UNKNOWN_KIND = "Resource {resource} has unsupported kind '{kind}'"
ERROR_UNKNOWN_KIND_EXPECTED = "one of {kinds}"
ERROR_UNKNOWN_ENGINE = "Unknown sync engine: {engine}"
ERROR_UNKNOWN_SERVICE = "No service named '{service}' in {config_file}"
ERROR_NO_WORKLOAD = "Manifest {manifest} does not contain a Deployment, DaemonSet or StatefulSet"
ERROR_INVALID_CONFIG = "Invalid configuration in {config_file}: {error}"
ERROR_INVALID_YAML = "Invalid YAML in {path}: {error}"
ERROR_READ_FILE = "Could not read {path}: {error}"
ERROR_ENGINE_BINARY_MISSING = "{engine} binary not found: {path}"
ERROR_ENGINE_COMMAND_FAILED = "{engine} command failed with exit code {code}: {stderr}"
ERROR_ENGINE_TIMEOUT = "{engine} command timed out after {timeout}s"
ERROR_ENGINE_BAD_OUTPUT = "Could not parse {engine} output: {error}"

LOG_SYNCING = "[{service}] Syncing {description} ({mode})"
LOG_SYNC_EXISTS = "Sync session {key} is up to date"
LOG_SYNC_REPLACE = "Sync session {key} changed, recreating"
LOG_SYNC_CREATE = "Creating sync session {key}: {source} -> {target}"
LOG_SYNC_TERMINATE = "Terminating sync session {key}"
LOG_ENGINE_COMMAND = "Running {engine}: {command}"
LOG_PATCHED = "Configured {resource} for dev mode ({count} sync paths)"
