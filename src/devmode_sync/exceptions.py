"""Custom exceptions for devmode-sync.

All exceptions inherit from DevSyncError, allowing callers to catch every
project error with a single except clause.

Exception hierarchy:
    DevSyncError (base)
    ├── ConfigurationError
    │   └── ValidationError
    └── SyncEngineError
"""

from pathlib import Path
from typing import Any


class DevSyncError(Exception):
    """Base exception for all devmode-sync errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(DevSyncError):
    """Raised when configuration or a target resource is unusable.

    User-facing and not retriable. Examples:
        - Resource is not deployed in dev mode
        - Resource has no containers
        - Unknown service name or workload kind
    """

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        config_file: Path | None = None,
        key: str | None = None,
    ):
        """Initialize configuration error.

        Args:
            message: Error description.
            resource: Label of the offending resource ("{kind}/{name}").
            config_file: Path to the problematic config file.
            key: The configuration key that caused the error.
        """
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if config_file:
            details["config_file"] = str(config_file)
        if key:
            details["key"] = key
        super().__init__(message, details)
        self.resource = resource
        self.config_file = config_file
        self.key = key


class ValidationError(ConfigurationError):
    """Raised when a configuration value fails validation.

    Examples:
        - Unknown sync mode
        - Permission bits outside 0..0o777
        - Unknown sync engine name
    """

    def __init__(
        self,
        message: str,
        field: str,
        value: Any = None,
        expected: str | None = None,
        config_file: Path | None = None,
    ):
        super().__init__(message, config_file=config_file)
        self.details["field"] = field
        if value is not None:
            value_str = str(value)
            self.details["value"] = value_str[:100] + "..." if len(value_str) > 100 else value_str
        if expected:
            self.details["expected"] = expected
        self.field = field
        self.value = value
        self.expected = expected


# =============================================================================
# Sync Engine Errors
# =============================================================================


class SyncEngineError(DevSyncError):
    """Raised when the external sync engine fails.

    Propagated unchanged to callers of the orchestrator; no local retry.
    """

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
    ):
        details: dict[str, Any] = {}
        if returncode is not None:
            details["returncode"] = returncode
        super().__init__(message, details)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
