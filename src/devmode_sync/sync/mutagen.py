"""Mutagen sync engine.

Drives the `mutagen` CLI as a subprocess. Sessions created here carry a
``managed-by`` label so listing only returns our own sessions, and a config
fingerprint label so ``ensure_sync`` can tell an unchanged session from one
that must be recreated.
"""

import asyncio
import hashlib
import json
import logging
import os
import shutil
import subprocess
from typing import Any

from devmode_sync.constants import (
    DEFAULT_ENGINE_COMMAND_TIMEOUT_SECONDS,
    ERROR_ENGINE_BAD_OUTPUT,
    ERROR_ENGINE_BINARY_MISSING,
    ERROR_ENGINE_COMMAND_FAILED,
    ERROR_ENGINE_TIMEOUT,
    LOG_ENGINE_COMMAND,
    LOG_SYNC_CREATE,
    LOG_SYNC_EXISTS,
    LOG_SYNC_REPLACE,
    LOG_SYNC_TERMINATE,
    MUTAGEN_DATA_DIR_ENV,
    MUTAGEN_LIST_TEMPLATE,
    MUTAGEN_MANAGED_LABEL,
    MUTAGEN_MODE_MAP,
    MUTAGEN_SUBCOMMAND_SYNC,
    MUTAGEN_SYNC_CREATE,
    MUTAGEN_SYNC_LIST,
    MUTAGEN_SYNC_TERMINATE,
    SYNC_ENGINE_MUTAGEN,
)
from devmode_sync.exceptions import SyncEngineError
from devmode_sync.models.sync import SyncConfig
from devmode_sync.sync.base import SyncEngine, SyncSession

logger = logging.getLogger(__name__)

CONFIG_HASH_LABEL_KEY = "devsync-config"
# Mutagen label values follow Kubernetes rules (max 63 characters)
CONFIG_HASH_LENGTH = 16


def config_fingerprint(config: SyncConfig) -> str:
    """Stable short hash of everything that defines a session."""
    payload = json.dumps(
        {
            "alpha": config.alpha,
            "beta": config.beta,
            "mode": config.mode.value,
            "ignore": config.ignore,
            "owner": config.default_owner,
            "group": config.default_group,
            "directoryMode": config.default_directory_mode,
            "fileMode": config.default_file_mode,
        },
        sort_keys=True,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:CONFIG_HASH_LENGTH]


def build_create_args(key: str, config: SyncConfig) -> list[str]:
    """Build `mutagen sync create` arguments for a session."""
    args = [
        MUTAGEN_SUBCOMMAND_SYNC,
        MUTAGEN_SYNC_CREATE,
        config.alpha,
        config.beta,
        "--name",
        key,
        "--sync-mode",
        MUTAGEN_MODE_MAP[config.mode.value],
        "--ignore-vcs",
    ]
    for pattern in config.ignore:
        args.extend(["--ignore", pattern])
    if config.default_owner is not None:
        args.extend(["--default-owner", str(config.default_owner)])
    if config.default_group is not None:
        args.extend(["--default-group", str(config.default_group)])
    if config.default_file_mode is not None:
        args.extend(["--default-file-mode", f"{config.default_file_mode:04o}"])
    if config.default_directory_mode is not None:
        args.extend(["--default-directory-mode", f"{config.default_directory_mode:04o}"])
    args.extend(
        [
            "--label",
            MUTAGEN_MANAGED_LABEL,
            "--label",
            f"{CONFIG_HASH_LABEL_KEY}={config_fingerprint(config)}",
        ]
    )
    return args


def _endpoint_url(endpoint: Any) -> str:
    """Render an endpoint from `mutagen sync list` JSON as a URL-ish string."""
    if isinstance(endpoint, str):
        return endpoint
    if not isinstance(endpoint, dict):
        return ""
    path = endpoint.get("path", "")
    host = endpoint.get("host")
    protocol = endpoint.get("protocol")
    if host and protocol not in (None, "local"):
        return f"{protocol}:{host}:{path}"
    return str(path)


def parse_sessions(output: str) -> list[SyncSession]:
    """Parse `mutagen sync list --template '{{json .}}'` output."""
    text = output.strip()
    if not text:
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SyncEngineError(
            ERROR_ENGINE_BAD_OUTPUT.format(engine=SYNC_ENGINE_MUTAGEN, error=e)
        ) from e
    if data is None:
        return []

    sessions = []
    for item in data:
        sessions.append(
            SyncSession(
                name=item.get("name", ""),
                alpha=_endpoint_url(item.get("alpha")),
                beta=_endpoint_url(item.get("beta")),
                mode=item.get("mode"),
                paused=bool(item.get("paused", False)),
                status=item.get("status"),
                labels=item.get("labels") or {},
            )
        )
    return sessions


class MutagenEngine(SyncEngine):
    """Sync engine backed by the `mutagen` CLI.

    Args:
        binary_path: Custom path to the mutagen binary. If None, uses PATH.
        data_dir: Mutagen data directory. If set, sessions live in a daemon
            private to that directory.
        timeout: Timeout for each mutagen command, in seconds.
    """

    def __init__(
        self,
        binary_path: str | None = None,
        data_dir: str | None = None,
        timeout: float = DEFAULT_ENGINE_COMMAND_TIMEOUT_SECONDS,
    ) -> None:
        self._binary_path = binary_path
        self._data_dir = data_dir
        self._timeout = timeout

    @property
    def name(self) -> str:
        return SYNC_ENGINE_MUTAGEN

    @property
    def is_available(self) -> bool:
        """Check if mutagen binary is available."""
        return shutil.which(self._get_binary()) is not None

    def _get_binary(self) -> str:
        return self._binary_path or SYNC_ENGINE_MUTAGEN

    def _get_env(self) -> dict[str, str] | None:
        if not self._data_dir:
            return None
        env = dict(os.environ)
        env[MUTAGEN_DATA_DIR_ENV] = self._data_dir
        return env

    def _run(self, args: list[str]) -> str:
        """Run a mutagen command and return its stdout.

        Raises:
            SyncEngineError: If the binary is missing, times out, or exits non-zero.
        """
        cmd = [self._get_binary(), *args]
        logger.debug(LOG_ENGINE_COMMAND.format(engine=self.name, command=" ".join(cmd)))

        try:
            result = subprocess.run(  # noqa: S603
                cmd,
                capture_output=True,
                text=True,
                check=False,
                timeout=self._timeout,
                env=self._get_env(),
            )
        except FileNotFoundError as e:
            raise SyncEngineError(
                ERROR_ENGINE_BINARY_MISSING.format(engine=self.name, path=self._get_binary()),
                command=cmd,
            ) from e
        except subprocess.TimeoutExpired as e:
            raise SyncEngineError(
                ERROR_ENGINE_TIMEOUT.format(engine=self.name, timeout=self._timeout),
                command=cmd,
            ) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise SyncEngineError(
                ERROR_ENGINE_COMMAND_FAILED.format(
                    engine=self.name, code=result.returncode, stderr=stderr
                ),
                command=cmd,
                returncode=result.returncode,
                stderr=stderr,
            )
        return result.stdout

    def _list_sessions(self) -> list[SyncSession]:
        output = self._run(
            [
                MUTAGEN_SUBCOMMAND_SYNC,
                MUTAGEN_SYNC_LIST,
                "--label-selector",
                MUTAGEN_MANAGED_LABEL,
                "--template",
                MUTAGEN_LIST_TEMPLATE,
            ]
        )
        return parse_sessions(output)

    def _terminate(self, key: str) -> None:
        logger.info(LOG_SYNC_TERMINATE.format(key=key))
        self._run([MUTAGEN_SUBCOMMAND_SYNC, MUTAGEN_SYNC_TERMINATE, key])

    def _ensure_sync(
        self,
        key: str,
        config: SyncConfig,
        source_description: str,
        target_description: str,
    ) -> None:
        fingerprint = config_fingerprint(config)
        existing = [s for s in self._list_sessions() if s.name == key]

        if existing and all(s.labels.get(CONFIG_HASH_LABEL_KEY) == fingerprint for s in existing):
            logger.debug(LOG_SYNC_EXISTS.format(key=key))
            return

        if existing:
            logger.info(LOG_SYNC_REPLACE.format(key=key))
            self._terminate(key)

        logger.info(
            LOG_SYNC_CREATE.format(key=key, source=source_description, target=target_description)
        )
        self._run(build_create_args(key, config))

    async def ensure_sync(
        self,
        key: str,
        config: SyncConfig,
        source_description: str,
        target_description: str,
    ) -> None:
        await asyncio.to_thread(
            self._ensure_sync, key, config, source_description, target_description
        )

    async def list_sessions(self) -> list[SyncSession]:
        return await asyncio.to_thread(self._list_sessions)

    async def terminate_sync(self, key: str) -> None:
        await asyncio.to_thread(self._terminate, key)

