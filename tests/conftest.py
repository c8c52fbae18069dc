"""Pytest configuration and fixtures for devmode-sync tests."""

from pathlib import Path

import pytest

from devmode_sync.constants import DEV_MODE_ANNOTATION_KEY, DEV_MODE_ANNOTATION_VALUE
from devmode_sync.models.sync import ContainerDevModeSpec, DevModeSyncSpec, SyncConfig
from devmode_sync.sync.base import DestinationResolver, SyncEngine, SyncSession
from devmode_sync.sync.lock import KeyedLock
from tests.fixtures import TEST_REMOTE_PREFIX, make_deployment


class RecordingEngine(SyncEngine):
    """In-memory sync engine that records every ensure_sync call."""

    def __init__(self, fail_on_key: str | None = None, error: Exception | None = None) -> None:
        self.calls: list[dict] = []
        self.sessions: dict[str, SyncConfig] = {}
        self.fail_on_key = fail_on_key
        self.error = error

    @property
    def name(self) -> str:
        return "recording"

    @property
    def is_available(self) -> bool:
        return True

    async def ensure_sync(
        self,
        key: str,
        config: SyncConfig,
        source_description: str,
        target_description: str,
    ) -> None:
        self.calls.append(
            {
                "key": key,
                "config": config,
                "source_description": source_description,
                "target_description": target_description,
            }
        )
        if self.fail_on_key == key and self.error is not None:
            raise self.error
        self.sessions[key] = config

    async def list_sessions(self) -> list[SyncSession]:
        return [
            SyncSession(name=key, alpha=config.alpha, beta=config.beta, mode=config.mode.value)
            for key, config in self.sessions.items()
        ]

    async def terminate_sync(self, key: str) -> None:
        self.sessions.pop(key, None)


class RecordingResolver(DestinationResolver):
    """Resolver returning a predictable endpoint and recording its calls."""

    def __init__(self) -> None:
        self.calls: list[dict] = []

    async def resolve_destination(
        self,
        namespace: str,
        container_name: str,
        resource_name: str,
        target_path: str,
    ) -> str:
        self.calls.append(
            {
                "namespace": namespace,
                "container_name": container_name,
                "resource_name": resource_name,
                "target_path": target_path,
            }
        )
        return f"{TEST_REMOTE_PREFIX}:{target_path}"


@pytest.fixture
def anyio_backend():
    """Restrict anyio tests to the asyncio backend."""
    return "asyncio"


@pytest.fixture
def engine() -> RecordingEngine:
    return RecordingEngine()


@pytest.fixture
def resolver() -> RecordingResolver:
    return RecordingResolver()


@pytest.fixture
def lock() -> KeyedLock:
    """A lock private to the test, so tests never share asyncio primitives."""
    return KeyedLock()


@pytest.fixture
def deployment() -> dict:
    """A plain Deployment manifest that is not yet in dev mode."""
    return make_deployment()


@pytest.fixture
def dev_mode_deployment() -> dict:
    """A Deployment manifest already annotated for dev mode."""
    return make_deployment(annotations={DEV_MODE_ANNOTATION_KEY: DEV_MODE_ANNOTATION_VALUE})


@pytest.fixture
def sync_spec() -> ContainerDevModeSpec:
    """Dev mode spec with a forward and a reverse sync path."""
    return ContainerDevModeSpec(
        sync=[
            DevModeSyncSpec(source="src", target="/code", exclude=["dist/**"]),
            DevModeSyncSpec(source="logs", target="/var/log/app", mode="one-way-reverse"),
        ]
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A devsync.yaml with one service and a Deployment manifest next to it."""
    (tmp_path / "api").mkdir()
    (tmp_path / "k8s").mkdir()
    (tmp_path / "k8s" / "deployment.yaml").write_text(
        """apiVersion: v1
kind: Service
metadata:
  name: api
spec:
  ports:
  - port: 80
---
apiVersion: apps/v1
kind: Deployment
metadata:
  name: api
  namespace: dev
spec:
  template:
    spec:
      containers:
      - name: api
        image: example/api:1.0
""",
        encoding="utf-8",
    )
    config_path = tmp_path / "devsync.yaml"
    config_path.write_text(
        """provider:
  namespace: default
  devMode:
    defaults:
      exclude: ["*.log"]
      owner: 1000
services:
- name: api
  moduleRoot: api
  manifest: k8s/deployment.yaml
  devMode:
    command: ["npm", "run", "dev"]
    sync:
    - source: src
      target: /app/src
      exclude: ["node_modules"]
""",
        encoding="utf-8",
    )
    return config_path
