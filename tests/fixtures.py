"""Shared test constants for devmode-sync tests."""

TEST_NAMESPACE = "dev"
TEST_FALLBACK_NAMESPACE = "fallback"
TEST_DEPLOYMENT_NAME = "api"
TEST_CONTAINER_NAME = "api"
TEST_SIDECAR_NAME = "proxy"
TEST_IMAGE = "example/api:1.0"
TEST_SERVICE_NAME = "api"
TEST_MODULE_ROOT = "/app"

TEST_REMOTE_PREFIX = "exec:'kubectl exec'"
TEST_REMOTE_DESTINATION = f"{TEST_REMOTE_PREFIX}:/code"
TEST_LOCAL_PATH = "/app/src"

TEST_KUBECTL_PATH = "/usr/local/bin/kubectl"
TEST_MUTAGEN_PATH = "/usr/local/bin/mutagen"
TEST_MUTAGEN_CUSTOM_PATH = "/custom/mutagen"
TEST_ENGINE_UNKNOWN = "unison"
TEST_SESSION_KEY = "Deployment--dev--api-0"

TEST_MUTAGEN_LIST_OUTPUT = """[
  {
    "name": "Deployment--dev--api-0",
    "identifier": "sync_abc123",
    "alpha": {"protocol": "local", "path": "/app/src"},
    "beta": {"protocol": "exec", "host": "kubectl exec", "path": "/code"},
    "mode": "one-way-safe",
    "paused": false,
    "status": "watching",
    "labels": {"managed-by": "devmode-sync", "devsync-config": "0000000000000000"}
  }
]
"""


def make_deployment(
    name: str = TEST_DEPLOYMENT_NAME,
    namespace: str | None = TEST_NAMESPACE,
    containers: list[dict] | None = None,
    kind: str = "Deployment",
    annotations: dict[str, str] | None = None,
) -> dict:
    """Build a minimal workload manifest."""
    metadata: dict = {"name": name}
    if namespace is not None:
        metadata["namespace"] = namespace
    if annotations is not None:
        metadata["annotations"] = dict(annotations)
    if containers is None:
        containers = [{"name": TEST_CONTAINER_NAME, "image": TEST_IMAGE}]
    return {
        "apiVersion": "apps/v1",
        "kind": kind,
        "metadata": metadata,
        "spec": {
            "replicas": 1,
            "template": {
                "metadata": {"labels": {"app": name}},
                "spec": {"containers": containers},
            },
        },
    }
