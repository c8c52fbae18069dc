"""Tests for workload adapters and pod spec accessors."""

import pytest

from devmode_sync.constants import DEV_MODE_ANNOTATION_KEY
from devmode_sync.exceptions import ConfigurationError
from devmode_sync.kubernetes.workloads import (
    DaemonSetAdapter,
    DeploymentAdapter,
    StatefulSetAdapter,
    get_resource_container,
    get_resource_label,
    get_resource_pod_spec,
    get_workload_adapter,
    is_configured_for_dev_mode,
    is_workload,
)
from tests.fixtures import (
    TEST_CONTAINER_NAME,
    TEST_DEPLOYMENT_NAME,
    TEST_NAMESPACE,
    TEST_SIDECAR_NAME,
    make_deployment,
)


class TestGetWorkloadAdapter:
    @pytest.mark.parametrize(
        "kind,adapter_cls",
        [
            ("Deployment", DeploymentAdapter),
            ("DaemonSet", DaemonSetAdapter),
            ("StatefulSet", StatefulSetAdapter),
        ],
    )
    def test_adapter_per_kind(self, kind: str, adapter_cls: type):
        adapter = get_workload_adapter(make_deployment(kind=kind))
        assert isinstance(adapter, adapter_cls)
        assert adapter.kind.value == kind
        assert adapter.name == TEST_DEPLOYMENT_NAME
        assert adapter.namespace == TEST_NAMESPACE
        assert adapter.label == f"{kind}/{TEST_DEPLOYMENT_NAME}"

    def test_unknown_kind_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            get_workload_adapter(make_deployment(kind="CronJob"))
        assert exc_info.value.resource == f"CronJob/{TEST_DEPLOYMENT_NAME}"

    def test_is_workload(self):
        assert is_workload(make_deployment()) is True
        assert is_workload({"kind": "Service", "metadata": {"name": "api"}}) is False


class TestPodSpecAccessors:
    def test_pod_spec(self):
        resource = make_deployment()
        assert get_resource_pod_spec(resource) is resource["spec"]["template"]["spec"]

    def test_pod_spec_missing(self):
        resource = {"kind": "Deployment", "metadata": {"name": "api"}}
        assert get_resource_pod_spec(resource) is None
        assert get_workload_adapter(resource).containers == []

    def test_first_container_by_default(self):
        resource = make_deployment(
            containers=[{"name": TEST_CONTAINER_NAME}, {"name": TEST_SIDECAR_NAME}]
        )
        assert get_resource_container(resource)["name"] == TEST_CONTAINER_NAME

    def test_container_by_name(self):
        resource = make_deployment(
            containers=[{"name": TEST_CONTAINER_NAME}, {"name": TEST_SIDECAR_NAME}]
        )
        assert get_resource_container(resource, TEST_SIDECAR_NAME)["name"] == TEST_SIDECAR_NAME

    def test_no_containers_names_resource(self):
        resource = make_deployment(containers=[])
        with pytest.raises(ConfigurationError) as exc_info:
            get_resource_container(resource)
        assert f"Deployment/{TEST_DEPLOYMENT_NAME}" in str(exc_info.value)

    def test_missing_named_container(self):
        with pytest.raises(ConfigurationError) as exc_info:
            get_resource_container(make_deployment(), "worker")
        assert "worker" in str(exc_info.value)


class TestDevModePredicate:
    def test_not_annotated(self):
        assert is_configured_for_dev_mode(make_deployment()) is False

    def test_annotated(self):
        resource = make_deployment(annotations={DEV_MODE_ANNOTATION_KEY: "true"})
        assert is_configured_for_dev_mode(resource) is True

    def test_other_value(self):
        resource = make_deployment(annotations={DEV_MODE_ANNOTATION_KEY: "false"})
        assert is_configured_for_dev_mode(resource) is False

    def test_label(self):
        assert get_resource_label(make_deployment(kind="StatefulSet")) == "StatefulSet/api"
