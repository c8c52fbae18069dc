"""Tests for sync spec and configuration models."""

from pathlib import Path

import pydantic
import pytest

from devmode_sync.exceptions import ConfigurationError, ValidationError
from devmode_sync.models.config import DevSyncConfig, dump_manifests, load_manifests
from devmode_sync.models.enums import SyncMode, WorkloadKind
from devmode_sync.models.sync import DevModeDefaults, DevModeSyncSpec, KubernetesDevModeSpec


class TestSyncMode:
    def test_values_cover_closed_set(self):
        assert SyncMode.values() == [
            "one-way",
            "one-way-safe",
            "one-way-replica",
            "one-way-reverse",
            "one-way-replica-reverse",
            "two-way",
            "two-way-safe",
            "two-way-resolved",
        ]

    @pytest.mark.parametrize(
        "mode,expected",
        [
            ("one-way-reverse", True),
            ("one-way-replica-reverse", True),
            ("one-way", False),
            ("one-way-replica", False),
            ("two-way-safe", False),
        ],
    )
    def test_is_reverse(self, mode: str, expected: bool):
        assert SyncMode(mode).is_reverse is expected

    def test_workload_kinds(self):
        assert WorkloadKind.values() == ["Deployment", "DaemonSet", "StatefulSet"]


class TestDevModeSyncSpec:
    def test_defaults(self):
        spec = DevModeSyncSpec(target="/code")
        assert spec.source == "."
        assert spec.mode is SyncMode.ONE_WAY_SAFE
        assert spec.exclude is None

    def test_camel_case_keys(self):
        spec = DevModeSyncSpec.model_validate(
            {
                "source": "src",
                "target": "/code",
                "defaultFileMode": 0o644,
                "defaultDirectoryMode": 0o755,
                "defaultOwner": "node",
                "defaultGroup": 1000,
            }
        )
        assert spec.default_file_mode == 0o644
        assert spec.default_directory_mode == 0o755
        assert spec.default_owner == "node"
        assert spec.default_group == 1000

    def test_unknown_mode_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            DevModeSyncSpec(target="/code", mode="sideways")

    @pytest.mark.parametrize("value", [-1, 0o1000])
    def test_permission_bits_out_of_range(self, value: int):
        with pytest.raises(pydantic.ValidationError):
            DevModeSyncSpec(target="/code", default_file_mode=value)

    def test_target_must_be_absolute(self):
        with pytest.raises(pydantic.ValidationError):
            DevModeSyncSpec(source="src", target="code")

    @pytest.mark.parametrize("pattern", ["/abs/**", "../outside", "win\\path"])
    def test_exclude_must_be_sub_path(self, pattern: str):
        with pytest.raises(pydantic.ValidationError):
            DevModeSyncSpec(target="/code", exclude=[pattern])

    def test_unknown_key_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            DevModeSyncSpec.model_validate({"target": "/code", "direction": "up"})

    def test_explicit_only_for_set_fields(self):
        spec = DevModeSyncSpec(target="/code", default_owner=0)
        assert spec.explicit("default_owner") == 0
        assert spec.explicit("default_group") is None

    def test_kubernetes_spec_container_name(self):
        spec = KubernetesDevModeSpec.model_validate(
            {"containerName": "api", "sync": [{"target": "/code"}]}
        )
        assert spec.container_name == "api"
        assert len(spec.sync) == 1


class TestDevSyncConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = DevSyncConfig.load(tmp_path / "missing.yaml")
        assert config.provider.namespace == "default"
        assert config.services == []

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "devsync.yaml"
        path.write_text("", encoding="utf-8")
        assert DevSyncConfig.load(path).services == []

    def test_load(self, config_file: Path):
        config = DevSyncConfig.load(config_file)
        defaults = config.provider.get_dev_mode_defaults()
        assert defaults.exclude == ["*.log"]
        assert defaults.owner == 1000

        service = config.get_service("api")
        assert service.module_root == "api"
        assert service.dev_mode.command == ["npm", "run", "dev"]
        assert service.dev_mode.sync[0].exclude == ["node_modules"]

    def test_provider_without_dev_mode_has_empty_defaults(self):
        config = DevSyncConfig()
        assert config.provider.get_dev_mode_defaults() == DevModeDefaults()

    def test_invalid_mode_raises_validation_error(self, tmp_path: Path):
        path = tmp_path / "devsync.yaml"
        path.write_text(
            "services:\n- name: api\n  manifest: m.yaml\n  devMode:\n"
            "    sync:\n    - target: /code\n      mode: sideways\n",
            encoding="utf-8",
        )
        with pytest.raises(ValidationError) as exc_info:
            DevSyncConfig.load(path)
        assert exc_info.value.field == "services.0.devMode.sync.0.mode"
        assert exc_info.value.config_file == path

    def test_malformed_yaml_raises_configuration_error(self, tmp_path: Path):
        path = tmp_path / "devsync.yaml"
        path.write_text("services: [\n  - name: api\n", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            DevSyncConfig.load(path)
        assert exc_info.value.config_file == path
        assert "Invalid YAML" in str(exc_info.value)

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "devsync.yaml"
        path.write_text(
            "services:\n- name: api\n  manifest: m.yaml\n  modulRoot: api\n", encoding="utf-8"
        )
        with pytest.raises(ValidationError) as exc_info:
            DevSyncConfig.load(path)
        assert exc_info.value.field == "services.0.modulRoot"

    def test_unknown_service(self, config_file: Path):
        config = DevSyncConfig.load(config_file)
        with pytest.raises(ConfigurationError) as exc_info:
            config.get_service("worker", config_file=config_file)
        assert "worker" in str(exc_info.value)

    def test_save_round_trip(self, config_file: Path, tmp_path: Path):
        config = DevSyncConfig.load(config_file)
        out = tmp_path / "out" / "devsync.yaml"
        config.save(out)
        text = out.read_text(encoding="utf-8")
        assert "moduleRoot: api" in text
        assert DevSyncConfig.load(out) == config


class TestManifests:
    def test_load_skips_empty_documents(self, tmp_path: Path):
        path = tmp_path / "m.yaml"
        path.write_text("---\nkind: A\n---\n---\nkind: B\n", encoding="utf-8")
        assert [m["kind"] for m in load_manifests(path)] == ["A", "B"]

    def test_missing_file_raises_configuration_error(self, tmp_path: Path):
        path = tmp_path / "missing.yaml"
        with pytest.raises(ConfigurationError) as exc_info:
            load_manifests(path)
        assert exc_info.value.config_file == path

    def test_malformed_yaml_raises_configuration_error(self, tmp_path: Path):
        path = tmp_path / "m.yaml"
        path.write_text("kind: [Deployment\n", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            load_manifests(path)
        assert "Invalid YAML" in exc_info.value.message

    def test_dump_multiple_documents(self):
        text = dump_manifests([{"kind": "A"}, {"kind": "B"}])
        assert text.count("---") == 1
