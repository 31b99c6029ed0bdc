"""Tests for ConfigStore loading, precedence and write-through persistence."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from sonoma.core.config import ConfigStore
from sonoma.core.exceptions import InvalidPathError, PersistError


def _read(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestLoading:
    def test_defaults_to_user_config_file(self, persisted_file: Path) -> None:
        assert ConfigStore().config_path == persisted_file

    def test_sonoma_home_relocates_user_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        alt = tmp_path / "alt"
        monkeypatch.setenv("SONOMA_HOME", str(alt))
        assert ConfigStore().config_path == alt.resolve() / "config.json"

    def test_no_sources_gives_empty_tree(self) -> None:
        assert ConfigStore().get() == {}

    def test_loads_lazily_and_once(self, write_persisted) -> None:
        path = write_persisted({"network": "devnet"})
        store = ConfigStore()
        assert not store.loaded

        assert store.get("network") == "devnet"
        assert store.loaded

        path.write_text(json.dumps({"network": "testnet"}), encoding="utf-8")
        store.load()
        assert store.get("network") == "devnet"

    def test_debug_env_is_a_boolean(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SONOMA_DEBUG", "true")
        assert ConfigStore().get("debug") is True

    def test_env_overrides_persisted(self, write_persisted, monkeypatch: pytest.MonkeyPatch) -> None:
        write_persisted({"network": "devnet"})
        monkeypatch.setenv("SONOMA_NETWORK", "mainnet")
        assert ConfigStore().get("network") == "mainnet"

    def test_project_overrides_persisted_and_env_overrides_project(
        self, write_persisted, work_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_persisted({"network": "devnet", "auth": {"apiKey": "file"}})
        (work_dir / ".sonomarc.json").write_text(
            json.dumps({"network": "testnet", "auth": {"org": "acme"}}), encoding="utf-8"
        )

        store = ConfigStore()
        assert store.get("network") == "testnet"
        assert store.get("auth") == {"apiKey": "file", "org": "acme"}
        assert store.project_config_path == work_dir / ".sonomarc.json"

        monkeypatch.setenv("SONOMA_NETWORK", "mainnet")
        assert ConfigStore().get("network") == "mainnet"

    def test_project_config_from_package_json(self, work_dir: Path) -> None:
        (work_dir / "package.json").write_text(
            json.dumps({"name": "agent", "sonoma": {"network": "localnet"}}), encoding="utf-8"
        )
        assert ConfigStore().get("network") == "localnet"

    def test_empty_project_file_contributes_nothing(self, work_dir: Path, write_persisted) -> None:
        write_persisted({"network": "devnet"})
        (work_dir / ".sonomarc").write_text("", encoding="utf-8")

        store = ConfigStore()
        assert store.get() == {"network": "devnet"}
        assert store.project_config_path == work_dir / ".sonomarc"

    def test_malformed_persisted_file_is_ignored_with_warning(
        self, persisted_file: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        persisted_file.parent.mkdir(parents=True)
        persisted_file.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            assert ConfigStore().get() == {}
        assert "Malformed config file" in caplog.text

    def test_non_object_persisted_file_is_ignored(
        self, write_persisted, caplog: pytest.LogCaptureFixture
    ) -> None:
        write_persisted([1, 2, 3])
        with caplog.at_level(logging.WARNING):
            assert ConfigStore().get() == {}
        assert "not an object" in caplog.text

    def test_malformed_project_file_keeps_other_sources(
        self, write_persisted, work_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        write_persisted({"network": "devnet"})
        (work_dir / "sonoma.config.yaml").write_text("network: [unclosed\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            assert ConfigStore().get() == {"network": "devnet"}
        assert "sonoma.config.yaml" in caplog.text

    def test_explicit_cwd(self, tmp_path: Path) -> None:
        project = tmp_path / "elsewhere"
        project.mkdir()
        (project / ".sonomarc.yml").write_text("network: testnet\n", encoding="utf-8")

        store = ConfigStore(cwd=project, stop_dir=tmp_path)
        assert store.get("network") == "testnet"


class TestSourceValidation:
    def test_yaml_date_in_project_file_is_ignored(
        self, write_persisted, work_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        write_persisted({"network": "devnet"})
        (work_dir / ".sonomarc.yaml").write_text("deployedAt: 2024-01-01\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            assert ConfigStore().get("network") == "devnet"
        assert ".sonomarc.yaml" in caplog.text
        assert "date" in caplog.text

    def test_nested_timestamp_in_project_file_is_ignored(self, work_dir: Path) -> None:
        (work_dir / "sonoma.config.yml").write_text(
            "agents:\n  one:\n    deployment:\n      at: 2024-01-01T10:00:00Z\n",
            encoding="utf-8",
        )
        assert ConfigStore().get() == {}

    def test_non_string_keys_do_not_block_persistence(
        self, work_dir: Path, persisted_file: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (work_dir / ".sonomarc.yaml").write_text("agents: {1: a, b: c}\n", encoding="utf-8")

        store = ConfigStore()
        with caplog.at_level(logging.WARNING):
            assert store.get("agents") is None
        assert "keys must be strings" in caplog.text

        store.set("network", "devnet")
        assert _read(persisted_file) == {"network": "devnet"}

    @pytest.mark.parametrize(
        "content",
        [
            '{"network": "devnet", "ratio": NaN}',
            '{"network": "devnet", "limits": [1, Infinity]}',
        ],
    )
    def test_non_finite_numbers_in_persisted_file_are_ignored(
        self, persisted_file: Path, content: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        persisted_file.parent.mkdir(parents=True)
        persisted_file.write_text(content, encoding="utf-8")

        store = ConfigStore()
        with caplog.at_level(logging.WARNING):
            assert store.get() == {}
        assert "finite" in caplog.text

        store.set("network", "testnet")
        assert _read(persisted_file) == {"network": "testnet"}


class TestAccess:
    def test_get_default_for_missing_path(self) -> None:
        store = ConfigStore()
        assert store.get("nonexistent.key") is None
        assert store.get("nonexistent.key", "fallback") == "fallback"

    def test_stored_null_is_returned_instead_of_default(self) -> None:
        store = ConfigStore()
        store.set("x", None)
        assert store.get("x", "fallback") is None

    def test_get_rejects_empty_path(self) -> None:
        with pytest.raises(InvalidPathError):
            ConfigStore().get("")


class TestMutation:
    def test_set_get_reset_nested(self) -> None:
        store = ConfigStore()
        store.set("a.b.c", 5)
        assert store.get() == {"a": {"b": {"c": 5}}}
        assert store.get("a.b.c") == 5
        assert store.get("a.b.x") is None

        store.reset("a.b")
        assert store.get("a.b") is None
        assert store.get("a") == {}

    def test_set_writes_through(self, persisted_file: Path) -> None:
        ConfigStore().set("agents.my-agent.deployment.status", "deployed")

        assert _read(persisted_file) == {
            "agents": {"my-agent": {"deployment": {"status": "deployed"}}}
        }
        assert ConfigStore().get("agents.my-agent.deployment.status") == "deployed"

    def test_persisted_format(self, persisted_file: Path) -> None:
        store = ConfigStore()
        store.set({"name": "café", "auth": {"apiKey": "k"}})

        text = persisted_file.read_text(encoding="utf-8")
        assert text == json.dumps(
            {"auth": {"apiKey": "k"}, "name": "café"}, indent=2, sort_keys=True, ensure_ascii=False
        ) + "\n"

    def test_set_stores_a_copy_of_the_value(self, persisted_file: Path) -> None:
        store = ConfigStore()
        peers = ["a", "b"]
        store.set("agents.peers", peers)

        peers.append("c")

        assert store.get("agents.peers") == ["a", "b"]
        assert _read(persisted_file) == {"agents": {"peers": ["a", "b"]}}

    def test_set_tree_merges_over_current(self) -> None:
        store = ConfigStore()
        store.set("auth.apiKey", "k")
        store.set({"auth": {"org": "acme"}, "network": "devnet"})
        assert store.get() == {"auth": {"apiKey": "k", "org": "acme"}, "network": "devnet"}

    def test_set_rejects_other_targets(self) -> None:
        with pytest.raises(TypeError):
            ConfigStore().set(42, "x")  # type: ignore[arg-type]

    def test_in_process_set_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SONOMA_NETWORK", "mainnet")
        store = ConfigStore()
        store.set("network", "localnet")
        assert store.get("network") == "localnet"

    def test_invalid_path_changes_nothing(self, persisted_file: Path) -> None:
        store = ConfigStore()
        with pytest.raises(InvalidPathError):
            store.set("..", 1)
        assert store.get() == {}
        assert not persisted_file.exists()

    def test_unsupported_value_changes_nothing(self, persisted_file: Path) -> None:
        store = ConfigStore()
        with pytest.raises(TypeError):
            store.set("tags", {"a", "b"})
        assert store.get("tags") is None
        assert not persisted_file.exists()

    def test_reset_missing_path_is_noop(self, write_persisted, persisted_file: Path) -> None:
        write_persisted({"a": 1})
        ConfigStore().reset("x.y")
        assert _read(persisted_file) == {"a": 1}

    def test_reset_all_persists_once(self, write_persisted, persisted_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write_persisted({"network": "devnet", "auth": {"apiKey": "k"}})
        store = ConfigStore()
        store.load()

        calls = []
        real_persist = store.persist

        def counting_persist():
            calls.append(1)
            return real_persist()

        monkeypatch.setattr(store, "persist", counting_persist)
        store.reset_all()

        assert calls == [1]
        assert store.get() == {}
        assert _read(persisted_file) == {}

    def test_persist_before_load_keeps_existing_file(self, write_persisted, persisted_file: Path) -> None:
        write_persisted({"a": 1})
        ConfigStore().persist()
        assert _read(persisted_file) == {"a": 1}


class TestPersistFailure:
    def test_unwritable_location_raises_persist_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        store = ConfigStore(config_path=blocker / "config.json")

        with pytest.raises(PersistError) as excinfo:
            store.set("network", "devnet")

        assert isinstance(excinfo.value, OSError)
        assert excinfo.value.__cause__ is not None
        assert excinfo.value.context["path"] == str(blocker / "config.json")

    def test_unserializable_number_raises_persist_error(self, persisted_file: Path) -> None:
        store = ConfigStore()
        with pytest.raises(PersistError):
            store.set("ratio", float("nan"))
        assert not persisted_file.exists()


def test_sources_report_file_backed_sources(write_persisted, work_dir: Path, persisted_file: Path) -> None:
    write_persisted({})
    (work_dir / ".sonomarc.json").write_text("{}", encoding="utf-8")

    sources = ConfigStore().sources()

    assert sources == [
        {"source": "persisted", "path": str(persisted_file), "exists": True},
        {"source": "project", "path": str(work_dir / ".sonomarc.json"), "exists": True},
    ]
