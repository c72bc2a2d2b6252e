import json
from pathlib import Path
from typing import Iterator

import pytest

from uitester.automation.errors import ConfigurationError
from uitester.config.factory import ConfigurationFactory
from uitester.config.run_config_loader import load_run_config
from uitester.config.settings import UITesterSettings
from uitester.config.toml_loader import TOMLConfigLoader
from uitester.events.types import EventObserverType
from uitester.schemas.steps import ClickStep
from tests.fixtures.models.schema_factories import DocumentFactory

SAMPLE_TOML = """
[timeouts]
element_ms = 5000
navigation_ms = 45000

[steps]
fail_on_unknown_action = true

[browser]
viewport_width = 1920

[events]
observers = ["null"]

[documents]
extensions = ["JSON", "xml"]
"""


@pytest.fixture(autouse=True)
def reset_configuration(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run every test in an empty directory with a fresh settings singleton."""
    monkeypatch.chdir(tmp_path)
    ConfigurationFactory.reset()
    yield
    ConfigurationFactory.reset()


class TestSettings:
    # ? VALID CASE
    def test_defaults(self) -> None:
        settings = UITesterSettings()

        assert settings.element_timeout_ms == 10000
        assert settings.navigation_timeout_ms == 30000
        assert settings.settle_delay_ms == 500
        assert settings.type_delay_ms == 50
        assert settings.default_wait_ms == 1000
        assert settings.fail_on_unknown_action is False
        assert settings.event_observers == [EventObserverType.RICH_TERMINAL]
        assert settings.document_extensions == [".json", ".csv"]

    # ? VALID CASE
    def test_environment_variables_use_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UITESTER_ELEMENT_TIMEOUT_MS", "2500")
        monkeypatch.setenv("UITESTER_FAIL_ON_UNKNOWN_ACTION", "true")

        settings = UITesterSettings()

        assert settings.element_timeout_ms == 2500
        assert settings.fail_on_unknown_action is True

    # ! INVALID CASE
    def test_invalid_timeout_rejected(self) -> None:
        with pytest.raises(ValueError):
            UITesterSettings(element_timeout_ms=0)


class TestTOMLConfigLoader:
    # ? VALID CASE
    def test_flattens_nested_sections(self, tmp_path: Path) -> None:
        path = tmp_path / "uitester.toml"
        path.write_text(SAMPLE_TOML, encoding="utf-8")
        loader = TOMLConfigLoader(path)

        config = loader.load_config()

        assert config["timeouts.element_ms"] == 5000
        assert config["events.observers"] == ["null"]
        assert loader.get_value("browser.viewport_height", 720) == 720

    # ! INVALID CASE
    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            TOMLConfigLoader(tmp_path / "missing.toml").load_config()

    # ! INVALID CASE
    def test_invalid_toml_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "uitester.toml"
        path.write_text("[timeouts\nelement_ms = ", encoding="utf-8")

        with pytest.raises(ValueError):
            TOMLConfigLoader(path).load_config()


class TestConfigurationFactory:
    """Test suite for `ConfigurationFactory`."""

    # ? VALID CASE
    def test_cli_mode_reads_toml(self, tmp_path: Path) -> None:
        (tmp_path / "uitester.toml").write_text(SAMPLE_TOML, encoding="utf-8")

        settings = ConfigurationFactory.get_settings(cli_mode=True)

        assert settings.element_timeout_ms == 5000
        assert settings.navigation_timeout_ms == 45000
        assert settings.fail_on_unknown_action is True
        assert settings.viewport_width == 1920
        assert settings.event_observers == [EventObserverType.NULL]
        assert settings.document_extensions == [".json", ".xml"]

    # ? VALID CASE
    def test_cli_mode_without_toml_uses_defaults(self) -> None:
        settings = ConfigurationFactory.get_settings(cli_mode=True)

        assert settings.element_timeout_ms == 10000

    # ? VALID CASE
    def test_library_mode_ignores_toml(self, tmp_path: Path) -> None:
        (tmp_path / "uitester.toml").write_text(SAMPLE_TOML, encoding="utf-8")

        settings = ConfigurationFactory.get_settings()

        assert settings.element_timeout_ms == 10000

    # ? VALID CASE
    def test_settings_are_cached_until_reset(self) -> None:
        first = ConfigurationFactory.get_settings()

        assert ConfigurationFactory.get_settings() is first
        ConfigurationFactory.reset()
        assert ConfigurationFactory.get_settings() is not first

    # ! INVALID CASE
    def test_invalid_toml_value_raises_configuration_error(self, tmp_path: Path) -> None:
        (tmp_path / "uitester.toml").write_text(
            "[timeouts]\nelement_ms = -1\n", encoding="utf-8"
        )

        with pytest.raises(ConfigurationError):
            ConfigurationFactory.get_settings(cli_mode=True)


class TestLoadRunConfig:
    """Test suite for `load_run_config`."""

    @pytest.fixture
    def exported_config(self, tmp_path: Path) -> Path:
        path = tmp_path / "ui-tester-config.json"
        path.write_text(
            json.dumps(
                {
                    "targetUrl": "https://example.com/import",
                    "uploadSelector": "#file",
                    "submitSelector": "#submit",
                    "waitAfterUpload": 1500,
                    "headless": False,
                    "initialSteps": [{"action": "click", "selector": "#login"}],
                    "customSteps": [{"action": "click", "selector": "#legacy"}],
                }
            ),
            encoding="utf-8",
        )
        return path

    # ? VALID CASE
    def test_reads_camel_case_json(self, exported_config: Path) -> None:
        documents = DocumentFactory.build_named("a.json")

        config = load_run_config(exported_config, documents=documents)

        assert config.target_url == "https://example.com/import"
        assert config.upload_selector == "#file"
        assert config.submit_selector == "#submit"
        assert config.wait_after_upload == 1500
        assert config.wait_after_submit == 3000
        assert isinstance(config.initial_steps[0], ClickStep)
        assert config.documents == documents

    # ? VALID CASE
    def test_overrides_replace_file_values(self, exported_config: Path) -> None:
        config = load_run_config(
            exported_config,
            documents=DocumentFactory.build_named("a.json"),
            headless=True,
            ui_automation_only=None,
        )

        assert config.headless is True
        assert config.ui_automation_only is False

    # ? VALID CASE
    def test_ui_only_config_needs_no_documents(self, exported_config: Path) -> None:
        config = load_run_config(exported_config, ui_automation_only=True)

        assert config.ui_automation_only is True
        assert config.documents == []

    # ? VALID CASE
    def test_document_paths_resolve_relative_to_config(self, tmp_path: Path) -> None:
        (tmp_path / "data").mkdir()
        (tmp_path / "data" / "orders.json").write_text("{}", encoding="utf-8")
        path = tmp_path / "run.toml"
        path.write_text(
            'targetUrl = "https://example.com/import"\ndocuments = ["data/orders.json"]\n',
            encoding="utf-8",
        )

        config = load_run_config(path)

        assert [d.name for d in config.documents] == ["orders.json"]
        assert config.documents[0].path == (tmp_path / "data" / "orders.json").absolute()
        assert config.documents[0].size == 2

    # ! INVALID CASE
    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_run_config(tmp_path / "missing.json")

        assert "not found" in exc_info.value.message

    # ! INVALID CASE
    def test_malformed_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"targetUrl": ', encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_run_config(path)

    # ! INVALID CASE
    def test_no_documents_outside_ui_only_mode_raises(self, exported_config: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_run_config(exported_config)

    # ! INVALID CASE
    def test_unreadable_document_path_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "run.json"
        path.write_text(
            json.dumps({"targetUrl": "https://example.com", "documents": ["gone.json"]}),
            encoding="utf-8",
        )

        with pytest.raises(ConfigurationError):
            load_run_config(path)
