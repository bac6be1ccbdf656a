"""Tests for YAML config loading infrastructure."""

from pathlib import Path

import pytest

from asq_code.config.domain.config import PluginConfig
from asq_code.config.infrastructure.errors import ConfigLoadError, ConfigValidationError
from asq_code.config.infrastructure.yaml_loader import YamlConfigLoader
from tests.config.fake_observer import FakeConfigObserver

FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _fixture(name: str) -> Path:
    return FIXTURES / name


class TestValidConfigLoading:
    def test_loads_all_fields(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("valid_config.yaml")
        )

        assert cfg.tag_name == "asq-code-q"
        assert cfg.event_name == "asq:question_type"
        assert cfg.controller_role == "ctrl"

    def test_partial_file_keeps_defaults(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("custom_tag_config.yaml")
        )

        assert cfg.tag_name == "asq-sqlite-q"
        assert cfg.event_name == PluginConfig().event_name

    def test_empty_file_yields_defaults(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("empty_config.yaml")
        )

        assert cfg == PluginConfig()

    def test_emits_config_loaded(self) -> None:
        observer = FakeConfigObserver()
        YamlConfigLoader(observer=observer).load(path=_fixture("custom_tag_config.yaml"))

        assert len(observer.loaded) == 1
        assert observer.loaded[0]["tag_name"] == "asq-sqlite-q"


class TestInvalidConfigLoading:
    def test_missing_file_raises_config_load_error(self) -> None:
        with pytest.raises(ConfigLoadError):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_fixture("nope.yaml")
            )

    def test_empty_tag_name_raises_validation_error(self) -> None:
        observer = FakeConfigObserver()

        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer=observer).load(path=_fixture("invalid_config.yaml"))

        assert observer.loaded == []

    def test_non_mapping_document_raises_validation_error(self) -> None:
        with pytest.raises(ConfigValidationError, match="mapping"):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_fixture("list_config.yaml")
            )

    def test_broken_yaml_raises_validation_error(self) -> None:
        observer = FakeConfigObserver()

        with pytest.raises(ConfigValidationError, match="invalid YAML"):
            YamlConfigLoader(observer=observer).load(path=_fixture("broken_config.yaml"))

        assert observer.loaded == []
