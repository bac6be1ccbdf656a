"""YAML config loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from asq_code.config.domain.config import PluginConfig
from asq_code.config.domain.observer import ConfigObserver
from asq_code.config.infrastructure.errors import ConfigLoadError, ConfigValidationError


class YamlConfigLoader:
    """Loads, validates, and returns a PluginConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> PluginConfig:
        """
        Load and validate a PluginConfig from a YAML file.

        An empty file yields the default configuration.

        Raises:
            ConfigLoadError: if the file does not exist.
            ConfigValidationError: if the file is not valid YAML, the document is
                not a mapping, or the schema is violated.
        """
        raw = _parse_yaml(path=path)
        cfg = _build_config(raw=raw)
        self._observer.config_loaded(path=str(path), tag_name=cfg.tag_name)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc


def _build_config(raw: Any) -> PluginConfig:
    if raw is None:
        return PluginConfig()
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"expected a mapping at the top level, got {type(raw).__name__}"
        )
    try:
        return PluginConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
