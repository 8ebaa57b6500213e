"""Configuration loading utilities."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from .. import logging_manager
from ..errors import ConfigurationError

from .constants import DEFAULT_CONFIG_PATH, DEFAULT_LOCAL_CONFIG_PATH
from .settings import WikidictSettings, apply_settings_updates, load_environment_overrides

logger = logging_manager.get_logger().getChild("config")

def _read_config_json(path: Optional[Path], label: str = "configuration") -> Dict[str, Any]:
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        logger.debug("No %s found at %s.", label, path)
        return {}
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in {label} at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a JSON object in {label} at {path}")
    logger.debug("Loaded %s from %s", label, path)
    return data


def _deep_merge_dict(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def load_configuration(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> WikidictSettings:
    """Load the layered configuration into a :class:`WikidictSettings`.

    Layers, lowest precedence first: ``conf/config.json``, the local override
    file (``config_file`` or ``conf/config.local.json``), environment
    variables, then ``overrides`` (typically command line flags).
    """

    payload = _read_config_json(DEFAULT_CONFIG_PATH, label="default configuration")

    if config_file:
        override_path = Path(config_file).expanduser()
        if not override_path.is_absolute():
            override_path = (Path.cwd() / override_path).resolve()
        if not override_path.exists():
            raise ConfigurationError(f"Configuration file not found: {override_path}")
    else:
        override_path = DEFAULT_LOCAL_CONFIG_PATH
    payload = _deep_merge_dict(
        payload, _read_config_json(override_path, label="local configuration")
    )

    try:
        settings = WikidictSettings.model_validate(payload)
        settings = apply_settings_updates(settings, load_environment_overrides())
        settings = apply_settings_updates(
            settings, {key: value for key, value in (overrides or {}).items() if value is not None}
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration detected: {exc}") from exc

    return settings


__all__ = ["load_configuration"]
