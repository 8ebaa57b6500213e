"""High-level configuration management for wikidict."""
from __future__ import annotations

from .constants import (
    CONF_DIR,
    DEFAULT_CONFIG_PATH,
    DEFAULT_DATA_DIR,
    DEFAULT_DICT_PREFIX,
    DEFAULT_HEAVY_MAX_WORKERS,
    DEFAULT_LOCAL_CONFIG_PATH,
    DEFAULT_MAX_WORKERS,
    DEFAULT_RELEASE_EDITIONS,
    DEFAULT_RELEASE_KINDS,
    FILTER_FIELDS,
)
from .loader import load_configuration
from .settings import (
    EnvironmentOverrides,
    FilterRule,
    WikidictSettings,
    apply_settings_updates,
    load_environment_overrides,
)

__all__ = [
    "CONF_DIR",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_DATA_DIR",
    "DEFAULT_DICT_PREFIX",
    "DEFAULT_HEAVY_MAX_WORKERS",
    "DEFAULT_LOCAL_CONFIG_PATH",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_RELEASE_EDITIONS",
    "DEFAULT_RELEASE_KINDS",
    "EnvironmentOverrides",
    "FILTER_FIELDS",
    "FilterRule",
    "WikidictSettings",
    "apply_settings_updates",
    "load_configuration",
    "load_environment_overrides",
]
