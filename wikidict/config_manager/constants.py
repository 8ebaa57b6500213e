"""Shared constants for the configuration manager package."""
from __future__ import annotations

import os
from pathlib import Path

MODULE_DIR = Path(__file__).resolve().parent
SCRIPT_DIR = MODULE_DIR.parent.parent.resolve()
CONF_DIR = SCRIPT_DIR / "conf"
DEFAULT_CONFIG_PATH = CONF_DIR / "config.json"
DEFAULT_LOCAL_CONFIG_PATH = CONF_DIR / "config.local.json"

DEFAULT_DATA_DIR = Path("data")
DEFAULT_MAX_WORKERS = os.cpu_count() or 4
# Workers for the memory-heavy dictionary kind.
DEFAULT_HEAVY_MAX_WORKERS = 2
DEFAULT_DICT_PREFIX = "wty"
DEFAULT_RELEASE_EDITIONS = ("en", "de", "fr")
DEFAULT_RELEASE_KINDS = ("ipa", "ipa-merged", "glossary")

FILTER_FIELDS = ("word", "pos", "lang_code")

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
    "FILTER_FIELDS",
    "MODULE_DIR",
    "SCRIPT_DIR",
]
