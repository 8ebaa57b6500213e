"""Pydantic models and helper utilities for configuration values."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from .. import logging_manager

from .constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_DICT_PREFIX,
    DEFAULT_HEAVY_MAX_WORKERS,
    DEFAULT_MAX_WORKERS,
    DEFAULT_RELEASE_EDITIONS,
    DEFAULT_RELEASE_KINDS,
)

logger = logging_manager.get_logger().getChild("config")

FilterField = Literal["word", "pos", "lang_code"]


class FilterRule(BaseModel):
    """A ``field == value`` check applied to every word entry."""

    model_config = ConfigDict(frozen=True)

    field: FilterField
    value: str

    @classmethod
    def parse(cls, raw: str) -> "FilterRule":
        """Build a rule from ``field=value`` (``field,value`` is also accepted)."""

        separator = "=" if "=" in raw else ","
        field, sep, value = raw.partition(separator)
        if not sep:
            raise ValueError(f"Expected FIELD=VALUE, got {raw!r}")
        return cls(field=field.strip(), value=value.strip())


class WikidictSettings(BaseModel):
    """Typed representation of the application configuration."""

    model_config = ConfigDict(extra="ignore")

    data_dir: Path = DEFAULT_DATA_DIR
    cache_dir: Optional[Path] = None
    output_dir: Optional[Path] = None
    max_workers: int = Field(default=DEFAULT_MAX_WORKERS, ge=1)
    heavy_max_workers: int = Field(default=DEFAULT_HEAVY_MAX_WORKERS, ge=1)
    filters: List[FilterRule] = Field(default_factory=list)
    rejects: List[FilterRule] = Field(default_factory=list)
    first: int = Field(default=0, ge=0)
    save_temps: bool = False
    skip_output: bool = False
    use_cache: bool = True
    write_diagnostics: bool = False
    pretty: bool = False
    quiet: bool = False
    download: bool = False
    release_editions: List[str] = Field(default_factory=lambda: list(DEFAULT_RELEASE_EDITIONS))
    release_kinds: List[str] = Field(default_factory=lambda: list(DEFAULT_RELEASE_KINDS))
    languages: List[str] = Field(default_factory=list)
    dict_prefix: str = DEFAULT_DICT_PREFIX

    @field_validator("release_editions", "languages", mode="before")
    @classmethod
    def _split_codes(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @property
    def resolved_cache_dir(self) -> Path:
        return self.cache_dir if self.cache_dir is not None else self.data_dir / "db"

    @property
    def resolved_output_dir(self) -> Path:
        return self.output_dir if self.output_dir is not None else self.data_dir / "dict"

    @property
    def kaikki_dir(self) -> Path:
        return self.data_dir / "kaikki"


class EnvironmentOverrides(BaseSettings):
    """Configuration overrides sourced from environment variables."""

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    data_dir: Optional[Path] = Field(
        default=None, validation_alias=AliasChoices("WIKIDICT_DATA_DIR")
    )
    cache_dir: Optional[Path] = Field(
        default=None, validation_alias=AliasChoices("WIKIDICT_CACHE_DIR")
    )
    output_dir: Optional[Path] = Field(
        default=None, validation_alias=AliasChoices("WIKIDICT_OUTPUT_DIR")
    )
    max_workers: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("WIKIDICT_MAX_WORKERS")
    )
    heavy_max_workers: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("WIKIDICT_HEAVY_MAX_WORKERS")
    )
    use_cache: Optional[bool] = Field(
        default=None, validation_alias=AliasChoices("WIKIDICT_USE_CACHE")
    )


def load_environment_overrides() -> Dict[str, Any]:
    """Return configuration overrides sourced from environment variables."""

    try:
        overrides = EnvironmentOverrides()
    except ValidationError as exc:
        logger.warning(
            "Invalid environment configuration detected; using defaults.",
            extra={"event": "config.env.validation_error", "error": str(exc)},
        )
        return {}
    return overrides.model_dump(exclude_none=True)


def apply_settings_updates(
    settings: WikidictSettings, updates: Dict[str, Any]
) -> WikidictSettings:
    """Return a copy of ``settings`` validated with ``updates`` applied."""

    if not updates:
        return settings
    payload = settings.model_dump(mode="python")
    payload.update(updates)
    return WikidictSettings.model_validate(payload)


__all__ = [
    "EnvironmentOverrides",
    "FilterRule",
    "WikidictSettings",
    "apply_settings_updates",
    "load_environment_overrides",
]
