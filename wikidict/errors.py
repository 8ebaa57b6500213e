"""Exception hierarchy for dictionary building."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class WikidictError(RuntimeError):
    """Base exception raised by wikidict components."""


class ConfigurationError(WikidictError):
    """Raised when settings or a requested language combination are invalid."""


class RecordParseError(WikidictError):
    """Raised when a raw dataset line cannot be decoded into a word entry."""

    def __init__(
        self,
        path: Union[str, Path],
        line_number: int,
        *,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.path = Path(path)
        self.line_number = line_number
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Malformed record at {self.path}:{line_number}{detail}")


class CacheCorruptionError(WikidictError):
    """Raised when a cached record blob cannot be decoded."""


class CacheStoreError(WikidictError):
    """Raised when the record cache store cannot be opened or written."""


class DatasetNotFoundError(WikidictError):
    """Raised when the raw dataset for an edition is missing."""


class DownloadError(WikidictError):
    """Raised when downloading a raw dataset fails."""


class OutputWriteError(WikidictError):
    """Raised when dictionary output cannot be written."""


class PipelineError(WikidictError):
    """Failure of one dictionary build, tagged with the combination that failed."""

    def __init__(
        self,
        dictionary: str,
        edition: str,
        source: str,
        target: str,
        *,
        cause: BaseException,
    ) -> None:
        self.dictionary = dictionary
        self.edition = edition
        self.source = source
        self.target = target
        self.cause = cause
        super().__init__(
            f"[{dictionary}-{edition}-{source}-{target}] "
            f"{cause.__class__.__name__}: {cause}"
        )

    @property
    def identity(self) -> str:
        return f"{self.dictionary}-{self.edition}-{self.source}-{self.target}"


__all__ = [
    "CacheCorruptionError",
    "CacheStoreError",
    "ConfigurationError",
    "DatasetNotFoundError",
    "DownloadError",
    "OutputWriteError",
    "PipelineError",
    "RecordParseError",
    "WikidictError",
]
