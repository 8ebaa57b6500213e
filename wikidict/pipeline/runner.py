"""Build one dictionary for one request.

Records stream from a :class:`~wikidict.record_cache.RecordSource` through the
global filter, the kind's ``keep``/``preprocess``/``process`` hooks and into
keyed IR buckets. Once every edition of the request has been scanned, each
bucket is drained, post-processed, emitted and handed to the writer.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional

from .. import logging_manager as log_mgr
from ..config_manager.settings import WikidictSettings
from ..diagnostics import Diagnostics
from ..dictionaries.base import DictRequest, Dictionary
from ..errors import ConfigurationError, PipelineError
from ..languages import Langs, is_edition, is_language
from ..models.yomitan import count_entries
from ..observability import pipeline_stage
from ..record_cache.sources import RecordSource
from ..writer import OutputWriter
from .buckets import IrBucketMap
from .filters import rejected
from .keys import resolve_aggregation_key

logger = log_mgr.get_logger().getChild("pipeline")

CONSOLE_PRINT_INTERVAL = 10_000
TIDY_FILENAME = "tidy.jsonl"


@dataclass
class BuildResult:
    """Counters and outputs of one build."""

    dictionary: str
    request: DictRequest
    scanned: int = 0
    accepted: int = 0
    buckets: int = 0
    emitted: int = 0
    written: List[Path] = field(default_factory=list)


def check_request(dictionary: Dictionary, request: DictRequest) -> None:
    """Raise :class:`ConfigurationError` if ``request`` cannot be built."""

    if not request.editions:
        raise ConfigurationError(f"No edition requested for {dictionary.name}")
    for edition in request.editions:
        if not is_edition(edition):
            raise ConfigurationError(f"Unsupported edition: {edition!r}")
    for code in (request.source, request.target):
        if not is_language(code):
            raise ConfigurationError(f"Unknown language code: {code!r}")
    if not dictionary.accepts_combination(request.edition_label, request.source, request.target):
        raise ConfigurationError(
            f"Invalid combination for {dictionary.name}: {request}"
        )


def build_dictionary(
    dictionary: Dictionary,
    request: DictRequest,
    *,
    settings: WikidictSettings,
    records: RecordSource,
    writer: Optional[OutputWriter] = None,
) -> BuildResult:
    """Run the full pipeline for ``request``.

    Any failure is re-raised as :class:`PipelineError` carrying the
    dictionary kind and (edition, source, target) of the request.
    """

    with log_mgr.log_context(
        dictionary=dictionary.name,
        edition=request.edition_label,
        source=request.source,
        target=request.target,
    ):
        try:
            return _build(dictionary, request, settings, records, writer)
        except PipelineError:
            raise
        except Exception as exc:
            raise PipelineError(
                dictionary.name,
                request.edition_label,
                request.source,
                request.target,
                cause=exc,
            ) from exc


def _build(
    dictionary: Dictionary,
    request: DictRequest,
    settings: WikidictSettings,
    records: RecordSource,
    writer: Optional[OutputWriter],
) -> BuildResult:
    result = BuildResult(dictionary=dictionary.name, request=request)
    buckets: IrBucketMap[List[Any]] = IrBucketMap(dictionary.new_ir)
    diagnostics = Diagnostics()

    for edition in request.editions:
        langs = Langs(edition=edition, source=request.source, target=request.target)
        _scan_edition(dictionary, langs, settings, records, buckets, diagnostics, result)

    if len(buckets) > 1:
        logger.debug("Matrix (%d): %s", len(buckets), [str(key) for key in buckets.keys()])
    result.buckets = len(buckets)

    for key, irs in buckets.drain():
        logger.info(
            "Found %d irs for %s",
            len(irs),
            key,
            extra={"event": "pipeline.bucket.found"},
        )
        if not irs:
            continue

        dict_name = dictionary.dict_name(settings, key.source, key.target)
        with pipeline_stage("postprocess", {"bucket": str(key)}):
            dictionary.postprocess(irs)

        if settings.save_temps:
            write_tidy(settings.data_dir / "temp" / dict_name, irs, pretty=settings.pretty)

        if settings.skip_output or writer is None:
            continue

        with pipeline_stage("emit", {"bucket": str(key)}):
            labelled = dictionary.emit(key.to_langs(), settings, irs)
        result.emitted += count_entries(labelled)
        path = writer.write(key.source, key.target, settings, dict_name, labelled)
        if path is not None:
            result.written.append(path)

    if settings.write_diagnostics:
        dict_name = dictionary.dict_name(settings, request.source, request.target)
        diagnostics.write(settings.data_dir / "diagnostics" / dict_name, pretty=True)

    return result


def _scan_edition(
    dictionary: Dictionary,
    langs: Langs,
    settings: WikidictSettings,
    records: RecordSource,
    buckets: IrBucketMap[List[Any]],
    diagnostics: Diagnostics,
    result: BuildResult,
) -> None:
    language = dictionary.fetch_language(langs)
    key = resolve_aggregation_key(dictionary.edition_scope, langs)
    scanned = 0
    accepted = 0

    with pipeline_stage("transform", {"edition": langs.edition, "language": language}):
        for entry in records.records(langs.edition, language):
            scanned += 1
            if not settings.quiet and scanned % CONSOLE_PRINT_INTERVAL == 0:
                logger.debug("Processed %d lines...", scanned)

            if rejected(entry, settings.filters, settings.rejects):
                continue
            if settings.first and accepted >= settings.first:
                break
            accepted += 1

            if not dictionary.keep(langs.source, entry):
                continue

            if settings.write_diagnostics:
                dictionary.inspect_tags(entry, diagnostics)
            irs = buckets.bucket(key)
            dictionary.preprocess(langs, entry, settings, irs)
            dictionary.process(langs, entry, irs)

    result.scanned += scanned
    result.accepted += accepted
    logger.info(
        "Processed %d lines. Accepted %d lines.",
        scanned,
        accepted,
        extra={"event": "pipeline.edition.scanned", "edition": langs.edition},
    )


def _to_jsonable(item: Any) -> Any:
    if hasattr(item, "to_row"):
        return item.to_row()
    if hasattr(item, "to_dict"):
        return item.to_dict()
    if isinstance(item, (list, tuple)):
        return [_to_jsonable(value) for value in item]
    return item


def write_tidy(directory: Path, irs: Iterable[Any], *, pretty: bool = False) -> Path:
    """Dump post-processed IR items, one JSON document per item.

    Documents are one per line unless ``pretty`` indents them.
    """

    directory.mkdir(parents=True, exist_ok=True)
    path = directory / TIDY_FILENAME
    with open(path, "w", encoding="utf-8") as handle:
        for item in irs:
            handle.write(
                json.dumps(_to_jsonable(item), ensure_ascii=False, indent=2 if pretty else None)
            )
            handle.write("\n")
    logger.debug("Wrote tidy %s", path)
    return path


__all__ = ["BuildResult", "build_dictionary", "check_request", "write_tidy"]
