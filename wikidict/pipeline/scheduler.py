"""Release scheduling: build every dictionary of a release in bounded pools.

A release first makes sure the record cache of every requested edition is
populated (one worker per edition), then, kind by kind, fans the valid
(edition, source, target) combinations out over a thread pool. Memory-heavy
kinds run under a tighter worker ceiling. A failing combination is logged
and reported without cancelling its siblings.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .. import logging_manager as log_mgr
from ..config_manager.settings import WikidictSettings
from ..datasets import DatasetLocator
from ..dictionaries import get_dictionary
from ..dictionaries.base import DictRequest, Dictionary
from ..errors import PipelineError, WikidictError
from ..languages import all_languages, is_edition, is_language
from ..observability import pipeline_stage, worker_pool_event
from ..record_cache.sources import CachedRecordSource, JsonlRecordSource, RecordSource
from ..writer import OutputWriter, YomitanZipWriter
from .runner import BuildResult, build_dictionary

logger = log_mgr.get_logger().getChild("scheduler")


def _known(codes: Sequence[str], check: Callable[[str], bool], label: str) -> List[str]:
    known: List[str] = []
    for code in codes:
        if not check(code):
            logger.warning(
                "Skipping unknown %s code %r",
                label,
                code,
                extra={"event": "scheduler.code.unknown"},
            )
            continue
        if code not in known:
            known.append(code)
    return known


@dataclass
class ReleaseReport:
    """Outcome of a release run."""

    built: List[BuildResult] = field(default_factory=list)
    failed: List[PipelineError] = field(default_factory=list)
    skipped: List[Tuple[str, DictRequest]] = field(default_factory=list)
    failed_editions: Dict[str, Exception] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed and not self.failed_editions

    def merge(self, other: "ReleaseReport") -> None:
        self.built.extend(other.built)
        self.failed.extend(other.failed)
        self.skipped.extend(other.skipped)
        self.failed_editions.update(other.failed_editions)


class ReleaseScheduler:
    """Drive the builds of a release over worker pools."""

    def __init__(
        self,
        settings: WikidictSettings,
        *,
        records: Optional[RecordSource] = None,
        locate: Optional[Callable[[str], Path]] = None,
        writer: Optional[OutputWriter] = None,
    ) -> None:
        self.settings = settings
        self.locate = locate or DatasetLocator(settings.kaikki_dir, download=settings.download)
        if records is None:
            if settings.use_cache:
                records = CachedRecordSource(settings.resolved_cache_dir)
            else:
                records = JsonlRecordSource(self.locate)
        self.records = records
        self.writer = writer if writer is not None else YomitanZipWriter(
            settings.resolved_output_dir
        )

    def prepare_caches(self, editions: Sequence[str]) -> Dict[str, Exception]:
        """Populate the record cache of each edition, in parallel.

        Returns the editions whose cache could not be prepared, with the error.
        Nothing happens when records do not come from the cache.
        """

        if not isinstance(self.records, CachedRecordSource) or not editions:
            return {}

        records = self.records
        failures: Dict[str, Exception] = {}
        workers = max(1, min(len(editions), self.settings.max_workers))

        def _populate(edition: str) -> int:
            with log_mgr.log_context(edition=edition):
                return records.store(edition).populate(self.locate(edition))

        worker_pool_event("start", mode="thread", max_workers=workers, attributes={"stage": "cache"})
        with pipeline_stage("cache", {"editions": list(editions)}):
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="wikidict-cache") as executor:
                futures = {executor.submit(_populate, edition): edition for edition in editions}
                for future in as_completed(futures):
                    edition = futures[future]
                    try:
                        future.result()
                    except WikidictError as exc:
                        logger.error(
                            "Failed to prepare record cache for %s: %s",
                            edition,
                            exc,
                            extra={"event": "scheduler.cache.failed", "edition": edition},
                        )
                        failures[edition] = exc
                    except Exception as exc:
                        logger.error(
                            "Unexpected error while preparing record cache for %s: %s",
                            edition,
                            exc,
                            exc_info=exc,
                            extra={"event": "scheduler.cache.failed", "edition": edition},
                        )
                        failures[edition] = exc
        worker_pool_event("shutdown", mode="thread", max_workers=workers, attributes={"stage": "cache"})
        return failures

    def plan(
        self,
        dictionary: Dictionary,
        editions: Sequence[str],
        languages: Sequence[str],
    ) -> Tuple[List[DictRequest], List[DictRequest]]:
        """Split a kind's release matrix into (valid, skipped) requests."""

        accepted: List[DictRequest] = []
        skipped: List[DictRequest] = []
        for request in dictionary.release_requests(editions, languages):
            if dictionary.accepts_combination(request.edition_label, request.source, request.target):
                accepted.append(request)
            else:
                skipped.append(request)
        return accepted, skipped

    def run_kind(self, dictionary: Dictionary, requests: Sequence[DictRequest]) -> ReleaseReport:
        """Build ``requests`` with a pool bounded by the kind's worker ceiling."""

        report = ReleaseReport()
        if not requests:
            return report

        ceiling = dictionary.worker_ceiling(self.settings) or self.settings.max_workers
        workers = max(1, min(ceiling, len(requests)))
        attributes = {"dictionary": dictionary.name, "jobs": len(requests)}
        worker_pool_event("start", mode="thread", max_workers=workers, attributes=attributes)

        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix=f"wikidict-{dictionary.name}"
        ) as executor:
            futures = {
                executor.submit(
                    build_dictionary,
                    dictionary,
                    request,
                    settings=self.settings,
                    records=self.records,
                    writer=self.writer,
                ): request
                for request in requests
            }
            for future in as_completed(futures):
                request = futures[future]
                try:
                    report.built.append(future.result())
                except PipelineError as exc:
                    logger.error(
                        "Failed to build %s %s: %s",
                        dictionary.name,
                        request,
                        exc.cause or exc,
                        exc_info=exc,
                        extra={
                            "event": "scheduler.build.failed",
                            "dictionary": dictionary.name,
                            "edition": request.edition_label,
                            "source": request.source,
                            "target": request.target,
                        },
                    )
                    report.failed.append(exc)

        worker_pool_event("shutdown", mode="thread", max_workers=workers, attributes=attributes)
        return report

    def release(
        self,
        *,
        editions: Optional[Sequence[str]] = None,
        kinds: Optional[Sequence[str]] = None,
        languages: Optional[Sequence[str]] = None,
    ) -> ReleaseReport:
        """Build every valid combination of ``kinds`` over ``editions``."""

        editions = _known(editions or self.settings.release_editions, is_edition, "edition")
        dictionaries = [get_dictionary(kind) for kind in (kinds or self.settings.release_kinds)]
        languages = _known(
            languages or self.settings.languages or all_languages(), is_language, "language"
        )

        report = ReleaseReport()
        report.failed_editions.update(self.prepare_caches(editions))
        ready = [edition for edition in editions if edition not in report.failed_editions]

        for dictionary in dictionaries:
            accepted, skipped = self.plan(dictionary, ready, languages)
            report.skipped.extend((dictionary.name, request) for request in skipped)
            logger.info(
                "Releasing %d %s dictionaries (%d combinations skipped)",
                len(accepted),
                dictionary.name,
                len(skipped),
                extra={"event": "scheduler.kind.start", "dictionary": dictionary.name},
            )
            with pipeline_stage("release", {"dictionary": dictionary.name}):
                report.merge(self.run_kind(dictionary, accepted))

        logger.info(
            "Release finished: %d built, %d failed, %d skipped",
            len(report.built),
            len(report.failed),
            len(report.skipped),
            extra={"event": "scheduler.release.complete"},
        )
        return report


__all__ = ["ReleaseReport", "ReleaseScheduler"]
