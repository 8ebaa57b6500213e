"""Unified orchestration helpers for CLI entry points."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

from .. import logging_manager as log_mgr
from ..config_manager import WikidictSettings, load_configuration
from ..dictionaries import get_dictionary
from ..dictionaries.base import DictRequest
from ..errors import ConfigurationError, PipelineError
from ..languages import EDITIONS, SELF_MARKER, validate_edition, validate_editions, validate_language
from ..pipeline.runner import build_dictionary, check_request
from ..pipeline.scheduler import ReleaseScheduler
from .args import parse_cli_args, settings_overrides

logger = log_mgr.get_logger().getChild("cli")

BUILD_COMMANDS = ("glossary", "glossary-extended", "ipa", "ipa-merged")


def _merged_editions(raw: Optional[Sequence[str]]) -> Tuple[str, ...]:
    if raw:
        return tuple(validate_editions(raw))
    return tuple(edition for edition in EDITIONS if edition != SELF_MARKER)


def build_request(args: argparse.Namespace) -> DictRequest:
    """Translate the positional arguments of a build command into a request."""

    command = args.command
    if command == "glossary":
        edition = validate_edition(args.edition)
        return DictRequest((edition,), edition, validate_language(args.target))
    if command == "glossary-extended":
        if args.edition == "all":
            editions = _merged_editions(None)
        else:
            editions = (validate_edition(args.edition),)
        return DictRequest(
            editions, validate_language(args.source), validate_language(args.target)
        )
    if command == "ipa":
        edition = validate_edition(args.target)
        return DictRequest((edition,), validate_language(args.source), edition)
    if command == "ipa-merged":
        language = validate_language(args.language)
        return DictRequest(_merged_editions(args.editions), language, language)
    raise ConfigurationError(f"Not a build command: {command!r}")


def _run_build(args: argparse.Namespace, settings: WikidictSettings) -> int:
    dictionary = get_dictionary(args.command)
    request = build_request(args)
    check_request(dictionary, request)

    scheduler = ReleaseScheduler(settings)
    failures = scheduler.prepare_caches(request.editions)
    if failures:
        for edition, exc in failures.items():
            logger.error("Record cache unavailable for %s: %s", edition, exc)
        return 1

    try:
        result = build_dictionary(
            dictionary,
            request,
            settings=settings,
            records=scheduler.records,
            writer=scheduler.writer,
        )
    except PipelineError as exc:
        logger.error("%s", exc, exc_info=exc.cause)
        return 1

    for path in result.written:
        logger.info("Dictionary written to %s", path)
    if not result.written and not settings.skip_output:
        logger.warning("No entries found for %s %s", dictionary.name, request)
    return 0


def _run_cache(args: argparse.Namespace, settings: WikidictSettings) -> int:
    editions = validate_editions(args.editions)
    scheduler = ReleaseScheduler(settings.model_copy(update={"use_cache": True}))
    failures = scheduler.prepare_caches(editions)
    for edition in editions:
        if edition in failures:
            continue
        store = scheduler.records.store(edition)
        logger.info(
            "Cache %s: %d records in %d languages",
            edition,
            store.count(),
            len(store.languages()),
            extra={"event": "cli.cache.summary", "edition": edition},
        )
    return 1 if failures else 0


def _run_release(args: argparse.Namespace, settings: WikidictSettings) -> int:
    report = ReleaseScheduler(settings).release(
        editions=args.editions, kinds=args.kinds, languages=args.languages
    )
    for failure in report.failed:
        logger.error("Failed: %s", failure.identity)
    for edition in report.failed_editions:
        logger.error("Failed edition: %s", edition)
    return 0 if report.ok else 1


def run_cli(argv: Optional[Sequence[str]] = None) -> int:
    """Primary console script entry point."""

    args = parse_cli_args(argv)
    log_mgr.configure_logging_level(debug_enabled=args.debug)

    try:
        settings = load_configuration(args.config, overrides=settings_overrides(args))
        if args.command in BUILD_COMMANDS:
            return _run_build(args, settings)
        if args.command == "cache":
            return _run_cache(args, settings)
        if args.command == "release":
            return _run_release(args, settings)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted by Ctrl+C; shutting down...")
        return 130
    raise ConfigurationError(f"Unknown command: {args.command!r}")


__all__ = ["build_request", "run_cli"]
