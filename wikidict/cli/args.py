"""Argument parsing helpers for the wikidict CLI."""

from __future__ import annotations

import argparse
from typing import Any, Dict, List, Optional, Sequence

from ..config_manager import FILTER_FIELDS, FilterRule


def _filter_rule(raw: str) -> FilterRule:
    try:
        return FilterRule.parse(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected FIELD=VALUE with FIELD in {', '.join(FILTER_FIELDS)} ({exc})"
        ) from None


def _code_list(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _add_shared_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "--config",
        default=None,
        help=(
            "Path to a configuration override JSON file (defaults to conf/config.local.json "
            "if present)."
        ),
    )
    parser.add_argument("--data-dir", help="Root directory for datasets, caches and outputs.")
    parser.add_argument("--cache-dir", help="Override the record cache directory.")
    parser.add_argument("--output-dir", help="Override the dictionary output directory.")
    parser.add_argument(
        "--max-workers",
        type=int,
        help="Number of worker threads used for cache preparation and release builds.",
    )
    parser.add_argument(
        "--heavy-max-workers",
        type=int,
        help="Worker ceiling for memory-heavy dictionary kinds.",
    )
    parser.add_argument(
        "--no-cache",
        dest="use_cache",
        action="store_const",
        const=False,
        help="Stream the raw dataset instead of the record cache.",
    )
    parser.add_argument(
        "--download",
        action="store_const",
        const=True,
        help="Download missing datasets from kaikki.org.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging output.")
    return parser


def _add_build_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "--filter",
        dest="filters",
        action="append",
        type=_filter_rule,
        metavar="FIELD=VALUE",
        help="Only keep entries whose FIELD equals VALUE (repeatable).",
    )
    parser.add_argument(
        "--reject",
        dest="rejects",
        action="append",
        type=_filter_rule,
        metavar="FIELD=VALUE",
        help="Drop entries whose FIELD equals VALUE (repeatable).",
    )
    parser.add_argument(
        "--first",
        type=int,
        help="Stop after this many accepted entries per edition.",
    )
    parser.add_argument(
        "--save-temps",
        action="store_const",
        const=True,
        help="Write post-processed intermediate items as tidy.jsonl.",
    )
    parser.add_argument(
        "--skip-output",
        action="store_const",
        const=True,
        help="Build the dictionary without writing the archive.",
    )
    parser.add_argument(
        "--diagnostics",
        dest="write_diagnostics",
        action="store_const",
        const=True,
        help="Write a tags.json report of accepted and rejected tags.",
    )
    parser.add_argument(
        "--pretty",
        action="store_const",
        const=True,
        help="Indent JSON written into archives.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        const=True,
        help="Suppress progress messages.",
    )
    return _add_shared_arguments(parser)


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI parser with one sub-command per operation."""

    parser = argparse.ArgumentParser(
        prog="wikidict",
        description="Build Yomitan dictionaries from wiktextract data.",
        allow_abbrev=False,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    glossary = subparsers.add_parser(
        "glossary",
        help="Translations of an edition's own words into a target language.",
        allow_abbrev=False,
    )
    glossary.add_argument("edition", help="Edition (and source language) to scan.")
    glossary.add_argument("target", help="Language of the translations.")
    _add_build_arguments(glossary)

    extended = subparsers.add_parser(
        "glossary-extended",
        help="Pair two foreign languages through the translation tables of editions.",
        allow_abbrev=False,
    )
    extended.add_argument("edition", help="Pivot edition, or 'all' for every edition.")
    extended.add_argument("source", help="Language whose words become definitions.")
    extended.add_argument("target", help="Language whose words become headwords.")
    _add_build_arguments(extended)

    ipa = subparsers.add_parser(
        "ipa",
        help="IPA transcriptions of one language from one edition.",
        allow_abbrev=False,
    )
    ipa.add_argument("source", help="Language of the transcribed words.")
    ipa.add_argument("target", help="Edition to read the transcriptions from.")
    _add_build_arguments(ipa)

    merged = subparsers.add_parser(
        "ipa-merged",
        help="IPA transcriptions of one language merged across editions.",
        allow_abbrev=False,
    )
    merged.add_argument("language", help="Language of the transcribed words.")
    merged.add_argument(
        "--editions",
        type=_code_list,
        help="Comma-separated editions to merge (defaults to every edition).",
    )
    _add_build_arguments(merged)

    cache = subparsers.add_parser(
        "cache",
        help="Populate the record cache of one or more editions.",
        allow_abbrev=False,
    )
    cache.add_argument("editions", nargs="+", help="Editions to import.")
    _add_shared_arguments(cache)

    release = subparsers.add_parser(
        "release",
        help="Build every valid dictionary of a release.",
        allow_abbrev=False,
    )
    release.add_argument("--editions", type=_code_list, help="Comma-separated editions.")
    release.add_argument("--kinds", type=_code_list, help="Comma-separated dictionary kinds.")
    release.add_argument("--languages", type=_code_list, help="Comma-separated languages.")
    _add_build_arguments(release)

    return parser


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse ``argv`` using the sub-command parser."""

    return build_cli_parser().parse_args(argv)


SETTINGS_ARGUMENTS = (
    "data_dir",
    "cache_dir",
    "output_dir",
    "max_workers",
    "heavy_max_workers",
    "use_cache",
    "download",
    "filters",
    "rejects",
    "first",
    "save_temps",
    "skip_output",
    "write_diagnostics",
    "pretty",
    "quiet",
)


def settings_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Return the settings explicitly set on the command line."""

    overrides: Dict[str, Any] = {}
    for name in SETTINGS_ARGUMENTS:
        value = getattr(args, name, None)
        if value is not None:
            overrides[name] = value
    return overrides


__all__ = ["build_cli_parser", "parse_cli_args", "settings_overrides"]
