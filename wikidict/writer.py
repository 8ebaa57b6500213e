"""Write labelled Yomitan entries to a dictionary archive."""

from __future__ import annotations

import json
import os
import tempfile
import zipfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Protocol, Sequence

from . import logging_manager as log_mgr
from .config_manager.settings import WikidictSettings
from .errors import OutputWriteError
from .languages import language_name
from .models.yomitan import TERM_LABEL, TERM_META_LABEL, LabelledEntries, YomitanEntry

logger = log_mgr.get_logger().getChild("writer")

BANK_SIZE = 10_000
BANK_PREFIXES: Dict[str, str] = {
    TERM_LABEL: "term_bank",
    TERM_META_LABEL: "term_meta_bank",
}
DOWNLOAD_BASE_URL = "https://huggingface.co/datasets/daxida/test-dataset/resolve/main"


class OutputWriter(Protocol):
    """Receives the finished entries of one (source, target) bucket."""

    def write(
        self,
        source: str,
        target: str,
        settings: WikidictSettings,
        dict_name: str,
        labelled: Sequence[LabelledEntries],
    ) -> Optional[Path]:
        ...


def download_url(dict_name: str, source: str, target: str) -> str:
    return f"{DOWNLOAD_BASE_URL}/dict/{target}/{source}/{dict_name}.zip?download=true"


def index_url(dict_name: str) -> str:
    return f"{DOWNLOAD_BASE_URL}/index/{dict_name}-index?download=true"


def build_index(
    dict_name: str,
    source: str,
    target: str,
    *,
    revision: Optional[str] = None,
) -> Dict[str, Any]:
    """Return the ``index.json`` payload of a dictionary archive."""

    if revision is None:
        # Yomitan compares revisions as dot separated dates.
        revision = datetime.now(timezone.utc).strftime("%Y.%m.%d")
    return {
        "title": dict_name,
        "format": 3,
        "revision": revision,
        "sequenced": True,
        "author": "wikidict contributors",
        "description": (
            f"{language_name(source)} to {language_name(target)} dictionary generated "
            "from Wiktionary data, via Kaikki and wikidict."
        ),
        "attribution": "https://kaikki.org/",
        "sourceLanguage": source,
        "targetLanguage": target,
        "isUpdatable": True,
        "indexUrl": index_url(dict_name),
        "downloadUrl": download_url(dict_name, source, target),
    }


def iter_banks(
    label: str, entries: Sequence[YomitanEntry], *, bank_size: int = BANK_SIZE
) -> Iterator[tuple[str, List[Any]]]:
    """Yield ``(file name, rows)`` chunks for one label."""

    prefix = BANK_PREFIXES.get(label)
    if prefix is None:
        raise OutputWriteError(f"Unknown output label: {label!r}")
    for number, start in enumerate(range(0, len(entries), bank_size), start=1):
        chunk = entries[start : start + bank_size]
        rows = [entry.to_row(sequence=start + offset) for offset, entry in enumerate(chunk)]
        yield f"{prefix}_{number}.json", rows


class YomitanZipWriter:
    """Write one ``<dict_name>.zip`` per bucket into ``output_dir``."""

    def __init__(self, output_dir: Path, *, bank_size: int = BANK_SIZE) -> None:
        self.output_dir = Path(output_dir)
        self.bank_size = bank_size

    def write(
        self,
        source: str,
        target: str,
        settings: WikidictSettings,
        dict_name: str,
        labelled: Sequence[LabelledEntries],
    ) -> Optional[Path]:
        if not any(item.entries for item in labelled):
            return None

        indent = 2 if settings.pretty else None
        path = self.output_dir / f"{dict_name}.zip"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            handle, tmp_name = tempfile.mkstemp(
                prefix=f".{dict_name}.", suffix=".zip", dir=self.output_dir
            )
            os.close(handle)
            try:
                with zipfile.ZipFile(tmp_name, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                    archive.writestr(
                        "index.json",
                        json.dumps(build_index(dict_name, source, target), ensure_ascii=False, indent=indent),
                    )
                    for item in labelled:
                        for filename, rows in iter_banks(
                            item.label, item.entries, bank_size=self.bank_size
                        ):
                            archive.writestr(
                                filename, json.dumps(rows, ensure_ascii=False, indent=indent)
                            )
                os.replace(tmp_name, path)
            finally:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
        except OSError as exc:
            raise OutputWriteError(f"Failed to write {path}: {exc}") from exc

        logger.info(
            "Wrote %s",
            path,
            extra={"event": "writer.archive.written", "source": source, "target": target},
        )
        return path


__all__ = [
    "BANK_SIZE",
    "OutputWriter",
    "YomitanZipWriter",
    "build_index",
    "download_url",
    "index_url",
    "iter_banks",
]
