"""Locate, and optionally download, the raw wiktextract dump of an edition."""

from __future__ import annotations

import gzip
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional

import requests

from . import logging_manager as log_mgr
from .errors import DatasetNotFoundError, DownloadError

logger = log_mgr.get_logger().getChild("datasets")

KAIKKI_ROOT = "https://kaikki.org"
DATASET_FILENAME_TEMPLATE = "{edition}-extract.jsonl"
DOWNLOAD_TIMEOUT_SECONDS = 60.0
CHUNK_SIZE = 1 << 20


def dataset_url(edition: str) -> str:
    """Return the url of the raw (unfiltered) dump of ``edition``."""

    if edition == "en":
        return f"{KAIKKI_ROOT}/dictionary/raw-wiktextract-data.jsonl.gz"
    return f"{KAIKKI_ROOT}/{edition}wiktionary/raw-wiktextract-data.jsonl.gz"


class DatasetLocator:
    """Resolve ``kaikki_dir/<edition>-extract.jsonl`` (or ``.jsonl.gz``)."""

    def __init__(
        self,
        kaikki_dir: Path,
        *,
        download: bool = False,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.kaikki_dir = Path(kaikki_dir)
        self.download = download
        self._session = session

    def candidates(self, edition: str) -> List[Path]:
        base = self.kaikki_dir / DATASET_FILENAME_TEMPLATE.format(edition=edition)
        return [base, base.with_name(base.name + ".gz")]

    def __call__(self, edition: str) -> Path:
        return self.locate(edition)

    def locate(self, edition: str) -> Path:
        for candidate in self.candidates(edition):
            if candidate.exists():
                return candidate
        target = self.candidates(edition)[0]
        if not self.download:
            raise DatasetNotFoundError(
                f"No dataset for edition {edition!r} at {target} (enable download to fetch it)"
            )
        download_dataset(edition, target, session=self._session)
        return target


def download_dataset(
    edition: str,
    destination: Path,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = DOWNLOAD_TIMEOUT_SECONDS,
) -> Path:
    """Download the gzip dump of ``edition`` and write it decompressed to ``destination``."""

    url = dataset_url(edition)
    http = session or requests.Session()
    destination.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Downloading %s", url, extra={"event": "datasets.download.start", "edition": edition})

    handle, tmp_name = tempfile.mkstemp(
        prefix=f".{destination.name}.", dir=destination.parent
    )
    os.close(handle)
    try:
        with http.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            last_modified = response.headers.get("last-modified")
            if last_modified:
                logger.info("Download was last modified: %s", last_modified)
            # The server sends no content-encoding header, so decompress by hand.
            response.raw.decode_content = False
            with gzip.GzipFile(fileobj=response.raw) as decoder, open(tmp_name, "wb") as output:
                shutil.copyfileobj(decoder, output, CHUNK_SIZE)
        os.replace(tmp_name, destination)
    except (requests.RequestException, OSError, EOFError) as exc:
        raise DownloadError(f"Failed to download {url}: {exc}") from exc
    finally:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)

    logger.info(
        "Downloaded %s",
        destination,
        extra={"event": "datasets.download.complete", "edition": edition},
    )
    return destination


__all__ = ["DatasetLocator", "dataset_url", "download_dataset"]
