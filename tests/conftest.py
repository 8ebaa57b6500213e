import os
import tempfile

# Keep test runs from writing into the repository log directory.
os.environ.setdefault("WIKIDICT_LOG_DIR", tempfile.mkdtemp(prefix="wikidict-logs-"))

import pytest  # noqa: E402

from wikidict import logging_manager as log_mgr  # noqa: E402
from wikidict.config_manager import WikidictSettings  # noqa: E402
from wikidict.database import dispose_engines  # noqa: E402

ENVIRONMENT_KEYS = (
    "WIKIDICT_DATA_DIR",
    "WIKIDICT_CACHE_DIR",
    "WIKIDICT_OUTPUT_DIR",
    "WIKIDICT_MAX_WORKERS",
    "WIKIDICT_HEAVY_MAX_WORKERS",
    "WIKIDICT_USE_CACHE",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    for key in ENVIRONMENT_KEYS:
        monkeypatch.delenv(key, raising=False)
    log_mgr.clear_log_context()
    yield
    dispose_engines()


@pytest.fixture
def settings(tmp_path) -> WikidictSettings:
    return WikidictSettings(data_dir=tmp_path / "data", max_workers=2)
