"""SQLAlchemy engine registry and connection helpers.

Each edition's record cache is its own SQLite file, so engines are kept per
database path rather than as a single global engine.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator

from sqlalchemy import Connection, Engine, create_engine, event

_engines: Dict[str, Engine] = {}
_lock = threading.Lock()


def _database_url(path: Path) -> str:
    return f"sqlite:///{path}"


def _configure_sqlite(dbapi_connection, _connection_record) -> None:  # pragma: no cover - driver hook
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA journal_mode = WAL;")
        cursor.execute("PRAGMA synchronous = NORMAL;")
    finally:
        cursor.close()


def get_engine(path: Path) -> Engine:
    """Return the engine for the SQLite database at ``path``, creating it once."""

    key = str(Path(path).resolve())
    with _lock:
        engine = _engines.get(key)
        if engine is None:
            engine = create_engine(
                _database_url(Path(key)),
                connect_args={"check_same_thread": False},
                pool_pre_ping=True,
                echo=False,
            )
            event.listen(engine, "connect", _configure_sqlite)
            _engines[key] = engine
    return engine


@contextmanager
def begin_connection(path: Path) -> Iterator[Connection]:
    """Provide a transactional scope: commit on success, roll back on error."""

    with get_engine(path).begin() as connection:
        yield connection


def dispose_engines() -> None:
    """Dispose every registered engine and clear the registry."""

    with _lock:
        for engine in _engines.values():
            engine.dispose()
        _engines.clear()
