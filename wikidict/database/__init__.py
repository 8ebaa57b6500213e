"""SQLAlchemy database layer for the record cache.

Provides per-file engines, a transactional connection scope and the
declarative base used by the cached record table.
"""

from .base import Base
from .engine import begin_connection, dispose_engines, get_engine
from .models import CachedRecordModel

__all__ = ["Base", "CachedRecordModel", "begin_connection", "dispose_engines", "get_engine"]
