from __future__ import annotations

import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path

from sqlalchemy import Engine
from sqlalchemy.pool import QueuePool
from sqlmodel import Session, create_engine

from zotero_db.config import settings
from zotero_db.db_urls import build_sqlite_uri
from zotero_db.errors import StoreNotFoundError

logger = logging.getLogger(__name__)


def _create_engine(path: Path, *, read_only: bool) -> Engine:
    uri = build_sqlite_uri(path, read_only=read_only)

    def _connect() -> sqlite3.Connection:
        return sqlite3.connect(uri, uri=True, check_same_thread=False)

    # The store is reached through `creator`; the URL only selects the dialect.
    return create_engine(
        "sqlite://", creator=_connect, poolclass=QueuePool, echo=settings.sql_echo
    )


class Library:
    """An opened Zotero store.

    Holds the engine every query against this store goes through. A library
    owns no entities and caches no rows; it is only the capability to query.
    """

    def __init__(self, path: Path | str, *, read_only: bool | None = None) -> None:
        ro = settings.read_only if read_only is None else read_only
        self._path = Path(path).expanduser().resolve()
        self._engine = _create_engine(self._path, read_only=ro)
        logger.debug("opened zotero store %s (read_only=%s)", self._path, ro)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def path(self) -> Path:
        return self._path

    @property
    def storage_dir(self) -> Path:
        return self._path.parent / "storage"

    @contextmanager
    def session(self) -> Iterator[Session]:
        with Session(self._engine) as session:
            yield session

    def dispose(self) -> None:
        self._engine.dispose()

    def __repr__(self) -> str:
        return f"Library({str(self._path)!r})"


def find_zotero_db() -> Path:
    path = settings.default_store_path()
    if not path.is_file():
        raise StoreNotFoundError(path)
    return path


_DEFAULT_LIBRARY_LOCK = threading.Lock()


@lru_cache(maxsize=1)
def _open_default_library() -> Library:
    path = find_zotero_db()
    logger.info("using default zotero library at %s", path)
    return Library(path)


def default_library() -> Library:
    # Opened at most once per process; a failed attempt is not cached.
    with _DEFAULT_LIBRARY_LOCK:
        return _open_default_library()


def reset_default_library() -> None:
    with _DEFAULT_LIBRARY_LOCK:
        if _open_default_library.cache_info().currsize:
            _open_default_library().dispose()
        _open_default_library.cache_clear()


def resolve_library(library: Library | None) -> Library:
    return default_library() if library is None else library
