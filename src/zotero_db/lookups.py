"""Process-wide code -> name tables (itemTypes, fields).

Each table is loaded with a single query the first time it is needed and kept
for the rest of the process. Changes to the underlying table after that are
not seen.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable

from sqlmodel import Session

from zotero_db.db import Library
from zotero_db.entities import UNKNOWN_ITEM_TYPE
from zotero_db.repositories import lookups_repo

logger = logging.getLogger(__name__)


class LookupTable:
    def __init__(
        self,
        name: str,
        loader: Callable[[Session], Iterable[tuple[int, str]]],
        *,
        default: str | None = None,
    ) -> None:
        self.name = name
        self._loader = loader
        self._default = default
        self._codes: dict[int, str] | None = None
        self._lock = threading.Lock()

    def table(self, library: Library) -> dict[int, str]:
        codes = self._codes
        if codes is not None:
            return codes
        with self._lock:
            if self._codes is None:
                with library.session() as session:
                    self._codes = dict(self._loader(session))
                logger.debug("loaded %d %s codes from %s", len(self._codes), self.name, library)
            return self._codes

    def resolve(self, library: Library, code: int) -> str:
        name = self.table(library).get(code)
        if name is not None:
            return name
        if self._default is None:
            raise KeyError(f"unknown {self.name} code {code}")
        logger.warning("unknown %s code %s, using %r", self.name, code, self._default)
        return self._default

    def clear(self) -> None:
        with self._lock:
            self._codes = None


ITEM_TYPES = LookupTable("itemType", lookups_repo.list_item_types, default=UNKNOWN_ITEM_TYPE)
FIELDS = LookupTable("field", lookups_repo.list_fields)


def item_type_name(library: Library, code: int) -> str:
    return ITEM_TYPES.resolve(library, code)


def field_name(library: Library, code: int) -> str:
    return FIELDS.resolve(library, code)
