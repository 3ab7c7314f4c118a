from __future__ import annotations

from pathlib import Path

from zotero_db.identifiers import Identifier, LibraryID


def _article(kind: str) -> str:
    return "an" if kind[:1].upper() in "AEIOU" else "a"


class ZoteroDBError(Exception):
    """Base class for errors raised by zotero_db."""


class EntryNotFoundError(ZoteroDBError, LookupError):
    """A lookup by identifier or name matched no row.

    ``needle`` is the missing identifier, or ``(kind, name)`` for lookups by
    name; ``within`` is the narrowest scope the lookup was restricted to.
    """

    def __init__(self, needle: Identifier | tuple[str, str], within: Identifier) -> None:
        self.needle = needle
        self.within = within
        super().__init__(self._describe())

    def _describe(self) -> str:
        if isinstance(self.needle, Identifier):
            kind = self.needle.kind
            what = f"could not find {_article(kind)} {kind} with ID #{self.needle.value}"
        else:
            kind, name = self.needle
            what = f"could not find {_article(kind)} {kind} named {name!r}"
        if isinstance(self.within, LibraryID):
            return f"{what} in the library"
        return f"{what} within {self.within.kind} #{self.within.value}"


class StoreNotFoundError(ZoteroDBError, FileNotFoundError):
    """The conventional store file for the default library does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"no Zotero database found at {path}")


class CollectionHierarchyError(ZoteroDBError):
    """Collection rows whose parent chain never reaches a root.

    Raised when a resolution pass over the pending rows makes no progress,
    which happens for parent cycles and for parents missing from the store.
    """

    def __init__(self, unresolved: list[int]) -> None:
        self.unresolved = unresolved
        ids = ", ".join(f"#{i}" for i in unresolved)
        super().__init__(f"collections never reach a root collection: {ids}")
