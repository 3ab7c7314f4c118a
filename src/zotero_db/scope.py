from __future__ import annotations

import enum
from dataclasses import dataclass

from zotero_db.entities import Collection, Item
from zotero_db.identifiers import CollectionID, ItemID


class ScopeKind(enum.Enum):
    LIBRARY = "library"
    COLLECTION = "collection"
    ITEM = "item"


ScopeTarget = Collection | CollectionID | Item | ItemID | None


@dataclass(frozen=True)
class Scope:
    """What a query ranges over: the whole library, one collection or one item."""

    kind: ScopeKind
    collection: CollectionID | None = None
    item: ItemID | None = None

    @classmethod
    def of(cls, target: ScopeTarget) -> "Scope":
        if target is None:
            return cls(ScopeKind.LIBRARY)
        if isinstance(target, Collection):
            return cls(ScopeKind.COLLECTION, collection=target.id)
        if isinstance(target, CollectionID):
            return cls(ScopeKind.COLLECTION, collection=target)
        if isinstance(target, Item):
            return cls(ScopeKind.ITEM, item=target.id)
        if isinstance(target, ItemID):
            return cls(ScopeKind.ITEM, item=target)
        raise TypeError(f"cannot scope a query to {type(target).__name__}")
