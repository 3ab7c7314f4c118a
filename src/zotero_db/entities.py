from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, overload

from zotero_db.identifiers import AttachmentID, CollectionID, ItemID

if TYPE_CHECKING:
    from zotero_db.db import Library


# Item type of rows whose itemTypeID is missing from itemTypes.
UNKNOWN_ITEM_TYPE = "unknown"


@dataclass(eq=False)
class Collection:
    library: Library = field(repr=False)
    id: CollectionID
    name: str
    key: str
    # parent/children are bound by collections_service.build_collection_forest;
    # c.parent is p  <=>  c in p.children.
    parent: Collection | None = None
    children: list[Collection] = field(default_factory=list)

    def __repr__(self) -> str:
        out = f"Collection(#{self.id.value}, {self.name}"
        if self.parent is not None:
            out += f", parent = {self.parent.name}#{self.parent.id.value}"
        if self.children:
            names = ", ".join(f"{c.name}#{c.id.value}" for c in self.children)
            out += f", children = [{names}]"
        return out + ")"

    def __iter__(self) -> Iterator[Item]:
        from zotero_db.services import items_service

        return iter(items_service.list_items_in_collection(self.library, self.id))


@dataclass(frozen=True)
class Item:
    library: Library = field(repr=False, compare=False)
    id: ItemID
    type: str
    added: datetime
    modified: datetime
    key: str
    version: int
    synced: bool


@dataclass(frozen=True)
class Attachment:
    library: Library = field(repr=False, compare=False)
    id: AttachmentID
    parent: ItemID | None
    linkmode: int
    mime: str
    # Only set for files kept in the library's storage directory.
    file: Path | None
    sync_state: int
    mtime: int | None = None
    hash: str | None = None


@overload
def identifier_of(entity: Collection) -> CollectionID: ...
@overload
def identifier_of(entity: Item) -> ItemID: ...
@overload
def identifier_of(entity: Attachment) -> AttachmentID: ...
def identifier_of(entity: Collection | Item | Attachment) -> CollectionID | ItemID | AttachmentID:
    return entity.id
