"""Read-only access to Zotero SQLite libraries.

    >>> from zotero_db import Library, CollectionID, collections, items
    >>> lib = Library("/home/nostradamus/Zotero/zotero.sqlite")
    >>> collections(lib)
    [Collection(#1, Everything, children = [Psychic powers#2, Time travel#3]), ...]
    >>> items(CollectionID(2), lib)
    [Item(id=Item#22, type='journalArticle', ...), ...]
"""

from zotero_db.api import (
    attachment,
    attachments,
    collection,
    collections,
    doi,
    item,
    iteminfo,
    items,
    tags,
    url,
)
from zotero_db.db import Library, default_library
from zotero_db.entities import UNKNOWN_ITEM_TYPE, Attachment, Collection, Item, identifier_of
from zotero_db.errors import (
    CollectionHierarchyError,
    EntryNotFoundError,
    StoreNotFoundError,
    ZoteroDBError,
)
from zotero_db.identifiers import (
    AttachmentID,
    CollectionID,
    Identifier,
    ItemID,
    LibraryID,
    TagID,
)
from zotero_db.scope import Scope, ScopeKind

__all__ = [
    "Attachment",
    "AttachmentID",
    "Collection",
    "CollectionHierarchyError",
    "CollectionID",
    "EntryNotFoundError",
    "Identifier",
    "Item",
    "ItemID",
    "Library",
    "LibraryID",
    "Scope",
    "ScopeKind",
    "StoreNotFoundError",
    "TagID",
    "UNKNOWN_ITEM_TYPE",
    "ZoteroDBError",
    "attachment",
    "attachments",
    "collection",
    "collections",
    "default_library",
    "doi",
    "identifier_of",
    "item",
    "iteminfo",
    "items",
    "tags",
    "url",
]
