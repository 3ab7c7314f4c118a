"""Public entry points.

Every function takes an optional ``library``; when omitted, entities passed in
answer for their own library and everything else goes to the default library
(``~/Zotero/zotero.sqlite`` unless configured otherwise).
"""

from __future__ import annotations

from typing import cast, overload

from zotero_db.db import Library, resolve_library
from zotero_db.entities import Attachment, Collection, Item
from zotero_db.identifiers import AttachmentID, CollectionID, ItemID, TagID
from zotero_db.scope import Scope, ScopeKind, ScopeTarget
from zotero_db.services import (
    attachments_service,
    collections_service,
    items_service,
    metadata_service,
    tags_service,
)
from zotero_db.services.metadata_service import DOI_FIELD, URL_FIELD, ItemInfo


def _library_for(target: ScopeTarget, library: Library | None) -> Library:
    if library is None and isinstance(target, (Collection, Item)):
        return target.library
    return resolve_library(library)


def collections(library: Library | None = None) -> list[Collection]:
    """All collections of the library, linked to parents and children, by id."""
    return collections_service.list_collections(resolve_library(library))


def collection(target: CollectionID | str, library: Library | None = None) -> Collection:
    """One collection, by id or by display name (first match)."""
    lib = resolve_library(library)
    if isinstance(target, str):
        return collections_service.get_collection_by_name(lib, target)
    return collections_service.get_collection(lib, target)


def item(item_id: ItemID, library: Library | None = None) -> Item:
    return items_service.get_item(resolve_library(library), item_id)


def attachment(attachment_id: AttachmentID, library: Library | None = None) -> Attachment:
    return attachments_service.get_attachment(resolve_library(library), attachment_id)


def items(
    target: Collection | CollectionID | None = None, library: Library | None = None
) -> list[Item]:
    """Items of the whole library, or of one collection."""
    lib = _library_for(target, library)
    scope = Scope.of(target)
    if scope.kind is ScopeKind.COLLECTION:
        collection_id = cast(CollectionID, scope.collection)
        return items_service.list_items_in_collection(lib, collection_id)
    if scope.kind is ScopeKind.LIBRARY:
        return items_service.list_items(lib)
    raise TypeError("items() is scoped to a library or a collection")


def attachments(target: ScopeTarget = None, library: Library | None = None) -> list[Attachment]:
    """Attachments of an item, of every item in a collection, or of the library.

    Collection and library results follow item order, then each item's own
    attachment order.
    """
    lib = _library_for(target, library)
    scope = Scope.of(target)
    if scope.kind is ScopeKind.ITEM:
        item_id = cast(ItemID, scope.item)
        if not isinstance(target, Item):
            # Fails with EntryNotFoundError for an unknown item.
            items_service.get_item(lib, item_id)
        return attachments_service.list_attachments_for_item(lib, item_id)
    if scope.kind is ScopeKind.COLLECTION:
        collection_id = cast(CollectionID, scope.collection)
        return attachments_service.list_attachments_in_collection(lib, collection_id)
    return attachments_service.list_attachments(lib)


@overload
def tags(target: None = None, library: Library | None = None) -> dict[TagID, str]: ...
@overload
def tags(target: Item | ItemID, library: Library | None = None) -> list[str]: ...
def tags(
    target: Item | ItemID | None = None, library: Library | None = None
) -> dict[TagID, str] | list[str]:
    """Every tag of the library keyed by id, or the tag names of one item."""
    lib = _library_for(target, library)
    scope = Scope.of(target)
    if scope.kind is ScopeKind.ITEM:
        return tags_service.list_item_tags(lib, cast(ItemID, scope.item))
    if scope.kind is ScopeKind.LIBRARY:
        return tags_service.list_tags(lib)
    raise TypeError("tags() is scoped to a library or an item")


@overload
def iteminfo(target: None = None, library: Library | None = None) -> dict[ItemID, ItemInfo]: ...
@overload
def iteminfo(target: Item | ItemID, library: Library | None = None) -> ItemInfo: ...
@overload
def iteminfo(
    target: Collection | CollectionID, library: Library | None = None
) -> dict[ItemID, ItemInfo]: ...
def iteminfo(
    target: ScopeTarget = None, library: Library | None = None
) -> ItemInfo | dict[ItemID, ItemInfo]:
    """Field name -> value metadata.

    For an item, its own mapping; for a collection, the mappings of its items
    in collection order; for the library, the mappings of every item that has
    any metadata.
    """
    lib = _library_for(target, library)
    scope = Scope.of(target)
    if scope.kind is ScopeKind.ITEM:
        return metadata_service.item_info(lib, cast(ItemID, scope.item))
    if scope.kind is ScopeKind.COLLECTION:
        collection_id = cast(CollectionID, scope.collection)
        return metadata_service.collection_item_info(lib, collection_id)
    return metadata_service.library_item_info(lib)


def doi(item: Item) -> str | None:
    """The recorded DOI of ``item``, if any."""
    return metadata_service.item_field(item.library, item.id, DOI_FIELD)


def url(item: Item) -> str | None:
    """The recorded URL of ``item``, if any."""
    return metadata_service.item_field(item.library, item.id, URL_FIELD)
