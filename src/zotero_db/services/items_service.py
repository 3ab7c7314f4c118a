from __future__ import annotations

from datetime import datetime
from typing import cast

from zotero_db.db import Library
from zotero_db.entities import Item
from zotero_db.errors import EntryNotFoundError
from zotero_db.identifiers import LIBRARY_SCOPE, CollectionID, ItemID
from zotero_db.lookups import item_type_name
from zotero_db.models import ItemRow
from zotero_db.repositories import collections_repo, items_repo

Z_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_timestamp(value: str) -> datetime:
    return datetime.strptime(value, Z_DATE_FORMAT)


def _item_from_row(library: Library, row: ItemRow) -> Item:
    return Item(
        library=library,
        id=ItemID(cast(int, row.itemID)),
        type=item_type_name(library, row.itemTypeID),
        added=parse_timestamp(row.dateAdded),
        modified=parse_timestamp(row.dateModified),
        key=row.key,
        version=row.version,
        synced=bool(row.synced),
    )


def get_item(library: Library, item_id: ItemID) -> Item:
    with library.session() as session:
        row = items_repo.get_item(session, item_id=item_id.value)
    if row is None:
        raise EntryNotFoundError(item_id, LIBRARY_SCOPE)
    return _item_from_row(library, row)


def list_items(library: Library) -> list[Item]:
    with library.session() as session:
        rows = items_repo.list_items(session)
    return [_item_from_row(library, row) for row in rows]


def list_collection_item_ids(library: Library, collection_id: CollectionID) -> list[ItemID]:
    with library.session() as session:
        ids = collections_repo.list_collection_item_ids(session, collection_id=collection_id.value)
    return [ItemID(i) for i in ids]


def list_items_in_collection(library: Library, collection_id: CollectionID) -> list[Item]:
    # Membership first, then filter the full listing so items keep its order.
    members = set(list_collection_item_ids(library, collection_id))
    return [item for item in list_items(library) if item.id in members]
