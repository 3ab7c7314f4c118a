"""Per-item field/value metadata.

``itemData`` links an item and a field code to a row of ``itemDataValues``.
The library-wide form loads the whole value table once and joins in memory;
the per-item form fetches only the values that item references.
"""

from __future__ import annotations

import logging

from zotero_db.db import Library
from zotero_db.identifiers import CollectionID, ItemID
from zotero_db.lookups import field_name
from zotero_db.repositories import item_data_repo
from zotero_db.services import items_service

logger = logging.getLogger(__name__)

ItemInfo = dict[str, str]

DOI_FIELD = "DOI"
URL_FIELD = "url"


def library_item_info(library: Library) -> dict[ItemID, ItemInfo]:
    with library.session() as session:
        values = item_data_repo.list_values(session)
        rows = item_data_repo.list_item_data(session)

    info: dict[ItemID, ItemInfo] = {}
    for row in rows:
        fields = info.setdefault(ItemID(row.itemID), {})
        fields[field_name(library, row.fieldID)] = values[row.valueID]
    logger.debug("joined %d itemData rows for %d items", len(rows), len(info))
    return info


def item_info(library: Library, item_id: ItemID) -> ItemInfo:
    with library.session() as session:
        rows = item_data_repo.list_item_data_for_item(session, item_id=item_id.value)
        values = item_data_repo.get_values(session, value_ids={row.valueID for row in rows})
    return {field_name(library, row.fieldID): values[row.valueID] for row in rows}


def collection_item_info(library: Library, collection_id: CollectionID) -> dict[ItemID, ItemInfo]:
    member_ids = items_service.list_collection_item_ids(library, collection_id)
    all_info = library_item_info(library)
    return {item_id: all_info.get(item_id, {}) for item_id in member_ids}


def item_field(library: Library, item_id: ItemID, name: str) -> str | None:
    return item_info(library, item_id).get(name)
