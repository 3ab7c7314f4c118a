from __future__ import annotations

from zotero_db.db import Library
from zotero_db.identifiers import ItemID, TagID
from zotero_db.repositories import tags_repo


def list_tags(library: Library) -> dict[TagID, str]:
    with library.session() as session:
        rows = tags_repo.list_tags(session)
    return {TagID(int(row.tagID or 0)): row.name for row in rows}


def list_item_tags(library: Library, item_id: ItemID) -> list[str]:
    all_tags = list_tags(library)
    with library.session() as session:
        tag_ids = tags_repo.list_item_tag_ids(session, item_id=item_id.value)
    return [all_tags[TagID(tag_id)] for tag_id in tag_ids]
