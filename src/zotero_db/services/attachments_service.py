from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from zotero_db.config import settings
from zotero_db.db import Library
from zotero_db.entities import Attachment
from zotero_db.errors import EntryNotFoundError
from zotero_db.identifiers import LIBRARY_SCOPE, AttachmentID, CollectionID, ItemID
from zotero_db.repositories import attachments_repo, items_repo
from zotero_db.services import items_service

logger = logging.getLogger(__name__)


def resolve_storage_path(library: Library, item_key: str, stored_path: str | None) -> Path | None:
    """Map ``storage:<remainder>`` to ``<store dir>/storage/<item key>/<remainder>``.

    Linked files and URLs keep no path relative to the store and map to None.
    """
    prefix = settings.storage_prefix
    if stored_path is None or not stored_path.startswith(prefix):
        return None
    remainder = stored_path[len(prefix) :]
    return library.storage_dir.joinpath(item_key, *PurePosixPath(remainder).parts)


def get_attachment(library: Library, attachment_id: AttachmentID) -> Attachment:
    with library.session() as session:
        key = items_repo.get_item_key(session, item_id=attachment_id.value)
        row = (
            attachments_repo.get_attachment(session, item_id=attachment_id.value)
            if key is not None
            else None
        )
    if key is None or row is None:
        raise EntryNotFoundError(attachment_id, LIBRARY_SCOPE)

    return Attachment(
        library=library,
        id=attachment_id,
        parent=ItemID(row.parentItemID) if row.parentItemID is not None else None,
        linkmode=row.linkMode,
        mime=row.contentType,
        file=resolve_storage_path(library, key, row.path),
        sync_state=row.syncState,
        mtime=row.storageModTime,
        hash=row.storageHash,
    )


def list_attachments_for_item(library: Library, item_id: ItemID) -> list[Attachment]:
    with library.session() as session:
        ids = attachments_repo.list_attachment_ids_for_item(session, parent_item_id=item_id.value)
    return [get_attachment(library, AttachmentID(i)) for i in ids]


def list_attachments_in_collection(
    library: Library, collection_id: CollectionID
) -> list[Attachment]:
    out: list[Attachment] = []
    for item in items_service.list_items_in_collection(library, collection_id):
        out.extend(list_attachments_for_item(library, item.id))
    return out


def list_attachments(library: Library) -> list[Attachment]:
    out: list[Attachment] = []
    for item in items_service.list_items(library):
        out.extend(list_attachments_for_item(library, item.id))
    logger.debug("collected %d attachments from %s", len(out), library)
    return out
