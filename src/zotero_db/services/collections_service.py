from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import cast

from zotero_db.db import Library
from zotero_db.entities import Collection
from zotero_db.errors import CollectionHierarchyError, EntryNotFoundError
from zotero_db.identifiers import LIBRARY_SCOPE, CollectionID
from zotero_db.models import CollectionRow
from zotero_db.repositories import collections_repo

logger = logging.getLogger(__name__)


def build_collection_forest(library: Library, rows: Iterable[CollectionRow]) -> list[Collection]:
    """Link flat collection rows into a forest, sorted by collection id.

    Rows may arrive in any order. Each pass over the pending rows resolves every
    row that is a root or whose parent is already resolved, binding it to that
    parent and appending it to the parent's children. A pass that resolves
    nothing means the remaining rows can never be rooted.
    """
    pending = list(rows)
    resolved: dict[int, Collection] = {}
    passes = 0

    while pending:
        passes += 1
        still_pending: list[CollectionRow] = []
        for row in pending:
            parent_id = row.parentCollectionID
            if parent_id is not None and parent_id not in resolved:
                still_pending.append(row)
                continue

            collection_id = cast(int, row.collectionID)
            parent = resolved[parent_id] if parent_id is not None else None
            collection = Collection(
                library=library,
                id=CollectionID(collection_id),
                name=row.collectionName,
                key=row.key,
                parent=parent,
            )
            resolved[collection_id] = collection
            if parent is not None:
                parent.children.append(collection)

        if len(still_pending) == len(pending):
            unresolved = sorted(int(r.collectionID or 0) for r in still_pending)
            logger.warning("unrooted collections in %s: %s", library, unresolved)
            raise CollectionHierarchyError(unresolved)
        pending = still_pending

    # Children are appended in resolution order, which depends on row order.
    for collection in resolved.values():
        collection.children.sort(key=lambda c: c.id)

    logger.debug("resolved %d collections in %d passes", len(resolved), passes)
    return [resolved[cid] for cid in sorted(resolved)]


def list_collections(library: Library) -> list[Collection]:
    with library.session() as session:
        rows = collections_repo.list_collections(session)
    return build_collection_forest(library, rows)


def get_collection(library: Library, collection_id: CollectionID) -> Collection:
    # Built from the whole forest so that parent and children are bound.
    for collection in list_collections(library):
        if collection.id == collection_id:
            return collection
    raise EntryNotFoundError(collection_id, LIBRARY_SCOPE)


def get_collection_by_name(library: Library, name: str) -> Collection:
    for collection in list_collections(library):
        if collection.name == name:
            return collection
    raise EntryNotFoundError(("Collection", name), LIBRARY_SCOPE)
