from __future__ import annotations

from typing import cast

from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, select

from zotero_db.models import CollectionItemRow, CollectionRow


def list_collections(session: Session) -> list[CollectionRow]:
    # No ORDER BY: the hierarchy builder must not depend on row order.
    return list(session.exec(select(CollectionRow)).all())


def list_collection_item_ids(session: Session, *, collection_id: int) -> list[int]:
    stmt = (
        select(CollectionItemRow.itemID)
        .where(CollectionItemRow.collectionID == collection_id)
        .order_by(cast(ColumnElement[object], cast(object, CollectionItemRow.orderIndex)))
    )
    return [int(item_id) for item_id in session.exec(stmt).all()]
