from __future__ import annotations

from typing import cast

from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, select

from zotero_db.models import ItemAttachmentRow


def get_attachment(session: Session, *, item_id: int) -> ItemAttachmentRow | None:
    stmt = select(ItemAttachmentRow).where(ItemAttachmentRow.itemID == item_id)
    return session.exec(stmt).first()


def list_attachment_ids_for_item(session: Session, *, parent_item_id: int) -> list[int]:
    stmt = (
        select(ItemAttachmentRow.itemID)
        .where(ItemAttachmentRow.parentItemID == parent_item_id)
        .order_by(cast(ColumnElement[object], cast(object, ItemAttachmentRow.itemID)))
    )
    return [int(item_id) for item_id in session.exec(stmt).all()]
