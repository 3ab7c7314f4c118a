from __future__ import annotations

from typing import cast

from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, select

from zotero_db.models import ItemRow


def list_items(session: Session) -> list[ItemRow]:
    stmt = select(ItemRow).order_by(cast(ColumnElement[object], cast(object, ItemRow.itemID)))
    return list(session.exec(stmt).all())


def get_item(session: Session, *, item_id: int) -> ItemRow | None:
    return session.exec(select(ItemRow).where(ItemRow.itemID == item_id)).first()


def get_item_key(session: Session, *, item_id: int) -> str | None:
    return session.exec(select(ItemRow.key).where(ItemRow.itemID == item_id)).first()
