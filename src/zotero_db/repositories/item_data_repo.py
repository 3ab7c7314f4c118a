from __future__ import annotations

from collections.abc import Collection
from typing import cast

from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, select

from zotero_db.models import ItemDataRow, ItemDataValueRow


def list_item_data(session: Session) -> list[ItemDataRow]:
    return list(session.exec(select(ItemDataRow)).all())


def list_item_data_for_item(session: Session, *, item_id: int) -> list[ItemDataRow]:
    return list(session.exec(select(ItemDataRow).where(ItemDataRow.itemID == item_id)).all())


def list_values(session: Session) -> dict[int, str]:
    rows = session.exec(select(ItemDataValueRow.valueID, ItemDataValueRow.value)).all()
    return {int(value_id): str(value) for value_id, value in rows}


def get_values(session: Session, *, value_ids: Collection[int]) -> dict[int, str]:
    if not value_ids:
        return {}
    stmt = select(ItemDataValueRow.valueID, ItemDataValueRow.value).where(
        cast(ColumnElement[object], cast(object, ItemDataValueRow.valueID)).in_(list(value_ids))
    )
    return {int(value_id): str(value) for value_id, value in session.exec(stmt).all()}
