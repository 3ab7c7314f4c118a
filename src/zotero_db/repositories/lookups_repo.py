from __future__ import annotations

from sqlmodel import Session, select

from zotero_db.models import FieldRow, ItemTypeRow


def list_item_types(session: Session) -> list[tuple[int, str]]:
    rows = session.exec(select(ItemTypeRow.itemTypeID, ItemTypeRow.typeName)).all()
    return [(int(code), str(name)) for code, name in rows]


def list_fields(session: Session) -> list[tuple[int, str]]:
    rows = session.exec(select(FieldRow.fieldID, FieldRow.fieldName)).all()
    return [(int(code), str(name)) for code, name in rows]
