from __future__ import annotations

from sqlmodel import Session, select

from zotero_db.models import ItemTagRow, TagRow


def list_tags(session: Session) -> list[TagRow]:
    return list(session.exec(select(TagRow)).all())


def list_item_tag_ids(session: Session, *, item_id: int) -> list[int]:
    stmt = select(ItemTagRow.tagID).where(ItemTagRow.itemID == item_id)
    return [int(tag_id) for tag_id in session.exec(stmt).all()]
