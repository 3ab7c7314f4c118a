from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from zotero_db.db import Library
from zotero_db.errors import EntryNotFoundError
from zotero_db.identifiers import AttachmentID, CollectionID, ItemID
from zotero_db.models import ItemAttachmentRow, ItemRow
from zotero_db.services import attachments_service


def test_storage_path_resolution(tmp_path: Path) -> None:
    lib = Library(tmp_path / "home" / "u" / "Zotero" / "zotero.sqlite")
    resolved = attachments_service.resolve_storage_path(lib, "K9Z", "storage:ABC123/paper.pdf")
    assert resolved == lib.path.parent / "storage" / "K9Z" / "ABC123" / "paper.pdf"


@pytest.mark.parametrize("stored", [None, "/data/papers/linked.pdf", "attachments:x.pdf", ""])
def test_non_storage_paths_resolve_to_none(tmp_path: Path, stored: str | None) -> None:
    lib = Library(tmp_path / "zotero.sqlite")
    assert attachments_service.resolve_storage_path(lib, "KEY", stored) is None


def test_get_attachment(library: Library) -> None:
    att = attachments_service.get_attachment(library, AttachmentID(20))
    assert att.id == AttachmentID(20)
    assert att.parent == ItemID(10)
    assert att.linkmode == 1
    assert att.mime == "application/pdf"
    assert att.file == library.path.parent / "storage" / "ATT00020" / "paper.pdf"
    assert att.sync_state == 2
    assert att.mtime == 1700000000000
    assert att.hash == "d41d8cd98f00b204e9800998ecf8427e"


def test_optional_columns_absent(library: Library) -> None:
    snapshot = attachments_service.get_attachment(library, AttachmentID(21))
    assert snapshot.file == library.storage_dir / "ATT00021" / "snapshot" / "index.html"
    assert snapshot.mtime is None
    assert snapshot.hash is None

    linked = attachments_service.get_attachment(library, AttachmentID(22))
    assert linked.file is None
    assert linked.parent == ItemID(11)


def test_attachment_without_item_row(library: Library, writable_engine: Engine) -> None:
    with Session(writable_engine) as session:
        row = session.get(ItemRow, 20)
        assert row is not None
        session.delete(row)
        session.commit()

    with pytest.raises(EntryNotFoundError) as exc:
        attachments_service.get_attachment(library, AttachmentID(20))
    assert exc.value.needle == AttachmentID(20)


def test_item_that_is_not_an_attachment(library: Library) -> None:
    with pytest.raises(EntryNotFoundError) as exc:
        attachments_service.get_attachment(library, AttachmentID(10))
    assert str(exc.value) == "could not find an Attachment with ID #10 in the library"


def test_attachments_for_item(library: Library) -> None:
    atts = attachments_service.list_attachments_for_item(library, ItemID(10))
    assert [a.id for a in atts] == [AttachmentID(20), AttachmentID(21)]
    assert attachments_service.list_attachments_for_item(library, ItemID(12)) == []


def test_attachments_in_collection_follow_item_order(library: Library) -> None:
    atts = attachments_service.list_attachments_in_collection(library, CollectionID(2))
    assert [a.id.value for a in atts] == [20, 21, 22]
    assert [a.parent for a in atts] == [ItemID(10), ItemID(10), ItemID(11)]


def test_attachments_in_collection_after_new_attachment(
    library: Library, writable_engine: Engine
) -> None:
    with Session(writable_engine) as session:
        session.add(
            ItemRow(
                itemID=30,
                itemTypeID=3,
                dateAdded="2024-03-01 00:00:00",
                dateModified="2024-03-01 00:00:00",
                key="ATT00030",
                version=1,
                synced=1,
            )
        )
        session.add(
            ItemAttachmentRow(
                itemID=30,
                parentItemID=11,
                linkMode=0,
                contentType="application/epub+zip",
                path="storage:book.epub",
                syncState=0,
            )
        )
        session.commit()

    atts = attachments_service.list_attachments_in_collection(library, CollectionID(2))
    assert [a.id.value for a in atts] == [20, 21, 22, 30]


def test_library_attachments(library: Library) -> None:
    atts = attachments_service.list_attachments(library)
    assert [a.id.value for a in atts] == [20, 21, 22]
