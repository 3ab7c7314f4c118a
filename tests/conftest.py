from __future__ import annotations

import sqlite3
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from sqlalchemy import Engine
from sqlalchemy.pool import QueuePool
from sqlmodel import Session, SQLModel, create_engine

from zotero_db.db import Library, reset_default_library
from zotero_db.lookups import FIELDS, ITEM_TYPES
from zotero_db.models import (
    CollectionItemRow,
    CollectionRow,
    FieldRow,
    ItemAttachmentRow,
    ItemDataRow,
    ItemDataValueRow,
    ItemRow,
    ItemTagRow,
    ItemTypeRow,
    TagRow,
)


@pytest.fixture(autouse=True)
def _reset_process_caches() -> Iterator[None]:  # pyright: ignore[reportUnusedFunction]
    # Lookup tables and the default library live for the whole process; each
    # test gets its own store, so start every test from a cold cache.
    yield
    ITEM_TYPES.clear()
    FIELDS.clear()
    reset_default_library()


def _collection(collection_id: int, name: str, parent_id: int | None) -> CollectionRow:
    return CollectionRow(
        collectionID=collection_id,
        collectionName=name,
        parentCollectionID=parent_id,
        key=f"COLL{collection_id:04d}",
    )


def _item(item_id: int, type_id: int, key: str, *, version: int = 1, synced: int = 1) -> ItemRow:
    return ItemRow(
        itemID=item_id,
        itemTypeID=type_id,
        dateAdded="2024-01-02 03:04:05",
        dateModified="2024-02-03 04:05:06",
        key=key,
        version=version,
        synced=synced,
    )


def seed_store(engine: Engine) -> None:
    """A small library.

    Collections: Everything#1 > {Psychic powers#2 > {Precognition#4}, Time travel#3}
    Items: 10 journalArticle, 11 book, 12 (type code 99, not in itemTypes);
    attachments 20, 21 belong to 10 and 22 to 11. Collection 2 holds 11 and 10,
    collection 3 holds 12.
    """
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(
            [
                ItemTypeRow(itemTypeID=1, typeName="book"),
                ItemTypeRow(itemTypeID=2, typeName="journalArticle"),
                ItemTypeRow(itemTypeID=3, typeName="attachment"),
                FieldRow(fieldID=1, fieldName="title"),
                FieldRow(fieldID=2, fieldName="DOI"),
                FieldRow(fieldID=3, fieldName="url"),
                _collection(4, "Precognition", 2),
                _collection(2, "Psychic powers", 1),
                _collection(3, "Time travel", 1),
                _collection(1, "Everything", None),
                _item(10, 2, "AAAA1111", version=7),
                _item(11, 1, "BBBB2222", synced=0),
                _item(12, 99, "CCCC3333"),
                _item(20, 3, "ATT00020"),
                _item(21, 3, "ATT00021"),
                _item(22, 3, "ATT00022"),
                CollectionItemRow(collectionID=2, itemID=11, orderIndex=0),
                CollectionItemRow(collectionID=2, itemID=10, orderIndex=1),
                CollectionItemRow(collectionID=3, itemID=12, orderIndex=0),
                ItemAttachmentRow(
                    itemID=20,
                    parentItemID=10,
                    linkMode=1,
                    contentType="application/pdf",
                    path="storage:paper.pdf",
                    syncState=2,
                    storageModTime=1700000000000,
                    storageHash="d41d8cd98f00b204e9800998ecf8427e",
                ),
                ItemAttachmentRow(
                    itemID=21,
                    parentItemID=10,
                    linkMode=1,
                    contentType="text/html",
                    path="storage:snapshot/index.html",
                    syncState=0,
                ),
                ItemAttachmentRow(
                    itemID=22,
                    parentItemID=11,
                    linkMode=2,
                    contentType="application/pdf",
                    path="/data/papers/linked.pdf",
                    syncState=0,
                ),
                TagRow(tagID=1, name="psychic"),
                TagRow(tagID=2, name="history"),
                ItemTagRow(itemID=10, tagID=1),
                ItemTagRow(itemID=10, tagID=2),
                ItemTagRow(itemID=11, tagID=1),
                ItemDataValueRow(valueID=1, value="A history of psychic powers"),
                ItemDataValueRow(valueID=2, value="10.1000/psy.1"),
                ItemDataValueRow(valueID=3, value="https://example.org/psychic"),
                ItemDataValueRow(valueID=4, value="The psychic powers, here and now"),
                ItemDataValueRow(valueID=5, value="Time travel for beginners"),
                ItemDataRow(itemID=10, fieldID=1, valueID=1),
                ItemDataRow(itemID=10, fieldID=2, valueID=2),
                ItemDataRow(itemID=10, fieldID=3, valueID=3),
                ItemDataRow(itemID=11, fieldID=1, valueID=4),
                ItemDataRow(itemID=12, fieldID=1, valueID=5),
            ]
        )
        session.commit()


def open_writable(path: Path) -> Engine:
    # Plain filename connect: no URL or URI parsing of the path.
    def _connect() -> sqlite3.Connection:
        return sqlite3.connect(path, check_same_thread=False)

    return create_engine("sqlite://", creator=_connect, poolclass=QueuePool)


def build_store(path: Path) -> Path:
    path.parent.mkdir(parents=True)
    engine = open_writable(path)
    try:
        seed_store(engine)
    finally:
        engine.dispose()
    return path


@pytest.fixture
def make_store(tmp_path: Path) -> Callable[[str], Path]:
    def _make(dirname: str) -> Path:
        return build_store(tmp_path / dirname / "zotero.sqlite")

    return _make


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return build_store(tmp_path / "Zotero" / "zotero.sqlite")


@pytest.fixture
def writable_engine(store_path: Path) -> Iterator[Engine]:
    engine = open_writable(store_path)
    yield engine
    engine.dispose()


@pytest.fixture
def library(store_path: Path) -> Iterator[Library]:
    lib = Library(store_path)
    yield lib
    lib.dispose()
