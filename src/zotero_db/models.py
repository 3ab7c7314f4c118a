# basedpyright: reportAssignmentType=false
# basedpyright: reportIncompatibleVariableOverride=false

"""Rows of the Zotero SQLite schema.

Column names match the store exactly. Only the columns read by this package
are mapped; a real Zotero store carries more (libraryID, clientDateModified,
...), which SELECTs built from these models simply do not touch.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field, SQLModel


class CollectionRow(SQLModel, table=True):
    __tablename__ = "collections"  # pyright: ignore[reportAssignmentType,reportIncompatibleVariableOverride]

    collectionID: Optional[int] = Field(default=None, primary_key=True)
    collectionName: str
    # Roots have no parent; the hierarchy is resolved in collections_service.
    parentCollectionID: Optional[int] = Field(default=None, index=True)
    key: str = Field(max_length=8)


class ItemTypeRow(SQLModel, table=True):
    __tablename__ = "itemTypes"  # pyright: ignore[reportAssignmentType,reportIncompatibleVariableOverride]

    itemTypeID: Optional[int] = Field(default=None, primary_key=True)
    typeName: str


class ItemRow(SQLModel, table=True):
    __tablename__ = "items"  # pyright: ignore[reportAssignmentType,reportIncompatibleVariableOverride]

    itemID: Optional[int] = Field(default=None, primary_key=True)
    itemTypeID: int
    # Text timestamps, "YYYY-MM-DD HH:MM:SS" (UTC).
    dateAdded: str
    dateModified: str
    key: str = Field(max_length=8)
    version: int = Field(default=0)
    synced: int = Field(default=0)


class CollectionItemRow(SQLModel, table=True):
    __tablename__ = "collectionItems"  # pyright: ignore[reportAssignmentType,reportIncompatibleVariableOverride]

    collectionID: int = Field(primary_key=True)
    itemID: int = Field(primary_key=True, index=True)
    orderIndex: int = Field(default=0)


class ItemAttachmentRow(SQLModel, table=True):
    __tablename__ = "itemAttachments"  # pyright: ignore[reportAssignmentType,reportIncompatibleVariableOverride]

    # Same id space as items.itemID.
    itemID: int = Field(primary_key=True)
    parentItemID: Optional[int] = Field(default=None, index=True)
    linkMode: int
    contentType: str = Field(default="")
    path: Optional[str] = None
    syncState: int = Field(default=0)
    storageModTime: Optional[int] = None
    storageHash: Optional[str] = None


class TagRow(SQLModel, table=True):
    __tablename__ = "tags"  # pyright: ignore[reportAssignmentType,reportIncompatibleVariableOverride]

    tagID: Optional[int] = Field(default=None, primary_key=True)
    name: str


class ItemTagRow(SQLModel, table=True):
    __tablename__ = "itemTags"  # pyright: ignore[reportAssignmentType,reportIncompatibleVariableOverride]

    itemID: int = Field(primary_key=True)
    tagID: int = Field(primary_key=True, index=True)
    type: int = Field(default=0)


class FieldRow(SQLModel, table=True):
    __tablename__ = "fields"  # pyright: ignore[reportAssignmentType,reportIncompatibleVariableOverride]

    fieldID: Optional[int] = Field(default=None, primary_key=True)
    fieldName: str


class ItemDataRow(SQLModel, table=True):
    __tablename__ = "itemData"  # pyright: ignore[reportAssignmentType,reportIncompatibleVariableOverride]

    itemID: int = Field(primary_key=True)
    fieldID: int = Field(primary_key=True)
    valueID: int = Field(index=True)


class ItemDataValueRow(SQLModel, table=True):
    __tablename__ = "itemDataValues"  # pyright: ignore[reportAssignmentType,reportIncompatibleVariableOverride]

    valueID: Optional[int] = Field(default=None, primary_key=True)
    value: str
