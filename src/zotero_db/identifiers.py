"""Kind-tagged integer identifiers.

Every entity kind gets its own ``Identifier`` subclass. The row id of an item
and of a collection are both plain integers in the store, but an ``ItemID`` is
never equal to, or orderable against, a ``CollectionID``, and a type checker
rejects one where the other is expected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, order=True)
class Identifier:
    kind: ClassVar[str] = "Entity"

    value: int

    def __int__(self) -> int:
        return self.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        return f"{self.kind}#{self.value}"


# Subclasses add no fields; the generated __eq__/__lt__ compare by exact class,
# so identifiers of different kinds never compare equal and refuse ordering.


class LibraryID(Identifier):
    kind: ClassVar[str] = "Library"


class CollectionID(Identifier):
    kind: ClassVar[str] = "Collection"


class ItemID(Identifier):
    kind: ClassVar[str] = "Item"


class AttachmentID(Identifier):
    # Attachments are items too: they share the itemID space.
    kind: ClassVar[str] = "Attachment"


class TagID(Identifier):
    kind: ClassVar[str] = "Tag"


# Scope of lookups with no narrower container than the library itself.
LIBRARY_SCOPE = LibraryID(0)
