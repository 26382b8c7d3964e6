"""
Index metadata as reported by ``listIndexes``.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any

from .definitions import Direction


class IndexFieldType(Enum):
    DEFAULT = "default"
    GEO = "geo"
    TEXT = "text"
    HASH = "hash"
    WILDCARD = "wildcard"


@dataclass(frozen=True)
class IndexField:
    """
    A single field of an index.

    Only DEFAULT fields carry a direction; only TEXT fields carry a weight.
    """

    key: str
    direction: Direction | None = None
    type: IndexFieldType = IndexFieldType.DEFAULT
    weight: float | None = None

    @classmethod
    def create(cls, key: str, direction: Direction) -> "IndexField":
        return cls(key, direction=direction)

    @classmethod
    def geo(cls, key: str) -> "IndexField":
        return cls(key, type=IndexFieldType.GEO)

    @classmethod
    def text(cls, key: str, weight: float) -> "IndexField":
        return cls(key, type=IndexFieldType.TEXT, weight=weight)

    @classmethod
    def hashed(cls, key: str) -> "IndexField":
        return cls(key, type=IndexFieldType.HASH)

    @classmethod
    def wildcard(cls, key: str) -> "IndexField":
        return cls(key, type=IndexFieldType.WILDCARD)

    @property
    def is_geo(self) -> bool:
        return self.type is IndexFieldType.GEO

    @property
    def is_text(self) -> bool:
        return self.type is IndexFieldType.TEXT

    @property
    def is_hashed(self) -> bool:
        return self.type is IndexFieldType.HASH

    @property
    def is_wildcard(self) -> bool:
        return self.type is IndexFieldType.WILDCARD


@dataclass(frozen=True)
class IndexInfo:
    """
    Read-only view of one index on a collection.

    Attributes:
        index_fields: Fields in key order (text fields in weight order)
        name: Index name
        unique: Whether the index enforces uniqueness
        sparse: Whether documents lacking the field are skipped
        language: Default language of a text index, "" otherwise
        partial_filter_expression: Filter of a partial index
        expire_after: TTL of the index
        collation: Collation document
        hidden: Whether the index is hidden from the query planner
        version: Index format version ("v")
    """

    index_fields: tuple[IndexField, ...]
    name: str
    unique: bool = False
    sparse: bool = False
    language: str = ""
    partial_filter_expression: dict[str, Any] | None = field(default=None, hash=False)
    expire_after: timedelta | None = None
    collation: dict[str, Any] | None = field(default=None, hash=False)
    hidden: bool = False
    version: int | None = None

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "IndexInfo":
        from .converters import document_to_index_info

        return document_to_index_info(document)

    @property
    def has_expiry(self) -> bool:
        return self.expire_after is not None

    @property
    def is_wildcard(self) -> bool:
        return any(f.is_wildcard for f in self.index_fields)

    def is_index_for_fields(self, keys: Iterable[str]) -> bool:
        """True if this index covers exactly ``keys``, in any order."""
        return {f.key for f in self.index_fields} == set(keys)
