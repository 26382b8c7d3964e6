"""
Index definitions.

An index definition supplies the keys document and, optionally, the options
document of an index. The builders below cover regular, geospatial, text and
raw compound indexes.

Example:
    index_ops.ensure_index(Index("email", Direction.ASC).unique().named("email_idx"))
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any

from ..constants import MAX_GEO_BITS, MIN_GEO_BITS, TEXT_INDEX_TYPE, WILDCARD_KEY


class Direction(Enum):
    """Sort direction of an index field."""

    ASC = 1
    DESC = -1


class GeoSpatialIndexType(Enum):
    GEO_2D = "2d"
    GEO_2DSPHERE = "2dsphere"


class IndexDefinition(ABC):
    """Keys and options of an index, as sent to ``createIndexes``."""

    @property
    @abstractmethod
    def index_keys(self) -> dict[str, Any]:
        """Ordered mapping of field name to direction or index type."""

    @property
    @abstractmethod
    def index_options(self) -> dict[str, Any] | None:
        """Options document, or None when the index has no options at all."""


@dataclass(frozen=True)
class PartialIndexFilter:
    """Filter expression restricting which documents a partial index covers."""

    expression: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def of(cls, expression: Mapping[str, Any]) -> "PartialIndexFilter":
        return cls(dict(expression))

    def to_document(self) -> dict[str, Any]:
        return dict(self.expression)


def _check_key(key: str) -> None:
    if not key or not isinstance(key, str):
        raise ValueError(f"Index key must be a non-empty string, got {key!r}")


def _filter_document(partial_filter: "PartialIndexFilter | Mapping[str, Any]") -> dict[str, Any]:
    if isinstance(partial_filter, PartialIndexFilter):
        return partial_filter.to_document()
    return dict(partial_filter)


class Index(IndexDefinition):
    """
    Fluent builder for regular (ascending/descending) indexes.

    The options document is always present, possibly empty, so creating an
    ``Index`` always goes through option conversion.
    """

    def __init__(self, key: str | None = None, direction: Direction | int = Direction.ASC):
        self._keys: dict[str, int] = {}
        self._name: str | None = None
        self._unique = False
        self._sparse = False
        self._background = False
        self._hidden = False
        self._expire_after_seconds: int | None = None
        self._partial_filter: dict[str, Any] | None = None
        self._collation: dict[str, Any] | None = None
        if key is not None:
            self.on(key, direction)

    def on(self, key: str, direction: Direction | int = Direction.ASC) -> "Index":
        _check_key(key)
        self._keys[key] = Direction(direction).value
        return self

    def named(self, name: str) -> "Index":
        self._name = name
        return self

    def unique(self) -> "Index":
        self._unique = True
        return self

    def sparse(self) -> "Index":
        self._sparse = True
        return self

    def background(self) -> "Index":
        self._background = True
        return self

    def hidden(self) -> "Index":
        self._hidden = True
        return self

    def expire(self, value: int | timedelta) -> "Index":
        """Make this a TTL index expiring documents ``value`` after the indexed date."""
        seconds = int(value.total_seconds()) if isinstance(value, timedelta) else int(value)
        if seconds < 0:
            raise ValueError(f"Expiry must not be negative, got {seconds}s")
        self._expire_after_seconds = seconds
        return self

    def partial(self, partial_filter: PartialIndexFilter | Mapping[str, Any]) -> "Index":
        self._partial_filter = _filter_document(partial_filter)
        return self

    def collation(self, collation: Mapping[str, Any]) -> "Index":
        self._collation = dict(collation)
        return self

    @property
    def index_keys(self) -> dict[str, Any]:
        return dict(self._keys)

    @property
    def index_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self._name:
            options["name"] = self._name
        if self._unique:
            options["unique"] = True
        if self._sparse:
            options["sparse"] = True
        if self._background:
            options["background"] = True
        if self._hidden:
            options["hidden"] = True
        if self._expire_after_seconds is not None:
            options["expireAfterSeconds"] = self._expire_after_seconds
        if self._partial_filter is not None:
            options["partialFilterExpression"] = dict(self._partial_filter)
        if self._collation is not None:
            options["collation"] = dict(self._collation)
        return options

    def __repr__(self) -> str:
        return f"Index(keys={self._keys!r}, options={self.index_options!r})"


class GeospatialIndex(IndexDefinition):
    """Geospatial index on a single field. ``min``, ``max`` and ``bits`` apply to 2d only."""

    def __init__(self, key: str):
        _check_key(key)
        self._key = key
        self._type = GeoSpatialIndexType.GEO_2D
        self._name: str | None = None
        self._min: float | None = None
        self._max: float | None = None
        self._bits: int | None = None
        self._partial_filter: dict[str, Any] | None = None
        self._collation: dict[str, Any] | None = None

    def typed(self, index_type: GeoSpatialIndexType | str) -> "GeospatialIndex":
        try:
            self._type = GeoSpatialIndexType(index_type)
        except ValueError as e:
            raise ValueError(f"Unsupported geospatial index type: {index_type!r}") from e
        return self

    def named(self, name: str) -> "GeospatialIndex":
        self._name = name
        return self

    def with_min(self, value: float) -> "GeospatialIndex":
        self._min = value
        return self

    def with_max(self, value: float) -> "GeospatialIndex":
        self._max = value
        return self

    def with_bits(self, bits: int) -> "GeospatialIndex":
        if not MIN_GEO_BITS <= bits <= MAX_GEO_BITS:
            raise ValueError(f"bits must be between {MIN_GEO_BITS} and {MAX_GEO_BITS}, got {bits}")
        self._bits = bits
        return self

    def partial(self, partial_filter: PartialIndexFilter | Mapping[str, Any]) -> "GeospatialIndex":
        self._partial_filter = _filter_document(partial_filter)
        return self

    def collation(self, collation: Mapping[str, Any]) -> "GeospatialIndex":
        self._collation = dict(collation)
        return self

    @property
    def index_keys(self) -> dict[str, Any]:
        return {self._key: self._type.value}

    @property
    def index_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self._name:
            options["name"] = self._name
        if self._type is GeoSpatialIndexType.GEO_2D:
            if self._min is not None:
                options["min"] = self._min
            if self._max is not None:
                options["max"] = self._max
            if self._bits is not None:
                options["bits"] = self._bits
        if self._partial_filter is not None:
            options["partialFilterExpression"] = dict(self._partial_filter)
        if self._collation is not None:
            options["collation"] = dict(self._collation)
        return options


class TextIndexDefinition(IndexDefinition):
    """
    Text index over one or more fields, with optional per-field weights.

    A collection can hold at most one text index; ``on_all_fields`` indexes
    every string field through the ``$**`` wildcard.
    """

    def __init__(self):
        self._fields: dict[str, float | None] = {}
        self._name: str | None = None
        self._default_language: str | None = None
        self._language_override: str | None = None
        self._partial_filter: dict[str, Any] | None = None

    def on_field(self, key: str, weight: float | None = None) -> "TextIndexDefinition":
        _check_key(key)
        if weight is not None and weight <= 0:
            raise ValueError(f"Text weight must be positive, got {weight}")
        self._fields[key] = weight
        return self

    def on_all_fields(self) -> "TextIndexDefinition":
        return self.on_field(WILDCARD_KEY)

    def named(self, name: str) -> "TextIndexDefinition":
        self._name = name
        return self

    def with_default_language(self, language: str) -> "TextIndexDefinition":
        self._default_language = language
        return self

    def with_language_override(self, field_name: str) -> "TextIndexDefinition":
        self._language_override = field_name
        return self

    def partial(
        self, partial_filter: PartialIndexFilter | Mapping[str, Any]
    ) -> "TextIndexDefinition":
        self._partial_filter = _filter_document(partial_filter)
        return self

    @property
    def index_keys(self) -> dict[str, Any]:
        if not self._fields:
            raise ValueError("Text index requires at least one field")
        return {key: TEXT_INDEX_TYPE for key in self._fields}

    @property
    def index_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self._name:
            options["name"] = self._name
        weights = {k: w for k, w in self._fields.items() if w is not None}
        if weights:
            options["weights"] = weights
        if self._default_language:
            options["default_language"] = self._default_language
        if self._language_override:
            options["language_override"] = self._language_override
        if self._partial_filter is not None:
            options["partialFilterExpression"] = dict(self._partial_filter)
        return options


class CompoundIndexDefinition(IndexDefinition):
    """
    Index defined by a raw keys document.

    Unlike the builders, ``options`` may be None, in which case the index is
    created from its keys alone.
    """

    def __init__(self, keys: Mapping[str, Any], options: Mapping[str, Any] | None = None):
        if not keys:
            raise ValueError("Compound index requires at least one key")
        for key in keys:
            _check_key(key)
        self._keys = {
            key: value.value if isinstance(value, Direction) else value
            for key, value in keys.items()
        }
        self._options = dict(options) if options is not None else None

    @property
    def index_keys(self) -> dict[str, Any]:
        return dict(self._keys)

    @property
    def index_options(self) -> dict[str, Any] | None:
        return dict(self._options) if self._options is not None else None

    def __repr__(self) -> str:
        return f"CompoundIndexDefinition(keys={self._keys!r}, options={self._options!r})"
