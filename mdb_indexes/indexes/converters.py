"""
Conversions between index definitions, PyMongo arguments, and index metadata.
"""

import logging
from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Final

from ..constants import (
    GEO_INDEX_TYPES,
    HASHED_INDEX_TYPE,
    TEXT_INDEX_INTERNAL_KEYS,
    TEXT_INDEX_TYPE,
    WILDCARD_KEY,
)
from .definitions import Direction, IndexDefinition
from .info import IndexField, IndexInfo

logger = logging.getLogger(__name__)

# Options accepted by createIndexes that create_index forwards verbatim
INDEX_OPTION_KEYS: Final[frozenset] = frozenset(
    {
        "name",
        "unique",
        "sparse",
        "background",
        "hidden",
        "expireAfterSeconds",
        "min",
        "max",
        "bits",
        "bucketSize",
        "default_language",
        "language_override",
        "weights",
        "textIndexVersion",
        "2dsphereIndexVersion",
        "partialFilterExpression",
        "collation",
        "wildcardProjection",
    }
)


def definition_to_index_options(definition: IndexDefinition) -> dict[str, Any]:
    """
    Convert the options document of ``definition`` into keyword arguments for
    ``create_index``.

    Unrecognised options are dropped. An empty or missing options document
    yields an empty dict.
    """
    source = definition.index_options or {}
    options: dict[str, Any] = {}

    for key, value in source.items():
        if key not in INDEX_OPTION_KEYS:
            logger.debug(f"Ignoring unsupported index option '{key}'")
            continue
        options[key] = value

    if "expireAfterSeconds" in options:
        options["expireAfterSeconds"] = int(options["expireAfterSeconds"])

    return options


def document_to_index_info(document: Mapping[str, Any]) -> IndexInfo:
    """
    Convert one raw ``listIndexes`` document into an ``IndexInfo``.

    Raises:
        ValueError: If the document has no name or no key document
    """
    name = document.get("name")
    if name is None:
        raise ValueError(f"Index document has no 'name': {dict(document)!r}")

    key_document = document.get("key")
    if not isinstance(key_document, Mapping):
        raise ValueError(f"Index document '{name}' has no 'key' document")

    index_fields: list[IndexField] = []
    for key, value in key_document.items():
        if value == TEXT_INDEX_TYPE:
            index_fields.extend(_text_fields(key, document.get("weights")))
        elif key in TEXT_INDEX_INTERNAL_KEYS:
            continue
        elif isinstance(value, str) and value in GEO_INDEX_TYPES:
            index_fields.append(IndexField.geo(key))
        elif value == HASHED_INDEX_TYPE:
            index_fields.append(IndexField.hashed(key))
        elif key == WILDCARD_KEY or key.endswith("." + WILDCARD_KEY):
            index_fields.append(IndexField.wildcard(key))
        else:
            direction = _direction_of(value)
            if direction is None:
                logger.debug(f"Skipping index '{name}' key '{key}' with unsupported value {value!r}")
                continue
            index_fields.append(IndexField.create(key, direction))

    expire_after_seconds = document.get("expireAfterSeconds")
    partial_filter = document.get("partialFilterExpression")
    collation = document.get("collation")

    return IndexInfo(
        index_fields=tuple(index_fields),
        name=str(name),
        unique=bool(document.get("unique", False)),
        sparse=bool(document.get("sparse", False)),
        language=document.get("default_language", ""),
        partial_filter_expression=dict(partial_filter) if partial_filter is not None else None,
        expire_after=(
            timedelta(seconds=expire_after_seconds) if expire_after_seconds is not None else None
        ),
        collation=dict(collation) if collation is not None else None,
        hidden=bool(document.get("hidden", False)),
        version=document.get("v"),
    )


def _text_fields(key: str, weights: Mapping[str, Any] | None) -> list[IndexField]:
    # The server stores text indexes as {"_fts": "text", "_ftsx": 1} and
    # lists the real fields under "weights".
    if weights:
        return [IndexField.text(field_name, float(w)) for field_name, w in weights.items()]
    return [IndexField.text(key, 1.0)]


def _direction_of(value: Any) -> Direction | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number == 1:
        return Direction.ASC
    if number == -1:
        return Direction.DESC
    return None
