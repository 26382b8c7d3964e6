"""
Index Management Module

Index definitions, index metadata, and the per-collection index operations
facade.
"""

from .converters import definition_to_index_options, document_to_index_info
from .definitions import (
    CompoundIndexDefinition,
    Direction,
    GeospatialIndex,
    GeoSpatialIndexType,
    Index,
    IndexDefinition,
    PartialIndexFilter,
    TextIndexDefinition,
)
from .info import IndexField, IndexFieldType, IndexInfo
from .operations import DefaultIndexOperations, IndexOperations

__all__ = [
    # Operations
    "IndexOperations",
    "DefaultIndexOperations",
    # Definitions
    "IndexDefinition",
    "Index",
    "GeospatialIndex",
    "GeoSpatialIndexType",
    "TextIndexDefinition",
    "CompoundIndexDefinition",
    "PartialIndexFilter",
    "Direction",
    # Metadata
    "IndexInfo",
    "IndexField",
    "IndexFieldType",
    # Converters
    "definition_to_index_options",
    "document_to_index_info",
]
