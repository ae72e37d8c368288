"""
Laragen Core Module.

Contains the entity descriptions, tag extraction, lookup tables and error taxonomy.
"""

from laragen.core.errors import (
    InvalidEntityError,
    LaragenError,
    MalformedRelationError,
    MissingReferenceError,
    UnknownProfileError,
    UnmappedColumnTypeError,
    WriterStateError,
)
from laragen.core.mappings import (
    COLUMN_TYPE_METHODS,
    INDEX_METHODS,
    MODEL_IMPORTS,
    MODEL_TRAITS,
    RELATION_ACCESSORS,
    column_method,
    relation_suffix,
)
from laragen.core.tags import TagMap, extract_tags, tag_value
from laragen.core.types import (
    AssociationEnd,
    AssociationMetadata,
    AttributeMetadata,
    ClassEntity,
    ColumnMetadata,
    ColumnReference,
    EntityDescription,
    TableEntity,
    Tag,
    Visibility,
)

__all__ = [
    # Errors
    "LaragenError",
    "InvalidEntityError",
    "UnmappedColumnTypeError",
    "MissingReferenceError",
    "UnknownProfileError",
    "MalformedRelationError",
    "WriterStateError",
    # Mappings
    "COLUMN_TYPE_METHODS",
    "INDEX_METHODS",
    "MODEL_IMPORTS",
    "MODEL_TRAITS",
    "RELATION_ACCESSORS",
    "column_method",
    "relation_suffix",
    # Tags
    "TagMap",
    "extract_tags",
    "tag_value",
    # Types
    "Visibility",
    "Tag",
    "ColumnReference",
    "ColumnMetadata",
    "TableEntity",
    "AttributeMetadata",
    "AssociationEnd",
    "AssociationMetadata",
    "ClassEntity",
    "EntityDescription",
]
