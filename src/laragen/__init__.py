"""
Laragen - Laravel scaffolding from diagram metadata.

Laragen turns table and class descriptions exported by a modeling tool into
Laravel migration and Eloquent model classes. Generators return source text
and file names; writing them to disk is left to the caller.
"""

__version__ = "0.1.0"

from laragen.codegen import (
    ClassModel,
    GeneratedFile,
    GenerationResult,
    MigrationCodeGenerator,
    ModelCodeGenerator,
)
from laragen.core.errors import (
    InvalidEntityError,
    LaragenError,
    MalformedRelationError,
    MissingReferenceError,
    UnmappedColumnTypeError,
)
from laragen.core.types import ClassEntity, EntityDescription, TableEntity

__all__ = [
    # Version
    "__version__",
    # Inputs
    "TableEntity",
    "ClassEntity",
    "EntityDescription",
    # Generators
    "ClassModel",
    "MigrationCodeGenerator",
    "ModelCodeGenerator",
    "GeneratedFile",
    "GenerationResult",
    # Errors
    "LaragenError",
    "InvalidEntityError",
    "UnmappedColumnTypeError",
    "MissingReferenceError",
    "MalformedRelationError",
]
