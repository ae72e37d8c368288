"""
Laragen Code Generation Module.

Builds class models from entity descriptions and renders them as PHP source.
"""

from laragen.codegen.emitter import ClassEmitter, emit_class, format_scalar
from laragen.codegen.generator import CodeGenerator, GeneratedFile, GenerationResult
from laragen.codegen.migrations import MigrationCodeGenerator, migration_file_name
from laragen.codegen.model import (
    Block,
    ClassModel,
    FieldDefinition,
    MethodBody,
    MethodDefinition,
    ReturnAnnotation,
    Statement,
)
from laragen.codegen.models import ModelCodeGenerator, RelationHint
from laragen.codegen.writer import CodeWriter

__all__ = [
    # Model
    "ClassModel",
    "FieldDefinition",
    "MethodDefinition",
    "ReturnAnnotation",
    "MethodBody",
    "Statement",
    "Block",
    # Emission
    "CodeWriter",
    "ClassEmitter",
    "emit_class",
    "format_scalar",
    # Generators
    "CodeGenerator",
    "GeneratedFile",
    "GenerationResult",
    "MigrationCodeGenerator",
    "migration_file_name",
    "ModelCodeGenerator",
    "RelationHint",
]
