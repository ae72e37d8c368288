"""
Static lookup tables driving code generation.

All tables are read-only and shared by every generator.
"""

from types import MappingProxyType
from typing import Mapping

# Column type -> Blueprint method. Keys are upper-case; lookups normalize.
COLUMN_TYPE_METHODS: Mapping[str, str] = MappingProxyType({
    "CHAR": "char",
    "VARCHAR": "string",
    "STRING": "string",
    "TEXT": "text",
    "MEDIUMTEXT": "mediumText",
    "LONGTEXT": "longText",
    "TINYINT": "tinyInteger",
    "SMALLINT": "smallInteger",
    "MEDIUMINT": "mediumInteger",
    "INT": "integer",
    "INTEGER": "integer",
    "BIGINT": "bigInteger",
    "FLOAT": "float",
    "DOUBLE": "double",
    "DECIMAL": "decimal",
    "BOOLEAN": "boolean",
    "BOOL": "boolean",
    "DATE": "date",
    "DATETIME": "dateTime",
    "TIMESTAMP": "timestamp",
    "TIME": "time",
    "YEAR": "year",
    "BINARY": "binary",
    "BLOB": "binary",
    "JSON": "json",
    "JSONB": "jsonb",
    "UUID": "uuid",
    "ENUM": "enum",
    "INCREMENTS": "increments",
    "BIGINCREMENTS": "bigIncrements",
    "ID": "id",
})

# Table tag -> Blueprint index method. Iteration order is emission order.
INDEX_METHODS: Mapping[str, str] = MappingProxyType({
    "primary": "primary",
    "unique": "unique",
    "index": "index",
    "spatialIndex": "spatialIndex",
    "fullText": "fullText",
})

# Model tag -> import statement
MODEL_IMPORTS: Mapping[str, str] = MappingProxyType({
    "softDeletes": "Illuminate\\Database\\Eloquent\\SoftDeletes;",
    "useUUID": "App\\Concerns\\UsesUuid;",
    "hasApiToken": "Laravel\\Passport\\HasApiTokens;",
    "authenticatable": "Illuminate\\Foundation\\Auth\\User as Authenticatable;",
    "notifiable": "Illuminate\\Notifications\\Notifiable;",
    "hasMany": "Illuminate\\Database\\Eloquent\\Relations\\HasMany;",
    "hasOne": "Illuminate\\Database\\Eloquent\\Relations\\HasOne;",
    "belongsTo": "Illuminate\\Database\\Eloquent\\Relations\\BelongsTo;",
    "belongsToMany": "Illuminate\\Database\\Eloquent\\Relations\\BelongsToMany;",
})

# Model tag -> trait used inside the class body
MODEL_TRAITS: Mapping[str, str] = MappingProxyType({
    "softDeletes": "SoftDeletes",
    "useUUID": "UsesUuid",
    "hasApiToken": "HasApiTokens",
    "notifiable": "Notifiable",
})

# Association end multiplicity -> relation accessor suffix
RELATION_ACCESSORS: Mapping[str, str] = MappingProxyType({
    "1": "HasOne",
    "0..1": "HasOne",
    "*": "HasMany",
    "0..*": "HasMany",
    "1..*": "HasMany",
})


def column_method(column_type: str | None) -> str | None:
    """Get the Blueprint method for a column type, or None if unmapped."""
    if not column_type:
        return None
    return COLUMN_TYPE_METHODS.get(column_type.strip().upper())


def relation_suffix(multiplicity: str | None) -> str | None:
    """Get the accessor suffix for a multiplicity, or None if unmapped."""
    if multiplicity is None:
        return None
    return RELATION_ACCESSORS.get(multiplicity.strip())
