"""
Shared type definitions for Laragen.

These are the entity descriptions a host modeling tool hands to the
generators. They are read-only: generators never mutate them.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Visibility(str, Enum):
    """Member visibility in the generated class."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class Tag(BaseModel):
    """
    A free-form annotation attached to an entity, column or association end.

    Only ``name`` is required; every other keyword is kept as a parameter
    (``value``, ``kind``, ``checked``, ...).
    """

    name: str

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def params(self) -> dict[str, Any]:
        """Parameters other than the name."""
        return self.model_dump(exclude={"name"})


class ColumnReference(BaseModel):
    """Target of a foreign-key column."""

    column: str
    table: str

    model_config = {"frozen": True}


class ColumnMetadata(BaseModel):
    """Metadata for a table column."""

    name: str
    type: str
    length: int | None = None
    nullable: bool = False
    unique: bool = False
    foreign_key: bool = False
    reference_to: ColumnReference | None = None
    tags: list[Tag] = Field(default_factory=list)

    model_config = {"frozen": True}


class TableEntity(BaseModel):
    """A table from an entity-relationship diagram."""

    kind: Literal["table"] = "table"
    name: str
    columns: list[ColumnMetadata] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)

    model_config = {"frozen": True}


class AttributeMetadata(BaseModel):
    """An attribute of a class diagram element."""

    name: str
    visibility: Visibility | str = Visibility.PUBLIC
    type: str | None = None
    tags: list[Tag] = Field(default_factory=list)

    model_config = {"frozen": True}


class AssociationEnd(BaseModel):
    """One side of a class association."""

    name: str | None = None
    multiplicity: str | None = None
    tags: list[Tag] = Field(default_factory=list)

    model_config = {"frozen": True}


class AssociationMetadata(BaseModel):
    """A structural association between two classes."""

    end1: AssociationEnd | None = None
    end2: AssociationEnd | None = None

    model_config = {"frozen": True}


class ClassEntity(BaseModel):
    """A class from a class diagram, mapped to an ORM record."""

    kind: Literal["class"] = "class"
    name: str
    attributes: list[AttributeMetadata] = Field(default_factory=list)
    associations: list[AssociationMetadata] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)

    model_config = {"frozen": True}


EntityDescription = Annotated[
    Union[TableEntity, ClassEntity],
    Field(discriminator="kind"),
]
