"""
Intermediate model of a generated class.

Generators populate a ClassModel; the ClassEmitter only reads it. Nothing
here knows about PHP syntax except through the values stored in it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from laragen.core.errors import InvalidEntityError
from laragen.core.types import Visibility

if TYPE_CHECKING:
    from laragen.codegen.writer import CodeWriter

Scalar = Union[str, int, float, bool, None]
FieldValue = Union[Scalar, list[Scalar]]


@dataclass(frozen=True)
class ReturnAnnotation:
    """A ``@return`` entry in a doc block."""

    type: str
    description: str | None = None


@dataclass(frozen=True)
class Statement:
    """A single line of a method body."""

    text: str

    def write(self, writer: CodeWriter) -> None:
        writer.write_line(self.text)


@dataclass(frozen=True)
class Block:
    """A line that opens a nested scope, its contents and its closing line."""

    opener: str
    children: tuple[BodyNode, ...] = ()
    closer: str = "}"

    def write(self, writer: CodeWriter) -> None:
        writer.write_line(self.opener)
        writer.indent()
        for child in self.children:
            child.write(writer)
        writer.outdent()
        writer.write_line(self.closer)


BodyNode = Union[Statement, Block]


@dataclass(frozen=True)
class MethodBody:
    """
    Method body as plain data.

    Bodies built from Statement and Block nodes can be compared and
    inspected in tests without rendering them.
    """

    nodes: tuple[BodyNode, ...] = ()

    def write(self, writer: CodeWriter) -> None:
        for node in self.nodes:
            node.write(writer)


BodyCallback = Callable[["CodeWriter"], None]


@dataclass
class MethodDefinition:
    """A method of the generated class."""

    name: str
    visibility: Visibility | str = Visibility.PUBLIC
    description: str | None = None
    params: list[str] = field(default_factory=list)
    returns: list[ReturnAnnotation] = field(default_factory=list)
    body: MethodBody | BodyCallback | None = None

    def add_param(self, param: str) -> None:
        self.params.append(param)

    def add_return(self, annotation: ReturnAnnotation | str) -> None:
        if isinstance(annotation, str):
            annotation = ReturnAnnotation(type=annotation)
        self.returns.append(annotation)


@dataclass
class FieldDefinition:
    """A property of the generated class."""

    name: str
    visibility: Visibility | str = Visibility.PUBLIC
    value: FieldValue = None
    description: str | None = None
    returns: list[ReturnAnnotation] = field(default_factory=list)

    def add_return(self, annotation: ReturnAnnotation | str) -> None:
        if isinstance(annotation, str):
            annotation = ReturnAnnotation(type=annotation)
        self.returns.append(annotation)


@dataclass
class ClassModel:
    """
    A class to be emitted.

    All collections are append-only and keep insertion order. Duplicate
    imports, fields or methods are kept as given.
    """

    name: str
    imports: list[str] = field(default_factory=list)
    extends: list[str] = field(default_factory=list)
    implements: list[str] = field(default_factory=list)
    traits: list[str] = field(default_factory=list)
    fields: list[FieldDefinition] = field(default_factory=list)
    methods: list[MethodDefinition] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidEntityError("A generated class needs a name")

    def add_import(self, statement: str) -> None:
        self.imports.append(statement)

    def add_extend(self, base: str) -> None:
        self.extends.append(base)

    def add_implement(self, interface: str) -> None:
        self.implements.append(interface)

    def add_trait(self, trait: str) -> None:
        self.traits.append(trait)

    def add_field(self, definition: FieldDefinition) -> None:
        self.fields.append(definition)

    def add_method(self, definition: MethodDefinition) -> None:
        self.methods.append(definition)
