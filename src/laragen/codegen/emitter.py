"""
Renders a ClassModel as PHP class source.
"""

from laragen.codegen.model import (
    ClassModel,
    FieldDefinition,
    MethodBody,
    MethodDefinition,
    Scalar,
)
from laragen.codegen.writer import CodeWriter
from laragen.core.types import Visibility
from laragen.utils.defaults import DEFAULT_LEGACY, GenerationDefaults


def format_scalar(value: Scalar) -> str:
    """Render a scalar as a PHP literal."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
        return f'"{escaped}"'
    return str(value)


def _visibility(value: Visibility | str) -> str:
    return value.value if isinstance(value, Visibility) else value


class ClassEmitter:
    """
    Walks a ClassModel and writes it through a CodeWriter.

    Output order is fixed: header, imports, signature, traits, fields,
    methods, closing brace.
    """

    def __init__(
        self,
        model: ClassModel,
        writer: CodeWriter | None = None,
        *,
        defaults: GenerationDefaults = DEFAULT_LEGACY,
    ) -> None:
        self.model = model
        self.defaults = defaults
        self.writer = writer or CodeWriter(defaults.indent)

    def emit(self) -> str:
        """Write the whole class and return the writer's text."""
        self._header()
        self._imports()
        self._class_code()
        return self.writer.get_data()

    def _header(self) -> None:
        self.writer.write_line(self.defaults.header)
        self.writer.write_line()

    def _imports(self) -> None:
        for statement in self.model.imports:
            self.writer.write_line(f"use {statement}")
        self.writer.write_line()

    def _class_code(self) -> None:
        self.writer.write_line(self._signature())
        self.writer.write_line("{")
        self.writer.indent()
        self._traits()
        for definition in self.model.fields:
            self._doc_block(definition)
            self._field(definition)
            self.writer.write_line()
        for method in self.model.methods:
            self._doc_block(method)
            self._method(method)
            self.writer.write_line()
        self.writer.outdent()
        self.writer.write_line("}")

    def _signature(self) -> str:
        signature = f"class {self.model.name}"
        if self.model.extends:
            signature += " extends " + ",".join(self.model.extends)
        if self.model.implements:
            signature += " implements " + ",".join(self.model.implements)
        return signature

    def _traits(self) -> None:
        if not self.model.traits:
            return
        self.writer.write_line(f"use {', '.join(self.model.traits)};")
        self.writer.write_line()

    def _doc_block(self, member: FieldDefinition | MethodDefinition) -> None:
        if not member.description:
            return
        self.writer.write_line("/**")
        self.writer.write_line(f" * {member.description}")
        self.writer.write_line(" *")
        for annotation in member.returns:
            self.writer.write_line(f" * @return {annotation.type}")
        self.writer.write_line(" */")

    def _field(self, definition: FieldDefinition) -> None:
        declaration = f"{_visibility(definition.visibility)} ${definition.name} ="
        value = definition.value
        if not isinstance(value, (list, tuple)):
            self.writer.write_line(f"{declaration} {format_scalar(value)};")
            return
        if not value:
            self.writer.write_line(f"{declaration} [];")
            return

        self.writer.write_line(f"{declaration} [")
        self.writer.indent()
        for item in value:
            self.writer.write_line(f"{format_scalar(item)},")
        self.writer.outdent()
        self.writer.write_line("];")

    def _method(self, method: MethodDefinition) -> None:
        params = ",".join(method.params)
        self.writer.write_line(
            f"{_visibility(method.visibility)} function {method.name}({params})"
        )
        self.writer.write_line("{")
        self.writer.indent()
        if method.body is None:
            self.writer.write_line(self.defaults.placeholder)
        elif isinstance(method.body, MethodBody):
            method.body.write(self.writer)
        else:
            method.body(self.writer)
        self.writer.outdent()
        self.writer.write_line("}")


def emit_class(
    model: ClassModel,
    *,
    defaults: GenerationDefaults = DEFAULT_LEGACY,
) -> str:
    """Render a ClassModel with a fresh writer."""
    return ClassEmitter(model, defaults=defaults).emit()
