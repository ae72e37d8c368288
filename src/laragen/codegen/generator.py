"""
Base code generator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from laragen.codegen.emitter import ClassEmitter
from laragen.codegen.model import ClassModel
from laragen.codegen.writer import CodeWriter
from laragen.core.errors import InvalidEntityError, LaragenError
from laragen.logging import get_logger, with_log_context
from laragen.utils.defaults import DEFAULT_LEGACY, GenerationDefaults

if TYPE_CHECKING:
    from laragen.codegen.models import RelationHint

logger = get_logger(__name__)


@dataclass
class GeneratedFile:
    """A generated source file. Writing it is up to the caller."""

    path: str
    content: str
    class_name: str


@dataclass
class GenerationResult:
    """Result of code generation."""

    files: list[GeneratedFile] = field(default_factory=list)
    errors: list[LaragenError] = field(default_factory=list)
    relations: list[RelationHint] = field(default_factory=list)

    @property
    def warnings(self) -> list[str]:
        """Messages of the non-fatal errors collected during generation."""
        return [error.message for error in self.errors]

    @property
    def ok(self) -> bool:
        """True when nothing had to be skipped."""
        return not self.errors


class CodeGenerator(ABC):
    """
    Abstract base class for code generators.

    A generator translates one entity description into a ClassModel and
    renders it. Per-item problems are collected on ``self.errors`` instead
    of being raised.
    """

    #: Short name used in log context
    kind: str = "class"

    def __init__(
        self,
        entity: Any,
        *,
        defaults: GenerationDefaults = DEFAULT_LEGACY,
    ) -> None:
        """
        Initialize the generator.

        Args:
            entity: Entity description to translate
            defaults: Output conventions

        Raises:
            InvalidEntityError: If the entity has no usable name
        """
        name = getattr(entity, "name", None)
        if not name or not name.strip():
            raise InvalidEntityError(
                "Entity description has no name",
                hints=["Give the entity a name before generating code"],
                details={"generator": self.kind},
            )
        self.entity = entity
        self.defaults = defaults
        self.errors: list[LaragenError] = []

    @abstractmethod
    def build_class(self) -> ClassModel:
        """Translate the entity into a ClassModel."""
        ...

    @abstractmethod
    def file_name(self) -> str:
        """File name of the generated unit, without extension."""
        ...

    def render(self, model: ClassModel) -> str:
        """Render a ClassModel with a fresh writer."""
        writer = CodeWriter(self.defaults.indent)
        return ClassEmitter(model, writer, defaults=self.defaults).emit()

    def generate(self) -> GenerationResult:
        """
        Generate source code for the entity.

        Returns:
            GenerationResult with one file and any collected errors
        """
        with with_log_context(entity=self.entity.name, generator=self.kind):
            model = self.build_class()
            result = GenerationResult(errors=list(self.errors))
            result.files.append(GeneratedFile(
                path=f"{self.file_name()}{self.defaults.file_extension}",
                content=self.render(model),
                class_name=model.name,
            ))
            logger.debug(
                "Generated class",
                class_name=model.name,
                error_count=len(result.errors),
            )
        return result

    def report(self, error: LaragenError) -> None:
        """Collect a non-fatal error and log it."""
        self.errors.append(error)
        logger.skipped(error)
