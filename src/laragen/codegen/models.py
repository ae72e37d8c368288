"""
Eloquent model generator.

Turns a class description into an Eloquent model: imports and traits come
from the entity's tags, and public attributes become mass-assignable.
"""

from dataclasses import dataclass

from laragen.codegen.generator import CodeGenerator, GenerationResult
from laragen.codegen.model import ClassModel, FieldDefinition
from laragen.core.errors import MalformedRelationError
from laragen.core.mappings import MODEL_IMPORTS, MODEL_TRAITS, relation_suffix
from laragen.core.tags import extract_tags, tag_value
from laragen.core.types import (
    AssociationEnd,
    AssociationMetadata,
    ClassEntity,
    Visibility,
)
from laragen.logging import get_logger
from laragen.utils.defaults import DEFAULT_LEGACY, GenerationDefaults

logger = get_logger(__name__)


@dataclass(frozen=True)
class RelationHint:
    """
    What a relation accessor for an association end would look like.

    Hints are derived but not rendered into the model class.
    """

    accessor: str
    relation: str
    reference_name: str
    foreign_key: str = ""
    local_key: str = ""
    foreign_table: str = ""
    local_table: str = ""


class ModelCodeGenerator(CodeGenerator):
    """
    Generates an Eloquent model class for one class description.

    Example output:
        class User extends Authenticatable
        {
            use Notifiable;

            protected $fillable = [
                "name",
                "email",
            ];
        }
    """

    kind = "model"

    def __init__(
        self,
        entity: ClassEntity,
        *,
        defaults: GenerationDefaults = DEFAULT_LEGACY,
    ) -> None:
        super().__init__(entity, defaults=defaults)
        self.relations: list[RelationHint] = []

    def file_name(self) -> str:
        return self.entity.name

    def build_class(self) -> ClassModel:
        """Translate the class description into a model ClassModel."""
        self.errors = []
        entity: ClassEntity = self.entity
        tags = extract_tags(entity.tags)
        logger.debug("Building model", tags=list(tags))

        model = ClassModel(entity.name)
        model.add_import(self.defaults.model_base_import)

        for tag_name in tags:
            statement = MODEL_IMPORTS.get(tag_name)
            trait = MODEL_TRAITS.get(tag_name)
            if statement:
                model.add_import(statement)
            if trait:
                model.add_trait(trait)

        if "authenticatable" in tags:
            model.add_extend(self.defaults.authenticatable_base)
        else:
            model.add_extend(self.defaults.model_base)

        model.add_field(FieldDefinition(
            name="fillable",
            visibility=Visibility.PROTECTED,
            value=self.fillable_attributes(),
        ))

        self.relations = self.derive_relations()
        return model

    def generate(self) -> GenerationResult:
        result = super().generate()
        result.relations = list(self.relations)
        return result

    def fillable_attributes(self) -> list[str]:
        """Names of the public attributes, in declaration order."""
        return [
            attribute.name
            for attribute in self.entity.attributes
            if attribute.visibility == Visibility.PUBLIC
        ]

    def derive_relations(self) -> list[RelationHint]:
        """
        Relation accessor hints for the entity's associations.

        Malformed associations are skipped and reported.
        """
        self.errors = [
            error for error in self.errors if not isinstance(error, MalformedRelationError)
        ]
        hints: list[RelationHint] = []
        for association in self.entity.associations:
            ends = self._reference_ends(association)
            if ends is None:
                continue
            for end in ends:
                hint = self._hint_for(end)
                if hint is not None:
                    hints.append(hint)
        return hints

    def _reference_ends(
        self, association: AssociationMetadata
    ) -> list[AssociationEnd] | None:
        ends = [association.end1, association.end2]
        if any(end is None or not end.name for end in ends):
            self.report(MalformedRelationError(
                "association end is missing or unnamed",
                entity=self.entity.name,
            ))
            return None

        # A self-association keeps both ends.
        if ends[0].name != ends[1].name:
            ends = [end for end in ends if end.name != self.entity.name]
        return ends

    def _hint_for(self, end: AssociationEnd) -> RelationHint | None:
        suffix = relation_suffix(end.multiplicity)
        if suffix is None:
            self.report(MalformedRelationError(
                f"multiplicity {end.multiplicity!r} of '{end.name}' is not mapped",
                entity=self.entity.name,
            ))
            return None

        tags = extract_tags(end.tags)
        return RelationHint(
            accessor=f"{end.name}{suffix}",
            relation=f"{suffix[:1].lower()}{suffix[1:]}",
            reference_name=end.name,
            foreign_key=str(tag_value(tags, "foreignKey", "")),
            local_key=str(tag_value(tags, "localKey", "")),
            foreign_table=str(tag_value(tags, "foreignTable", "")),
            local_table=str(tag_value(tags, "localTable", "")),
        )
