"""
Schema migration generator.

Turns a table description into a Laravel migration class whose ``up``
method creates the table and whose ``down`` method drops it.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from laragen.codegen.emitter import format_scalar
from laragen.codegen.generator import CodeGenerator
from laragen.codegen.model import (
    Block,
    ClassModel,
    MethodBody,
    MethodDefinition,
    ReturnAnnotation,
    Statement,
)
from laragen.core.errors import MissingReferenceError, UnmappedColumnTypeError
from laragen.core.mappings import COLUMN_TYPE_METHODS, INDEX_METHODS, column_method
from laragen.core.tags import TagMap, extract_tags, tag_value
from laragen.core.types import ColumnMetadata, TableEntity, Visibility
from laragen.logging import get_logger, with_log_context
from laragen.utils.defaults import DEFAULT_LEGACY, GenerationDefaults

logger = get_logger(__name__)

MIGRATION_IMPORTS = (
    "Illuminate\\Support\\Facades\\Schema;",
    "Illuminate\\Database\\Schema\\Blueprint;",
    "Illuminate\\Database\\Migrations\\Migration;",
)


def migration_file_name(table_name: str, at: datetime) -> str:
    """
    Build a migration file name (without extension).

    Laravel orders migrations by the timestamp prefix:
    ``yyyy_mm_dd_hhmmss_create_<table>_table``.
    """
    return f"{at.year}_{at.month:02d}_{at.day:02d}_{at:%H%M%S}_create_{table_name}_table"


def format_default(value: Any) -> str:
    """
    Render a column default.

    Strings are raw PHP and pass through untouched; other scalars use the
    PHP literal for the value.
    """
    if isinstance(value, str):
        return value
    return format_scalar(value)


class MigrationCodeGenerator(CodeGenerator):
    """
    Generates a migration class for one table.

    Example output:
        class CreateUsersTable extends Migration
        {
            public function up()
            {
                Schema::create('users', function (Blueprint $table) {
                    $table->string("email", 255)->unique()
                });
            }
            ...
        }

    Columns with an unknown type are left out and reported on the result.
    """

    kind = "migration"

    def __init__(
        self,
        entity: TableEntity,
        *,
        defaults: GenerationDefaults = DEFAULT_LEGACY,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initialize the generator.

        Args:
            entity: Table description
            defaults: Output conventions
            clock: Source of the timestamp used in the file name
        """
        super().__init__(entity, defaults=defaults)
        self.clock = clock

    @property
    def table_name(self) -> str:
        return self.entity.name

    def class_name(self) -> str:
        name = self.table_name
        return f"Create{name[:1].upper()}{name[1:]}{self.defaults.migration_class_suffix}"

    def file_name(self) -> str:
        return migration_file_name(self.table_name, self.clock())

    def build_class(self) -> ClassModel:
        """Translate the table into a migration ClassModel."""
        self.errors = []
        logger.debug("Building migration", column_count=len(self.entity.columns))

        model = ClassModel(self.class_name())
        for statement in MIGRATION_IMPORTS:
            model.add_import(statement)
        model.add_extend("Migration")

        up = MethodDefinition("up", Visibility.PUBLIC, "Run the migrations.")
        up.add_return(ReturnAnnotation(type="void"))
        up.body = self.up_body()

        down = MethodDefinition("down", Visibility.PUBLIC, "Reverse the migrations.")
        down.add_return(ReturnAnnotation(type="void"))
        down.body = self.down_body()

        model.add_method(up)
        model.add_method(down)
        return model

    def up_body(self) -> MethodBody:
        """Body that creates the table, its columns and its indexes."""
        statements: list[Statement] = []
        for column in self.entity.columns:
            with with_log_context(column=column.name):
                statements.extend(self.column_statements(column))

        statements.extend(self.index_statements(extract_tags(self.entity.tags)))

        return MethodBody((
            Block(
                opener=f"Schema::create('{self.table_name}', function (Blueprint $table) {{",
                children=tuple(statements),
                closer="});",
            ),
        ))

    def down_body(self) -> MethodBody:
        """Body that drops the table."""
        return MethodBody((
            Statement(f"Schema::dropIfExists('{self.table_name}');"),
        ))

    def column_statements(self, column: ColumnMetadata) -> list[Statement]:
        """
        Builder calls for one column.

        Returns an empty list when the column type cannot be mapped.
        """
        method = column_method(column.type)
        if method is None:
            self.report(UnmappedColumnTypeError(
                column.type,
                column=column.name,
                entity=self.table_name,
                known_types=list(COLUMN_TYPE_METHODS),
            ))
            return []

        tags = extract_tags(column.tags)

        if column.length and column.length > 0:
            args = f'"{column.name}", {column.length}'
        else:
            args = f"'{column.name}'"

        definition = f"$table->{method}({args})"
        if column.unique:
            definition += "->unique()"
        if column.nullable:
            definition += "->nullable()"
        default = tag_value(tags, "default")
        if default is not None:
            definition += f"->default({format_default(default)})"

        statements = [Statement(definition)]
        foreign = self.foreign_statement(column, tags)
        if foreign is not None:
            statements.append(foreign)
        return statements

    def foreign_statement(self, column: ColumnMetadata, tags: TagMap) -> Statement | None:
        """Foreign key clause for a column, if it is a foreign key."""
        if not column.foreign_key:
            return None

        reference = column.reference_to
        if reference is None:
            self.report(MissingReferenceError(column.name, entity=self.table_name))
            return None

        on_delete = tag_value(tags, "onDelete", self.defaults.default_on_delete)
        return Statement(
            f"$table->foreign('{column.name}')"
            f"->references('{reference.column}')"
            f"->on('{reference.table}')"
            f"->onDelete('{on_delete}')"
        )

    def index_statements(self, tags: TagMap) -> list[Statement]:
        """Index builder calls for the table-level index tags."""
        statements = []
        for tag_name, method in INDEX_METHODS.items():
            value = tag_value(tags, tag_name)
            if value is None:
                continue
            statements.append(Statement(f"$table->{method}({value})"))
        return statements
