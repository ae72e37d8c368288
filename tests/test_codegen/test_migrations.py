"""Tests for the migration generator."""

from datetime import datetime

import pytest

from laragen.codegen.migrations import MigrationCodeGenerator, migration_file_name
from laragen.codegen.model import Block, MethodBody, Statement
from laragen.core.errors import (
    InvalidEntityError,
    MissingReferenceError,
    UnmappedColumnTypeError,
)
from laragen.core.types import ColumnMetadata, ColumnReference, TableEntity, Tag
from laragen.utils.defaults import DEFAULT_PSR12, GenerationDefaults


def body_lines(generator: MigrationCodeGenerator) -> list[str]:
    """Column and index lines inside the Schema::create block."""
    block = generator.up_body().nodes[0]
    assert isinstance(block, Block)
    return [child.text for child in block.children]


def single_column(column: ColumnMetadata, **kwargs) -> MigrationCodeGenerator:
    return MigrationCodeGenerator(TableEntity(name="items", columns=[column]), **kwargs)


class TestMigrationFileName:
    """Tests for migration file naming."""

    def test_fixed_instant(self):
        name = migration_file_name("orders", datetime(2024, 3, 7, 9, 5, 2))

        assert name == "2024_03_07_090502_create_orders_table"

    def test_generator_uses_clock(self, users_table: TableEntity, fixed_clock):
        generator = MigrationCodeGenerator(users_table, clock=fixed_clock)

        assert generator.file_name() == "2024_03_07_090502_create_users_table"

    def test_generated_file_path(self, users_table: TableEntity, fixed_clock):
        result = MigrationCodeGenerator(users_table, clock=fixed_clock).generate()

        assert len(result.files) == 1
        assert result.files[0].path == "2024_03_07_090502_create_users_table.php"
        assert result.files[0].class_name == "CreateUsersTable"


class TestMigrationClass:
    """Tests for the migration ClassModel."""

    def test_class_name(self, users_table: TableEntity):
        model = MigrationCodeGenerator(users_table).build_class()

        assert model.name == "CreateUsersTable"

    def test_imports_and_base(self, users_table: TableEntity):
        model = MigrationCodeGenerator(users_table).build_class()

        assert model.imports == [
            "Illuminate\\Support\\Facades\\Schema;",
            "Illuminate\\Database\\Schema\\Blueprint;",
            "Illuminate\\Database\\Migrations\\Migration;",
        ]
        assert model.extends == ["Migration"]

    def test_up_and_down_methods(self, users_table: TableEntity):
        model = MigrationCodeGenerator(users_table).build_class()

        assert [method.name for method in model.methods] == ["up", "down"]
        assert [method.description for method in model.methods] == [
            "Run the migrations.",
            "Reverse the migrations.",
        ]
        assert all(method.returns[0].type == "void" for method in model.methods)

    def test_down_body(self, users_table: TableEntity):
        generator = MigrationCodeGenerator(users_table)

        assert generator.down_body() == MethodBody((
            Statement("Schema::dropIfExists('users');"),
        ))

    def test_down_present_without_columns(self):
        model = MigrationCodeGenerator(TableEntity(name="empty")).build_class()

        assert [method.name for method in model.methods] == ["up", "down"]

    def test_custom_suffix_from_defaults(self, users_table: TableEntity):
        defaults = GenerationDefaults(mode="legacy", migration_class_suffix="Migration")
        generator = MigrationCodeGenerator(users_table, defaults=defaults)

        assert generator.class_name() == "CreateUsersMigration"

    def test_class_name_capitalizes_first_letter_only(self):
        generator = MigrationCodeGenerator(TableEntity(name="order_items"))

        assert generator.class_name() == "CreateOrder_itemsTable"

    def test_psr12_indentation(self, users_table: TableEntity, fixed_clock):
        result = MigrationCodeGenerator(
            users_table, defaults=DEFAULT_PSR12, clock=fixed_clock
        ).generate()

        assert "            $table->bigIncrements('id')\n" in result.files[0].content

    def test_blank_name_is_fatal(self):
        with pytest.raises(InvalidEntityError):
            MigrationCodeGenerator(TableEntity(name="  "))


class TestColumns:
    """Tests for column builder calls."""

    def test_string_with_length_nullable(self):
        generator = single_column(
            ColumnMetadata(name="col", type="VARCHAR", length=255, nullable=True)
        )

        assert body_lines(generator) == ['$table->string("col", 255)->nullable()']

    def test_no_length_uses_single_quotes(self):
        generator = single_column(ColumnMetadata(name="age", type="INTEGER"))

        assert body_lines(generator) == ["$table->integer('age')"]

    def test_zero_length_is_ignored(self):
        generator = single_column(ColumnMetadata(name="age", type="INTEGER", length=0))

        assert body_lines(generator) == ["$table->integer('age')"]

    def test_modifier_order(self):
        """Test unique, nullable and default chain in that order."""
        generator = single_column(ColumnMetadata(
            name="code",
            type="CHAR",
            length=8,
            unique=True,
            nullable=True,
            tags=[Tag(name="default", value="'AAAA0000'")],
        ))

        assert body_lines(generator) == [
            "$table->char(\"code\", 8)->unique()->nullable()->default('AAAA0000')"
        ]

    def test_default_tag_without_value_is_ignored(self):
        generator = single_column(ColumnMetadata(
            name="flag", type="BOOLEAN", tags=[Tag(name="default")]
        ))

        assert body_lines(generator) == ["$table->boolean('flag')"]

    def test_boolean_default_uses_php_keyword(self):
        generator = single_column(ColumnMetadata(
            name="flag", type="BOOLEAN", tags=[Tag(name="default", value=False)]
        ))

        assert body_lines(generator) == ["$table->boolean('flag')->default(false)"]

    def test_numeric_default_is_bare(self):
        generator = single_column(ColumnMetadata(
            name="stock", type="INTEGER", tags=[Tag(name="default", value=0)]
        ))

        assert body_lines(generator) == ["$table->integer('stock')->default(0)"]

    def test_type_lookup_ignores_case(self):
        generator = single_column(ColumnMetadata(name="born", type=" date "))

        assert body_lines(generator) == ["$table->date('born')"]

    def test_columns_keep_order(self, users_table: TableEntity):
        generator = MigrationCodeGenerator(users_table)

        assert body_lines(generator) == [
            "$table->bigIncrements('id')",
            '$table->string("email", 255)->unique()',
            '$table->string("nickname", 255)->nullable()',
            "$table->boolean('active')->default(true)",
        ]


class TestUnmappedTypes:
    """Tests for columns whose type cannot be mapped."""

    def test_column_skipped_and_reported(self):
        entity = TableEntity(
            name="photos",
            columns=[
                ColumnMetadata(name="id", type="INTEGER"),
                ColumnMetadata(name="raw", type="IMAGE"),
                ColumnMetadata(name="caption", type="TEXT"),
            ],
        )
        generator = MigrationCodeGenerator(entity)

        assert body_lines(generator) == [
            "$table->integer('id')",
            "$table->text('caption')",
        ]
        assert len(generator.errors) == 1
        error = generator.errors[0]
        assert isinstance(error, UnmappedColumnTypeError)
        assert error.details == {"column_type": "IMAGE", "column": "raw", "entity": "photos"}
        assert error.message == "Column type (IMAGE) is not defined in laravel"

    def test_result_carries_error(self, fixed_clock):
        entity = TableEntity(name="photos", columns=[ColumnMetadata(name="raw", type="IMAGE")])

        result = MigrationCodeGenerator(entity, clock=fixed_clock).generate()

        assert not result.ok
        assert result.warnings == ["Column type (IMAGE) is not defined in laravel"]
        assert "raw" not in result.files[0].content
        assert "Schema::dropIfExists('photos');" in result.files[0].content

    def test_errors_reset_between_builds(self):
        entity = TableEntity(name="photos", columns=[ColumnMetadata(name="raw", type="IMAGE")])
        generator = MigrationCodeGenerator(entity)

        generator.build_class()
        generator.build_class()

        assert len(generator.errors) == 1


class TestForeignKeys:
    """Tests for foreign key clauses."""

    def test_default_on_delete(self):
        generator = single_column(ColumnMetadata(
            name="col",
            type="BIGINT",
            foreign_key=True,
            reference_to=ColumnReference(column="id", table="users"),
        ))

        assert body_lines(generator) == [
            "$table->bigInteger('col')",
            "$table->foreign('col')->references('id')->on('users')->onDelete('cascade')",
        ]

    def test_on_delete_override(self, posts_table: TableEntity):
        lines = body_lines(MigrationCodeGenerator(posts_table))

        assert (
            "$table->foreign('category_id')->references('id')->on('categories')"
            "->onDelete('set null')"
        ) in lines

    def test_foreign_follows_its_column(self, posts_table: TableEntity):
        lines = body_lines(MigrationCodeGenerator(posts_table))

        column = lines.index("$table->bigInteger('user_id')")
        assert lines[column + 1].startswith("$table->foreign('user_id')")

    def test_reference_without_flag_is_ignored(self):
        generator = single_column(ColumnMetadata(
            name="col",
            type="BIGINT",
            reference_to=ColumnReference(column="id", table="users"),
        ))

        assert body_lines(generator) == ["$table->bigInteger('col')"]

    def test_missing_reference_is_reported(self):
        generator = single_column(ColumnMetadata(name="owner_id", type="BIGINT", foreign_key=True))

        assert body_lines(generator) == ["$table->bigInteger('owner_id')"]
        assert len(generator.errors) == 1
        assert isinstance(generator.errors[0], MissingReferenceError)


class TestIndexes:
    """Tests for table-level index tags."""

    def test_indexes_follow_columns_in_table_order(self, posts_table: TableEntity):
        lines = body_lines(MigrationCodeGenerator(posts_table))

        assert lines[-2:] == [
            "$table->unique(['user_id', 'title'])",
            "$table->index(['title'])",
        ]

    def test_unknown_table_tags_are_ignored(self):
        entity = TableEntity(
            name="logs",
            columns=[ColumnMetadata(name="id", type="ID")],
            tags=[Tag(name="engine", value="InnoDB")],
        )

        assert body_lines(MigrationCodeGenerator(entity)) == ["$table->id('id')"]


class TestRenderedMigration:
    """Tests for the complete rendered migration."""

    def test_full_output(self, fixed_clock):
        entity = TableEntity(
            name="orders",
            columns=[
                ColumnMetadata(name="id", type="ID"),
                ColumnMetadata(
                    name="user_id",
                    type="BIGINT",
                    foreign_key=True,
                    reference_to=ColumnReference(column="id", table="users"),
                ),
            ],
            tags=[Tag(name="index", value="'user_id'")],
        )

        result = MigrationCodeGenerator(entity, clock=fixed_clock).generate()

        assert result.ok
        assert result.files[0].content == "\n".join([
            "<?php",
            "",
            "use Illuminate\\Support\\Facades\\Schema;",
            "use Illuminate\\Database\\Schema\\Blueprint;",
            "use Illuminate\\Database\\Migrations\\Migration;",
            "",
            "class CreateOrdersTable extends Migration",
            "{",
            "\t/**",
            "\t * Run the migrations.",
            "\t *",
            "\t * @return void",
            "\t */",
            "\tpublic function up()",
            "\t{",
            "\t\tSchema::create('orders', function (Blueprint $table) {",
            "\t\t\t$table->id('id')",
            "\t\t\t$table->bigInteger('user_id')",
            "\t\t\t$table->foreign('user_id')->references('id')->on('users')->onDelete('cascade')",
            "\t\t\t$table->index('user_id')",
            "\t\t});",
            "\t}",
            "",
            "\t/**",
            "\t * Reverse the migrations.",
            "\t *",
            "\t * @return void",
            "\t */",
            "\tpublic function down()",
            "\t{",
            "\t\tSchema::dropIfExists('orders');",
            "\t}",
            "",
            "}",
        ]) + "\n"

    def test_independent_generations_do_not_share_state(self, users_table, posts_table):
        first = MigrationCodeGenerator(users_table).generate()
        second = MigrationCodeGenerator(posts_table).generate()

        assert "foreign(" not in first.files[0].content
        assert "Schema::create('posts'" in second.files[0].content
        assert "Schema::create('users'" not in second.files[0].content
