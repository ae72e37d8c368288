"""
Shared test fixtures.
"""

from datetime import datetime

import pytest

from laragen.core.types import (
    AssociationEnd,
    AssociationMetadata,
    AttributeMetadata,
    ClassEntity,
    ColumnMetadata,
    ColumnReference,
    TableEntity,
    Tag,
)

FIXED_INSTANT = datetime(2024, 3, 7, 9, 5, 2)


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same instant."""
    return lambda: FIXED_INSTANT


@pytest.fixture
def users_table() -> TableEntity:
    return TableEntity(
        name="users",
        columns=[
            ColumnMetadata(name="id", type="BIGINCREMENTS"),
            ColumnMetadata(name="email", type="VARCHAR", length=255, unique=True),
            ColumnMetadata(name="nickname", type="VARCHAR", length=255, nullable=True),
            ColumnMetadata(
                name="active",
                type="BOOLEAN",
                tags=[Tag(name="default", value="true")],
            ),
        ],
    )


@pytest.fixture
def posts_table() -> TableEntity:
    return TableEntity(
        name="posts",
        columns=[
            ColumnMetadata(name="id", type="BIGINCREMENTS"),
            ColumnMetadata(
                name="user_id",
                type="BIGINT",
                foreign_key=True,
                reference_to=ColumnReference(column="id", table="users"),
            ),
            ColumnMetadata(
                name="category_id",
                type="BIGINT",
                nullable=True,
                foreign_key=True,
                reference_to=ColumnReference(column="id", table="categories"),
                tags=[Tag(name="onDelete", value="set null")],
            ),
            ColumnMetadata(name="title", type="VARCHAR", length=120),
            ColumnMetadata(name="body", type="TEXT"),
        ],
        tags=[
            Tag(name="index", value="['title']"),
            Tag(name="unique", value="['user_id', 'title']"),
        ],
    )


@pytest.fixture
def user_class() -> ClassEntity:
    return ClassEntity(
        name="User",
        attributes=[
            AttributeMetadata(name="name", type="string"),
            AttributeMetadata(name="email", type="string"),
            AttributeMetadata(name="password", type="string", visibility="private"),
            AttributeMetadata(name="remember_token", visibility="protected"),
        ],
        associations=[
            AssociationMetadata(
                end1=AssociationEnd(name="User", multiplicity="1"),
                end2=AssociationEnd(
                    name="Post",
                    multiplicity="0..*",
                    tags=[Tag(name="foreignKey", value="author_id")],
                ),
            ),
        ],
        tags=[
            Tag(name="authenticatable"),
            Tag(name="notifiable"),
            Tag(name="hasApiToken"),
        ],
    )
