"""Tests for ResourceGenerator."""

from unittest.mock import AsyncMock

import pytest
from scaffold_codegen.resource import ResourceGenerator, ResourceScaffold
from scaffold_core.config import ConnectionConfig
from scaffold_core.exceptions import ConnectionNotConfiguredError, InvalidModelError, TableNotFoundError
from scaffold_core.schema.model import TableModel
from scaffold_introspect.providers.base import SchemaProvider
from scaffold_introspect.providers.sql import SQLSchemaProvider
from sqlalchemy import Boolean, Column, DateTime, Integer, MetaData, String, Table, Text
from sqlalchemy.ext.asyncio import create_async_engine


@pytest.fixture
def connection() -> ConnectionConfig:
    return ConnectionConfig(url="sqlite+aiosqlite:///:memory:")


@pytest.fixture
def provider(user_columns) -> AsyncMock:
    mock = AsyncMock(spec=SchemaProvider)
    mock.list_columns.return_value = user_columns
    return mock


class _DuckModel:
    def get_table(self) -> str:
        return "members"

    def get_key_name(self) -> str:
        return "member_id"

    def get_created_at_column(self) -> str | None:
        return None

    def get_updated_at_column(self) -> str | None:
        return None

    def get_connection_name(self) -> str:
        return "legacy"


class TestConstruction:
    def test_accepts_table_model(self, user_model, connection):
        generator = ResourceGenerator(user_model, connection=connection)
        assert generator.model is user_model
        assert isinstance(generator.provider, SQLSchemaProvider)

    def test_accepts_duck_typed_model(self, connection):
        generator = ResourceGenerator(_DuckModel(), connection=connection)
        assert generator.reserved_columns() == frozenset({"member_id", "deleted_at"})

    @pytest.mark.parametrize("model", ["App\\Models\\User", "users", None, 3])
    def test_invalid_model_rejected(self, model, connection):
        with pytest.raises(InvalidModelError, match="Invalid model"):
            ResourceGenerator(model, connection=connection)

    def test_from_connections(self, user_model, connection):
        generator = ResourceGenerator.from_connections(user_model, {"default": connection})
        assert generator.connection is connection

    def test_from_connections_missing_profile(self, connection):
        with pytest.raises(ConnectionNotConfiguredError, match="legacy"):
            ResourceGenerator.from_connections(_DuckModel(), {"default": connection})

    def test_from_connections_invalid_model(self, connection):
        with pytest.raises(InvalidModelError):
            ResourceGenerator.from_connections("users", {"default": connection})


class TestReservedColumns:
    def test_defaults(self, user_model, connection):
        generator = ResourceGenerator(user_model, connection=connection)
        assert generator.reserved_columns() == frozenset({"id", "created_at", "updated_at", "deleted_at"})

    def test_custom_names(self, connection):
        model = TableModel(table="posts", key_name="post_id", created_at_column="created", updated_at_column="modified")
        generator = ResourceGenerator(model, connection=connection)
        assert generator.reserved_columns() == frozenset({"post_id", "created", "modified", "deleted_at"})


class TestResolveTable:
    def test_plain_table(self, user_model, connection):
        assert ResourceGenerator(user_model, connection=connection).resolve_table() == (None, "users")

    def test_prefix_applied(self, user_model):
        connection = ConnectionConfig(url="sqlite+aiosqlite:///:memory:", table_prefix="app_")
        assert ResourceGenerator(user_model, connection=connection).resolve_table() == (None, "app_users")

    def test_database_qualifier_split(self, connection):
        model = TableModel(table="shop.orders")
        assert ResourceGenerator(model, connection=connection).resolve_table() == ("shop", "orders")

    def test_split_only_once(self, connection):
        model = TableModel(table="shop.orders.archive")
        assert ResourceGenerator(model, connection=connection).resolve_table() == ("shop", "orders.archive")

    def test_leading_dot_not_split(self, connection):
        model = TableModel(table=".orders")
        assert ResourceGenerator(model, connection=connection).resolve_table() == (None, ".orders")


class TestGenerate:
    async def test_generate_form(self, user_model, connection, provider):
        generator = ResourceGenerator(user_model, connection=connection, provider=provider)

        output = await generator.generate_form()

        provider.list_columns.assert_awaited_once_with(connection, "users", schema=None)
        assert output.splitlines() == [
            "$form->text('name', __('Name'));",
            "$form->email('email', __('Email'));",
            "$form->switch('is_admin', __('Is admin'))->default(0);",
            "$form->textarea('bio', __('Bio'));",
        ]

    async def test_generate_show_includes_reserved(self, user_model, connection, provider, user_columns):
        generator = ResourceGenerator(user_model, connection=connection, provider=provider)
        output = await generator.generate_show()
        assert len(output.splitlines()) == len(user_columns)
        assert "$show->field('id', __('Id'));" in output

    async def test_generate_grid_includes_reserved(self, user_model, connection, provider, user_columns):
        generator = ResourceGenerator(user_model, connection=connection, provider=provider)
        output = await generator.generate_grid()
        assert len(output.splitlines()) == len(user_columns)
        assert "$grid->column('created_at', __('Created at'));" in output

    async def test_generate_all_fetches_once(self, user_model, connection, provider):
        generator = ResourceGenerator(user_model, connection=connection, provider=provider)

        scaffold = await generator.generate_all()

        assert isinstance(scaffold, ResourceScaffold)
        assert scaffold.form == await generator.generate_form()
        assert scaffold.show == await generator.generate_show()
        assert scaffold.grid == await generator.generate_grid()
        assert provider.list_columns.await_count == 4

    async def test_qualified_table_passed_to_provider(self, connection, provider):
        generator = ResourceGenerator(TableModel(table="shop.users"), connection=connection, provider=provider)
        await generator.get_table_columns()
        provider.list_columns.assert_awaited_once_with(connection, "users", schema="shop")

    async def test_provider_errors_propagate(self, user_model, connection, provider):
        provider.list_columns.side_effect = TableNotFoundError(table="users", detail="missing")
        generator = ResourceGenerator(user_model, connection=connection, provider=provider)
        with pytest.raises(TableNotFoundError):
            await generator.generate_form()


async def test_end_to_end_with_sqlite(tmp_path):
    metadata = MetaData()
    Table(
        "posts",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("title", String(200)),
        Column("status", String(20), server_default="draft"),
        Column("cover", String(255)),
        Column("body", Text),
        Column("pinned", Boolean),
        Column("created_at", DateTime),
        Column("updated_at", DateTime),
    )
    url = f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}"
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    await engine.dispose()

    generator = ResourceGenerator(TableModel(table="posts"), connection=ConnectionConfig(url=url))
    scaffold = await generator.generate_all()

    assert scaffold.form == (
        "$form->text('title', __('Title'));\r\n"
        "$form->text('status', __('Status'))->default('draft');\r\n"
        "$form->image('cover', __('Cover'));\r\n"
        "$form->textarea('body', __('Body'));\r\n"
        "$form->switch('pinned', __('Pinned'));\r\n"
    )
    assert scaffold.grid.count("$grid->column(") == 8
    assert scaffold.show.count("$show->field(") == 8
