"""Unit tests for table and entity-level settings."""

from __future__ import annotations

import pytest

from fluent_mapping.builders.builder import MappingBuilder
from fluent_mapping.core.enums import InheritanceType
from fluent_mapping.core.exceptions import InvalidArgumentError, UnknownTypeError
from fluent_mapping.metadata.model import DiscriminatorColumn


class Admin:
    pass


class UserRepository:
    pass


class TestTable:
    def test_schema_and_options(self, builder: MappingBuilder) -> None:
        builder.table("users").schema("auth").charset("utf8mb4").collate("utf8mb4_unicode_ci")
        table = builder.metadata_builder.metadata.table
        assert (table.name, table.schema) == ("users", "auth")
        assert table.options == {"charset": "utf8mb4", "collate": "utf8mb4_unicode_ci"}

    def test_options_dict(self, builder: MappingBuilder) -> None:
        builder.table("users").options({"engine": "InnoDB", "comment": "people"})
        assert builder.metadata_builder.metadata.table.options["engine"] == "InnoDB"

    def test_indexes_and_unique_constraints(self, builder: MappingBuilder) -> None:
        builder.table("users", lambda t: t.index(["last_name", "first_name"]).unique("email"))
        table = builder.metadata_builder.metadata.table
        assert table.indexes == {"idx_last_name_first_name": ("last_name", "first_name")}
        assert table.unique_constraints == {"uniq_email": ("email",)}

    def test_named_index(self, builder: MappingBuilder) -> None:
        builder.table("users").index("email", name="users_email")
        assert "users_email" in builder.metadata_builder.metadata.table.indexes

    def test_get_and_set_name(self, builder: MappingBuilder) -> None:
        table = builder.table("users")
        assert table.get_name() == "users"
        table.set_name("members")
        assert table.get_name() == "members"

    def test_applied_without_commit(self, builder: MappingBuilder) -> None:
        builder.table("users")
        assert builder.get_queued() == ()


class TestEntity:
    def test_repository_class_and_read_only(self, builder: MappingBuilder) -> None:
        builder.entity(lambda e: e.set_repository_class(UserRepository).read_only())
        metadata = builder.metadata_builder.metadata
        assert metadata.repository_class.endswith("UserRepository")
        assert metadata.read_only is True

    def test_single_table_inheritance_defaults(self, builder: MappingBuilder) -> None:
        builder.entity().single_table_inheritance()
        metadata = builder.metadata_builder.metadata
        assert metadata.inheritance_type is InheritanceType.SINGLE_TABLE
        assert metadata.discriminator_column == DiscriminatorColumn("dtype", "string", 255)

    def test_joined_inheritance_with_map(self, builder: MappingBuilder) -> None:
        builder.entity().joined_table_inheritance(
            lambda i: i.column("kind", "string", 32).map("admin", Admin).map({"user": "app.User"})
        )
        metadata = builder.metadata_builder.metadata
        assert metadata.inheritance_type is InheritanceType.JOINED
        assert metadata.discriminator_column.name == "kind"
        assert metadata.discriminator_column.length == 32
        assert metadata.discriminator_map["admin"].endswith("Admin")
        assert metadata.discriminator_map["user"] == "app.User"

    def test_inheritance_by_name(self, builder: MappingBuilder) -> None:
        builder.entity().inheritance("joined")
        assert builder.metadata_builder.metadata.inheritance_type is InheritanceType.JOINED

    @pytest.mark.parametrize("value", ["none", "table_per_class"])
    def test_invalid_inheritance(self, builder: MappingBuilder, value: str) -> None:
        with pytest.raises(InvalidArgumentError):
            builder.entity().inheritance(value)

    def test_discriminator_type_must_be_known(self, builder: MappingBuilder) -> None:
        inheritance = builder.entity().single_table_inheritance()
        with pytest.raises(UnknownTypeError):
            inheritance.column("kind", "varchar")

    def test_map_value_needs_class(self, builder: MappingBuilder) -> None:
        with pytest.raises(InvalidArgumentError, match="admin"):
            builder.entity().single_table_inheritance().map("admin")
