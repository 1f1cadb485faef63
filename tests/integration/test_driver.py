"""Integration test for the fluent driver.

Covers: mapping registration, on-demand embeddable loading, driver macros,
relation resolution across classes, and queue commit semantics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

import pytest

from fluent_mapping.builders.builder import MappingBuilder
from fluent_mapping.core.config import MappingConfig
from fluent_mapping.core.enums import GenerationStrategy, RelationKind
from fluent_mapping.core.exceptions import (
    InvalidArgumentError,
    MappingNotFoundError,
    MetadataNotFoundError,
    MethodNotFoundError,
    MissingInverseSideError,
)
from fluent_mapping.driver import (
    EmbeddableMapping,
    EntityMapping,
    FluentDriver,
    MappedSuperClassMapping,
    commit,
)
from fluent_mapping.metadata.builder import ClassMetadataBuilder
from fluent_mapping.metadata.model import ClassMetadata, class_name_of

# --- Domain ---


@dataclass
class Address:
    street: str
    city: str
    postal_code: str


@dataclass
class Timestamped:
    created_at: datetime
    updated_at: datetime | None = None


@dataclass
class Tag:
    id: int
    name: str


@dataclass
class User(Timestamped):
    id: int = 0
    email: str = ""
    address: Address | None = None
    tags: list[Tag] = field(default_factory=list)


@dataclass
class BlogPost:
    id: int
    title: str
    author: User
    version: int = 1


# --- Mappings ---


def timestamps(builder: MappingBuilder) -> None:
    builder.date_time("created_at")
    builder.date_time("updated_at").nullable()


class AddressMapping(EmbeddableMapping):
    def map_for(self) -> type:
        return Address

    def map(self, builder: MappingBuilder) -> None:
        builder.string("street")
        builder.string("city")
        builder.string("postal_code", lambda f: f.length(10))


class TimestampedMapping(MappedSuperClassMapping):
    def map_for(self) -> type:
        return Timestamped

    def map(self, builder: MappingBuilder) -> None:
        builder.timestamps()


class UserMapping(EntityMapping):
    def map_for(self) -> type:
        return User

    def map(self, builder: MappingBuilder) -> None:
        builder.table("users", lambda t: t.unique("email"))
        builder.increments("id")
        builder.string("email").unique()
        builder.embed("address", Address)
        builder.has_many("posts", BlogPost).mapped_by("author").order_by("id", "desc")
        builder.belongs_to_many("tags", Tag).cascade_persist()
        builder.timestamps()


class BlogPostMapping(EntityMapping):
    def map_for(self) -> type:
        return BlogPost

    def map(self, builder: MappingBuilder) -> None:
        builder.increments("id")
        builder.string("title", lambda f: f.length(200))
        builder.belongs_to("author", User).nullable(False).on_delete("cascade")
        builder.integer("version").use_for_versioning()


class TagMapping(EntityMapping):
    def map_for(self) -> type:
        return Tag

    def map(self, builder: MappingBuilder) -> None:
        builder.increments("id")
        builder.string("name").unique()
        builder.belongs_to_many("users", User).mapped_by("tags")


def all_mappings() -> list[EntityMapping]:
    return [AddressMapping(), TimestampedMapping(), UserMapping(), BlogPostMapping(), TagMapping()]


@pytest.fixture
def driver() -> FluentDriver:
    driver = FluentDriver(all_mappings())
    driver.macro("timestamps", timestamps)
    return driver


# --- Tests ---


class TestDriverRegistration:
    def test_class_names(self, driver: FluentDriver) -> None:
        assert driver.get_all_class_names() == sorted(
            class_name_of(cls) for cls in (Address, Timestamped, User, BlogPost, Tag)
        )

    def test_is_transient(self, driver: FluentDriver) -> None:
        assert not driver.is_transient(User)
        assert driver.is_transient(datetime)
        assert driver.is_transient("app.Unknown")

    def test_add_mapping_type_checked(self, driver: FluentDriver) -> None:
        with pytest.raises(InvalidArgumentError, match="EntityMapping"):
            driver.add_mapping(object())  # type: ignore[arg-type]

    def test_unknown_class(self, driver: FluentDriver) -> None:
        with pytest.raises(MappingNotFoundError, match="app.Unknown"):
            driver.load_metadata_for_class("app.Unknown")

    def test_macro_validated(self, driver: FluentDriver) -> None:
        with pytest.raises(InvalidArgumentError):
            driver.macro("string", timestamps)

    def test_missing_macro(self) -> None:
        driver = FluentDriver([TimestampedMapping()])
        with pytest.raises(MethodNotFoundError, match=r"\[timestamps\]"):
            driver.load_metadata_for_class(Timestamped)


class TestLoadMetadata:
    def test_user(self, driver: FluentDriver) -> None:
        metadata = driver.load_metadata_for_class(User)

        assert metadata.table.name == "users"
        assert metadata.table.unique_constraints == {"uniq_email": ("email",)}
        assert metadata.identifier == ["id"]
        assert metadata.generator.strategy is GenerationStrategy.AUTO
        assert metadata.fields["email"].unique is True
        assert metadata.fields["updated_at"].nullable is True
        assert metadata.column_names == [
            "id",
            "email",
            "address_street",
            "address_city",
            "address_postal_code",
            "created_at",
            "updated_at",
        ]

        posts = metadata.associations["posts"]
        assert posts.kind is RelationKind.ONE_TO_MANY
        assert posts.mapped_by == "author"
        assert posts.order_by == {"id": "DESC"}

        tags = metadata.associations["tags"]
        assert tags.join_table.name == "user_tag"
        assert [c.name for c in tags.join_table.join_columns] == ["user_id"]
        assert [c.name for c in tags.join_table.inverse_join_columns] == ["tag_id"]

    def test_embeddable_loaded_on_demand(self, driver: FluentDriver) -> None:
        driver.load_metadata_for_class(User)
        address = driver.registry.find(class_name_of(Address))
        assert address is not None
        assert address.is_embedded_class
        assert address.table.name is None
        assert address.fields["postal_code"].length == 10

    def test_default_table_name_and_foreign_key(self, driver: FluentDriver) -> None:
        metadata = driver.load_metadata_for_class(BlogPost)
        assert metadata.table.name == "BlogPost"
        assert metadata.version_field == "version"
        join_column = metadata.associations["author"].join_columns[0]
        assert (join_column.name, join_column.nullable, join_column.on_delete) == (
            "author_id",
            False,
            "CASCADE",
        )

    def test_mapped_superclass(self, driver: FluentDriver) -> None:
        metadata = driver.load_metadata_for_class(Timestamped)
        assert metadata.is_mapped_superclass
        assert metadata.table.name is None
        assert list(metadata.fields) == ["created_at", "updated_at"]

    def test_inverse_many_to_many(self, driver: FluentDriver) -> None:
        users = driver.load_metadata_for_class(Tag).associations["users"]
        assert users.mapped_by == "tags"
        assert users.join_table is None

    def test_load_all(self, driver: FluentDriver) -> None:
        loaded = driver.load_all()
        assert [m.name for m in loaded] == driver.get_all_class_names()
        assert len(driver.registry) == 5

    def test_registry_get_loads(self, driver: FluentDriver) -> None:
        metadata = driver.registry.get(class_name_of(Tag))
        assert metadata.table.name == "Tag"
        assert driver.registry.get(class_name_of(Tag)) is metadata

    def test_logs_loaded_class(self, driver: FluentDriver, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="fluent_mapping"):
            driver.load_metadata_for_class(Tag)
        assert f"Loaded metadata for {class_name_of(Tag)}" in caplog.text


class TestConfiguredDriver:
    def test_underscore_naming_and_identity(self) -> None:
        config = MappingConfig(naming_strategy="underscore", default_generation_strategy="identity")
        driver = FluentDriver(all_mappings(), config=config)
        driver.macro("timestamps", timestamps)

        post = driver.load_metadata_for_class(BlogPost)
        assert post.table.name == "blog_post"
        assert post.generator.strategy is GenerationStrategy.IDENTITY

        user = driver.load_metadata_for_class(User)
        assert user.associations["tags"].join_table.name == "user_tag"
        assert user.fields["created_at"].column_name == "created_at"


class TestCommit:
    def _builder(self, driver: FluentDriver) -> MappingBuilder:
        metadata_builder = ClassMetadataBuilder(
            ClassMetadata(name=class_name_of(User)),
            driver.naming_strategy,
            registry=driver.registry,
        )
        builder = MappingBuilder(metadata_builder)
        builder.macro("timestamps", timestamps)
        UserMapping().map(builder)
        return builder

    def test_commit_equals_building_each_declaration(self, driver: FluentDriver) -> None:
        committed = self._builder(driver)
        assert commit(committed) == len(committed.get_queued())

        manual = self._builder(driver)
        for buildable in manual.get_queued():
            buildable.build()

        assert committed.metadata_builder.metadata == manual.metadata_builder.metadata

    def test_commit_empty_queue(self) -> None:
        builder = MappingBuilder(ClassMetadataBuilder(ClassMetadata(name="app.Empty")))
        assert commit(builder) == 0
        assert builder.metadata_builder.metadata.fields == {}


class CodedTagMapping(EntityMapping):
    def map_for(self) -> str:
        return "app.Tag"

    def map(self, builder: MappingBuilder) -> None:
        builder.string("code").primary()


class MemberMapping(EntityMapping):
    def map_for(self) -> str:
        return "app.Member"

    def map(self, builder: MappingBuilder) -> None:
        builder.increments("id")
        builder.embed("address", "app.Address")


class TaggedMemberMapping(EntityMapping):
    def __init__(self, posts_mapped_by: str | None = "member") -> None:
        self._posts_mapped_by = posts_mapped_by

    def map_for(self) -> str:
        return "app.Member"

    def map(self, builder: MappingBuilder) -> None:
        builder.increments("id")
        builder.belongs_to_many("tags", "app.Tag")
        builder.belongs_to("favourite", "app.Tag")
        posts = builder.has_many("posts", "app.Post")
        if self._posts_mapped_by is not None:
            posts.mapped_by(self._posts_mapped_by)


class MemberPostMapping(EntityMapping):
    def map_for(self) -> str:
        return "app.Post"

    def map(self, builder: MappingBuilder) -> None:
        builder.increments("id")
        builder.belongs_to("member", "app.Member")


def load_member(*, target_first: bool, posts_mapped_by: str | None = "member") -> ClassMetadata:
    driver = FluentDriver(
        [CodedTagMapping(), MemberPostMapping(), TaggedMemberMapping(posts_mapped_by)]
    )
    if target_first:
        driver.load_metadata_for_class("app.Tag")
        driver.load_metadata_for_class("app.Post")
    return driver.load_metadata_for_class("app.Member")


class TestLoadOrder:
    def test_join_metadata_independent_of_load_order(self) -> None:
        cold = load_member(target_first=False)
        warm = load_member(target_first=True)
        assert cold == warm

        join_table = warm.associations["tags"].join_table
        assert join_table.name == "member_tag"
        assert [(c.name, c.referenced_column_name) for c in join_table.inverse_join_columns] == [
            ("tag_id", "id")
        ]
        favourite = warm.associations["favourite"].join_columns[0]
        assert (favourite.name, favourite.referenced_column_name) == ("favourite_id", "id")
        assert warm.associations["posts"].mapped_by == "member"

    @pytest.mark.parametrize("target_first", [False, True])
    def test_one_to_many_needs_mapped_by_in_any_order(self, target_first: bool) -> None:
        with pytest.raises(MissingInverseSideError, match="posts"):
            load_member(target_first=target_first, posts_mapped_by=None)


class TestMissingEmbeddable:
    def test_unmapped_embeddable(self) -> None:
        driver = FluentDriver([MemberMapping()])
        with pytest.raises(MetadataNotFoundError, match="app.Address") as exc_info:
            driver.load_metadata_for_class("app.Member")
        assert exc_info.value.class_name == "app.Address"
        assert not driver.registry.has("app.Member")

    def test_mapping_not_found_is_metadata_not_found(self) -> None:
        error = MappingNotFoundError("app.Address")
        assert isinstance(error, MetadataNotFoundError)
        assert str(error) == "No mapping registered for class 'app.Address'"
