"""Unit tests for embeddable value objects."""

from __future__ import annotations

import pytest

from fluent_mapping.builders.builder import MappingBuilder
from fluent_mapping.core.exceptions import (
    DuplicateMappingError,
    InvalidStateError,
    MetadataNotFoundError,
)
from fluent_mapping.metadata.builder import ClassMetadataBuilder
from fluent_mapping.metadata.model import ClassMetadata
from fluent_mapping.metadata.registry import MetadataRegistry


@pytest.fixture
def address(embeddable_builder: MappingBuilder, registry: MetadataRegistry) -> ClassMetadata:
    """Registered ``app.Address`` embeddable with street and city columns."""
    embeddable_builder.string("street")
    embeddable_builder.string("city", lambda f: f.column_name("city_name"))
    for buildable in embeddable_builder.get_queued():
        buildable.build()
    metadata = embeddable_builder.metadata_builder.metadata
    registry.add(metadata)
    return metadata


def columns(builder: MappingBuilder) -> dict[str, str]:
    return {name: f.column_name for name, f in builder.metadata_builder.metadata.fields.items()}


class TestEmbeddedPrefix:
    def test_default_prefix(self, builder: MappingBuilder, address: ClassMetadata) -> None:
        builder.embed("address", "app.Address").build()
        assert columns(builder) == {
            "address.street": "address_street",
            "address.city": "address_city_name",
        }

    def test_custom_prefix(self, builder: MappingBuilder, address: ClassMetadata) -> None:
        builder.embed("billing", "app.Address", lambda e: e.prefix("bill_")).build()
        assert columns(builder) == {
            "billing.street": "bill_street",
            "billing.city": "bill_city_name",
        }

    def test_no_prefix(self, builder: MappingBuilder, address: ClassMetadata) -> None:
        builder.embed("address", "app.Address").no_prefix().build()
        assert list(columns(builder).values()) == ["street", "city_name"]

    def test_inlined_fields_remember_owner(
        self, builder: MappingBuilder, address: ClassMetadata
    ) -> None:
        builder.embed("address", "app.Address").build()
        metadata = builder.metadata_builder.metadata
        assert metadata.fields["address.street"].embedded_in == "address"
        assert metadata.embedded["address"].class_name == "app.Address"
        assert address.fields["street"].embedded_in is None

    def test_embed_twice_with_different_prefixes(
        self, builder: MappingBuilder, address: ClassMetadata
    ) -> None:
        builder.embed("home", "app.Address").build()
        builder.embed("work", "app.Address").build()
        assert len(builder.metadata_builder.metadata.fields) == 4


class TestEmbeddedErrors:
    def test_missing_embeddable(self, builder: MappingBuilder) -> None:
        embedded = builder.embed("address", "app.Address")
        with pytest.raises(MetadataNotFoundError, match="app.Address"):
            embedded.build()

    def test_without_registry(self) -> None:
        builder = MappingBuilder(ClassMetadataBuilder(ClassMetadata(name="app.User")))
        with pytest.raises(MetadataNotFoundError):
            builder.embed("address", "app.Address").build()

    def test_target_not_embeddable(
        self, builder: MappingBuilder, registry: MetadataRegistry
    ) -> None:
        registry.add(ClassMetadata(name="app.Team"))
        with pytest.raises(InvalidStateError, match="not an embeddable"):
            builder.embed("team", "app.Team").build()

    def test_column_collision(self, builder: MappingBuilder, address: ClassMetadata) -> None:
        builder.string("street").build()
        with pytest.raises(DuplicateMappingError, match="street"):
            builder.embed("address", "app.Address").no_prefix().build()

    def test_loader_resolves_on_demand(self, builder: MappingBuilder, registry: MetadataRegistry) -> None:
        requested: list[str] = []

        def load(class_name: str) -> ClassMetadata:
            requested.append(class_name)
            return ClassMetadata(name=class_name, is_embedded_class=True)

        registry.set_loader(load)
        builder.embed("address", "app.Address").build()
        assert requested == ["app.Address"]
        assert registry.has("app.Address")
