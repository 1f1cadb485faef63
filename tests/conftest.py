"""Shared test fixtures."""

from __future__ import annotations

import pytest

from fluent_mapping.builders.builder import MappingBuilder
from fluent_mapping.metadata.builder import ClassMetadataBuilder
from fluent_mapping.metadata.model import ClassMetadata
from fluent_mapping.metadata.registry import MetadataRegistry


@pytest.fixture
def registry() -> MetadataRegistry:
    """Empty metadata registry without a loader."""
    return MetadataRegistry()


@pytest.fixture
def metadata_builder(registry: MetadataRegistry) -> ClassMetadataBuilder:
    """Store for an ``app.User`` entity."""
    return ClassMetadataBuilder(ClassMetadata(name="app.User"), registry=registry)


@pytest.fixture
def builder(metadata_builder: ClassMetadataBuilder) -> MappingBuilder:
    """Mapping builder for ``app.User``."""
    return MappingBuilder(metadata_builder)


@pytest.fixture
def embeddable_builder(registry: MetadataRegistry) -> MappingBuilder:
    """Mapping builder for the ``app.Address`` embeddable."""
    metadata = ClassMetadata(name="app.Address", is_embedded_class=True)
    return MappingBuilder(ClassMetadataBuilder(metadata, registry=registry))


@pytest.fixture
def make_builder(registry: MetadataRegistry):
    """Helper to create builders for other classes sharing the registry.

    Usage:
        tag_builder = make_builder("app.Tag")
    """

    def _make(class_name: str, *, embedded: bool = False) -> MappingBuilder:
        metadata = ClassMetadata(name=class_name, is_embedded_class=embedded)
        return MappingBuilder(ClassMetadataBuilder(metadata, registry=registry))

    return _make
