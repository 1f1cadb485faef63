"""Mapping declarations.

Subclass one of these per mapped class. map_for() names the class and
map() declares its mapping on the builder the driver passes in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from fluent_mapping.builders.builder import MappingBuilder
from fluent_mapping.metadata.builder import ClassMetadataBuilder


class EntityMapping(ABC):
    """Mapping of a regular entity."""

    @abstractmethod
    def map_for(self) -> type | str:
        """The class (or dotted class name) this mapping describes."""
        ...

    @abstractmethod
    def map(self, builder: MappingBuilder) -> None:
        """Declare the mapping."""
        ...

    def configure(self, metadata_builder: ClassMetadataBuilder) -> None:
        """Prepare the metadata before map() runs."""


class EmbeddableMapping(EntityMapping):
    """Mapping of an embeddable value object."""

    def configure(self, metadata_builder: ClassMetadataBuilder) -> None:
        metadata_builder.set_embeddable()


class MappedSuperClassMapping(EntityMapping):
    """Mapping of a superclass whose fields are inherited by entities."""

    def configure(self, metadata_builder: ClassMetadataBuilder) -> None:
        metadata_builder.set_mapped_superclass()
