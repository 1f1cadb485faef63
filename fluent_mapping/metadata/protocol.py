"""Metadata store protocol.

The builders only talk to the store through this interface.
ClassMetadataBuilder is the in-memory implementation.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from fluent_mapping.core.enums import InheritanceType
from fluent_mapping.core.naming import NamingStrategy
from fluent_mapping.core.types import TypeRegistry
from fluent_mapping.metadata.model import (
    AssociationMapping,
    ClassMetadata,
    DiscriminatorColumn,
    EmbeddedMapping,
    FieldMapping,
    GeneratorDefinition,
)


@runtime_checkable
class MetadataStore(Protocol):
    """Write access to one class's metadata."""

    @property
    def metadata(self) -> ClassMetadata:
        """The metadata being built."""
        ...

    @property
    def naming_strategy(self) -> NamingStrategy:
        """Naming strategy used for unnamed columns."""
        ...

    @property
    def types(self) -> TypeRegistry:
        """Column type registry."""
        ...

    def is_embedded_class(self) -> bool:
        """Whether the class is an embeddable value type."""
        ...

    def create_field(self, name: str, type_name: str) -> Any:
        """Start a column builder for a property."""
        ...

    def add_field(self, mapping: FieldMapping) -> None:
        """Store a finalized column."""
        ...

    def add_association(self, mapping: AssociationMapping) -> None:
        """Store a finalized association."""
        ...

    def add_embedded(self, mapping: EmbeddedMapping) -> None:
        """Store an embedded value object and inline its columns."""
        ...

    def set_id_generator(self, generator: GeneratorDefinition) -> None:
        """Set the identifier generation strategy."""
        ...

    def set_table_name(self, name: str) -> None:
        """Set the physical table name."""
        ...

    def set_inheritance_type(self, inheritance_type: InheritanceType) -> None:
        """Set the inheritance mapping strategy."""
        ...

    def set_discriminator_column(self, column: DiscriminatorColumn) -> None:
        """Set the discriminator column of an inheritance root."""
        ...
