"""Metadata records.

Frozen dataclasses describe finalized fields, associations and embeddables.
ClassMetadata is the mutable per-class container the builders write into.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fluent_mapping.core.enums import (
    CascadeOperation,
    FetchMode,
    GenerationStrategy,
    InheritanceType,
    RelationKind,
)


def class_name_of(entity: type | str) -> str:
    """Normalize a class or dotted class name to a dotted class name."""
    if isinstance(entity, str):
        return entity
    return f"{entity.__module__}.{entity.__qualname__}"


@dataclass(frozen=True)
class FieldMapping:
    """A finalized column mapping."""

    field_name: str
    type: str
    column_name: str
    nullable: bool = False
    unique: bool = False
    length: int | None = None
    precision: int | None = None
    scale: int | None = None
    column_definition: str | None = None
    options: dict[str, Any] = field(default_factory=dict)
    is_id: bool = False
    is_version: bool = False
    embedded_in: str | None = None  # owning embedded property, for inlined fields


@dataclass(frozen=True)
class GeneratorDefinition:
    """Identifier generation settings."""

    strategy: GenerationStrategy = GenerationStrategy.AUTO
    sequence_name: str | None = None
    allocation_size: int = 1
    initial_value: int = 1
    custom_generator: str | None = None


@dataclass(frozen=True)
class JoinColumnMapping:
    """A foreign key column, on the owning table or inside a join table."""

    name: str
    referenced_column_name: str = "id"
    nullable: bool = True
    unique: bool = False
    on_delete: str | None = None
    column_definition: str | None = None


@dataclass(frozen=True)
class JoinTableMapping:
    """A many-to-many link table."""

    name: str
    join_columns: tuple[JoinColumnMapping, ...]
    inverse_join_columns: tuple[JoinColumnMapping, ...]
    schema: str | None = None


@dataclass(frozen=True)
class AssociationMapping:
    """A finalized association between two entities."""

    field_name: str
    source_entity: str
    target_entity: str
    kind: RelationKind
    mapped_by: str | None = None
    inversed_by: str | None = None
    join_columns: tuple[JoinColumnMapping, ...] = ()
    join_table: JoinTableMapping | None = None
    cascade: frozenset[CascadeOperation] = frozenset()
    fetch: FetchMode = FetchMode.LAZY
    orphan_removal: bool = False
    order_by: dict[str, str] = field(default_factory=dict)
    index_by: str | None = None

    @property
    def is_owning_side(self) -> bool:
        return self.mapped_by is None

    @property
    def is_collection_valued(self) -> bool:
        return self.kind in (RelationKind.ONE_TO_MANY, RelationKind.MANY_TO_MANY)


@dataclass(frozen=True)
class EmbeddedMapping:
    """A property holding an embeddable value object.

    ``column_prefix`` is None for the naming-strategy default and False
    when prefixing is switched off.
    """

    field_name: str
    class_name: str
    column_prefix: str | bool | None = None


@dataclass(frozen=True)
class DiscriminatorColumn:
    """Column distinguishing subclasses in an inheritance hierarchy."""

    name: str = "dtype"
    type: str = "string"
    length: int | None = 255


@dataclass
class TableDefinition:
    """Physical table settings."""

    name: str | None = None
    schema: str | None = None
    options: dict[str, Any] = field(default_factory=dict)
    indexes: dict[str, tuple[str, ...]] = field(default_factory=dict)
    unique_constraints: dict[str, tuple[str, ...]] = field(default_factory=dict)


@dataclass
class ClassMetadata:
    """Everything known about how one class maps to relational storage."""

    name: str
    is_embedded_class: bool = False
    is_mapped_superclass: bool = False
    table: TableDefinition = field(default_factory=TableDefinition)
    fields: dict[str, FieldMapping] = field(default_factory=dict)
    associations: dict[str, AssociationMapping] = field(default_factory=dict)
    embedded: dict[str, EmbeddedMapping] = field(default_factory=dict)
    identifier: list[str] = field(default_factory=list)
    generator: GeneratorDefinition | None = None
    version_field: str | None = None
    repository_class: str | None = None
    read_only: bool = False
    inheritance_type: InheritanceType = InheritanceType.NONE
    discriminator_column: DiscriminatorColumn | None = None
    discriminator_map: dict[str, str] = field(default_factory=dict)

    def is_mapped(self, property_name: str) -> bool:
        """Check if a property is already mapped as field, association or embeddable."""
        return (
            property_name in self.fields
            or property_name in self.associations
            or property_name in self.embedded
        )

    @property
    def column_names(self) -> list[str]:
        """Column names of all mapped fields, in mapping order."""
        return [mapping.column_name for mapping in self.fields.values()]

    @property
    def is_identifier_composite(self) -> bool:
        return len(self.identifier) > 1
