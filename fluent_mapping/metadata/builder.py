"""In-memory metadata store.

ClassMetadataBuilder wraps one ClassMetadata and is the only writer to it.
FieldBuilder accumulates one column's settings until build() stores them.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from fluent_mapping.core.enums import GenerationStrategy, InheritanceType
from fluent_mapping.core.exceptions import (
    DuplicateMappingError,
    InvalidFieldConfigurationError,
    InvalidStateError,
    MetadataNotFoundError,
)
from fluent_mapping.core.naming import DefaultNamingStrategy, NamingStrategy
from fluent_mapping.core.types import TypeRegistry
from fluent_mapping.metadata.model import (
    AssociationMapping,
    ClassMetadata,
    DiscriminatorColumn,
    EmbeddedMapping,
    FieldMapping,
    GeneratorDefinition,
)
from fluent_mapping.metadata.registry import MetadataRegistry

_VERSION_TYPES = frozenset({"integer", "smallint", "bigint", "datetime", "datetimetz"})


class FieldBuilder:
    """Column builder handed out by ClassMetadataBuilder.create_field()."""

    def __init__(self, metadata_builder: ClassMetadataBuilder, name: str, type_name: str) -> None:
        self._metadata_builder = metadata_builder
        self._name = name
        self._type = type_name
        self._column_name: str | None = None
        self._nullable = False
        self._unique = False
        self._length: int | None = None
        self._precision: int | None = None
        self._scale: int | None = None
        self._column_definition: str | None = None
        self._options: dict[str, Any] = {}
        self._is_id = False
        self._is_version = False
        self._generator: GeneratorDefinition | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> str:
        return self._type

    @property
    def options(self) -> dict[str, Any]:
        return dict(self._options)

    @property
    def generator(self) -> GeneratorDefinition | None:
        return self._generator

    def column_name(self, column_name: str) -> FieldBuilder:
        self._column_name = column_name
        return self

    def nullable(self, flag: bool = True) -> FieldBuilder:
        self._nullable = flag
        return self

    def unique(self, flag: bool = True) -> FieldBuilder:
        self._unique = flag
        return self

    def length(self, length: int) -> FieldBuilder:
        self._length = length
        return self

    def precision(self, precision: int) -> FieldBuilder:
        self._precision = precision
        return self

    def scale(self, scale: int) -> FieldBuilder:
        self._scale = scale
        return self

    def column_definition(self, definition: str) -> FieldBuilder:
        self._column_definition = definition
        return self

    def option(self, name: str, value: Any) -> FieldBuilder:
        self._options[name] = value
        return self

    def make_primary_key(self) -> FieldBuilder:
        self._is_id = True
        return self

    def is_version_field(self) -> FieldBuilder:
        self._is_version = True
        return self

    def generated_value(self, strategy: GenerationStrategy = GenerationStrategy.AUTO) -> FieldBuilder:
        self._generator = GeneratorDefinition(strategy=strategy)
        return self

    def set_sequence_generator(
        self, sequence_name: str, allocation_size: int = 1, initial_value: int = 1
    ) -> FieldBuilder:
        self._generator = GeneratorDefinition(
            strategy=GenerationStrategy.SEQUENCE,
            sequence_name=sequence_name,
            allocation_size=allocation_size,
            initial_value=initial_value,
        )
        return self

    def set_custom_id_generator(self, generator: str) -> FieldBuilder:
        self._generator = GeneratorDefinition(
            strategy=GenerationStrategy.CUSTOM, custom_generator=generator
        )
        return self

    def to_mapping(self) -> FieldMapping:
        """Validate the accumulated settings and freeze them.

        Raises:
            InvalidFieldConfigurationError: On negative sizes, scale larger than
                precision, or a version column of a non-incrementable type.
        """
        for label, value in (
            ("length", self._length),
            ("precision", self._precision),
            ("scale", self._scale),
        ):
            if value is not None and value < 0:
                raise InvalidFieldConfigurationError(self._name, f"{label} must not be negative")
        if (
            self._precision is not None
            and self._scale is not None
            and self._scale > self._precision
        ):
            raise InvalidFieldConfigurationError(
                self._name,
                f"scale ({self._scale}) must not be greater than precision ({self._precision})",
            )
        if self._is_version and self._type not in _VERSION_TYPES:
            raise InvalidFieldConfigurationError(
                self._name, f"type '{self._type}' cannot be used for versioning"
            )

        column_name = self._column_name or (
            self._metadata_builder.naming_strategy.property_to_column_name(self._name)
        )
        return FieldMapping(
            field_name=self._name,
            type=self._type,
            column_name=column_name,
            nullable=self._nullable,
            unique=self._unique,
            length=self._length,
            precision=self._precision,
            scale=self._scale,
            column_definition=self._column_definition,
            options=dict(self._options),
            is_id=self._is_id,
            is_version=self._is_version,
        )

    def build(self) -> ClassMetadataBuilder:
        """Store the column on the class metadata."""
        self._metadata_builder.add_field(self.to_mapping())
        if self._generator is not None:
            self._metadata_builder.set_id_generator(self._generator)
        return self._metadata_builder


class ClassMetadataBuilder:
    """Writes mapping information into a single ClassMetadata.

    Args:
        metadata: The metadata to fill.
        naming_strategy: Strategy for names a mapping leaves unset.
        types: Column type registry.
        registry: Registry used to resolve other classes' metadata.
    """

    def __init__(
        self,
        metadata: ClassMetadata,
        naming_strategy: NamingStrategy | None = None,
        types: TypeRegistry | None = None,
        registry: MetadataRegistry | None = None,
    ) -> None:
        self._metadata = metadata
        self._naming_strategy = naming_strategy or DefaultNamingStrategy()
        self._types = types or TypeRegistry()
        self._registry = registry

    @property
    def metadata(self) -> ClassMetadata:
        return self._metadata

    @property
    def naming_strategy(self) -> NamingStrategy:
        return self._naming_strategy

    @property
    def types(self) -> TypeRegistry:
        return self._types

    def is_embedded_class(self) -> bool:
        return self._metadata.is_embedded_class

    def set_embeddable(self) -> ClassMetadataBuilder:
        self._metadata.is_embedded_class = True
        return self

    def set_mapped_superclass(self) -> ClassMetadataBuilder:
        self._metadata.is_mapped_superclass = True
        return self

    # --- Columns ---

    def create_field(self, name: str, type_name: str) -> FieldBuilder:
        return FieldBuilder(self, name, type_name)

    def _ensure_unmapped(self, property_name: str) -> None:
        if self._metadata.is_mapped(property_name):
            raise DuplicateMappingError(self._metadata.name, property_name)

    def add_field(self, mapping: FieldMapping) -> None:
        """Store a column.

        Raises:
            DuplicateMappingError: If the property or column is already mapped.
            InvalidFieldConfigurationError: On a second version column.
        """
        self._ensure_unmapped(mapping.field_name)
        if mapping.column_name in self._metadata.column_names:
            raise DuplicateMappingError(self._metadata.name, mapping.column_name)
        if mapping.is_version and self._metadata.version_field is not None:
            raise InvalidFieldConfigurationError(
                mapping.field_name,
                f"'{self._metadata.version_field}' is already the version field",
            )

        self._metadata.fields[mapping.field_name] = mapping
        if mapping.is_id:
            self._metadata.identifier.append(mapping.field_name)
        if mapping.is_version:
            self._metadata.version_field = mapping.field_name

    def set_id_generator(self, generator: GeneratorDefinition) -> None:
        self._metadata.generator = generator

    # --- Associations and embeddables ---

    def add_association(self, mapping: AssociationMapping) -> None:
        """Store an association.

        Raises:
            DuplicateMappingError: If the property is already mapped.
        """
        self._ensure_unmapped(mapping.field_name)
        self._metadata.associations[mapping.field_name] = mapping

    def add_embedded(self, mapping: EmbeddedMapping) -> None:
        """Store an embedded value object and inline the embeddable's columns.

        Raises:
            MetadataNotFoundError: If the embeddable's metadata cannot be resolved.
            InvalidStateError: If the embedded class is not an embeddable.
            DuplicateMappingError: If an inlined column collides with an existing one.
        """
        self._ensure_unmapped(mapping.field_name)
        if self._registry is None:
            raise MetadataNotFoundError(mapping.class_name)
        embeddable = self._registry.get(mapping.class_name)
        if not embeddable.is_embedded_class:
            raise InvalidStateError(
                "embed", f"'{mapping.class_name}' is not an embeddable class"
            )

        inlined: list[FieldMapping] = []
        for inner in embeddable.fields.values():
            if mapping.column_prefix is False:
                column_name = inner.column_name
            elif mapping.column_prefix is None or mapping.column_prefix is True:
                column_name = self._naming_strategy.embedded_field_to_column_name(
                    mapping.field_name, inner.column_name
                )
            else:
                column_name = f"{mapping.column_prefix}{inner.column_name}"
            inlined.append(
                dataclasses.replace(
                    inner,
                    field_name=f"{mapping.field_name}.{inner.field_name}",
                    column_name=column_name,
                    embedded_in=mapping.field_name,
                )
            )

        existing = set(self._metadata.column_names)
        for field_mapping in inlined:
            if field_mapping.column_name in existing:
                raise DuplicateMappingError(self._metadata.name, field_mapping.column_name)
            existing.add(field_mapping.column_name)

        self._metadata.embedded[mapping.field_name] = mapping
        for field_mapping in inlined:
            self._metadata.fields[field_mapping.field_name] = field_mapping

    # --- Table ---

    def set_table_name(self, name: str) -> ClassMetadataBuilder:
        self._metadata.table.name = name
        return self

    def set_table_schema(self, schema: str) -> ClassMetadataBuilder:
        self._metadata.table.schema = schema
        return self

    def add_table_option(self, name: str, value: Any) -> ClassMetadataBuilder:
        self._metadata.table.options[name] = value
        return self

    def add_index(self, columns: list[str], name: str) -> ClassMetadataBuilder:
        self._metadata.table.indexes[name] = tuple(columns)
        return self

    def add_unique_constraint(self, columns: list[str], name: str) -> ClassMetadataBuilder:
        self._metadata.table.unique_constraints[name] = tuple(columns)
        return self

    # --- Entity ---

    def set_repository_class(self, repository_class: str) -> ClassMetadataBuilder:
        self._metadata.repository_class = repository_class
        return self

    def set_read_only(self, flag: bool = True) -> ClassMetadataBuilder:
        self._metadata.read_only = flag
        return self

    def set_inheritance_type(self, inheritance_type: InheritanceType) -> None:
        self._metadata.inheritance_type = inheritance_type

    def set_discriminator_column(self, column: DiscriminatorColumn) -> None:
        self._metadata.discriminator_column = column

    def add_discriminator_map_class(self, name: str, class_name: str) -> ClassMetadataBuilder:
        self._metadata.discriminator_map[name] = class_name
        return self
