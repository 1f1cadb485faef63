"""FluentMapping - fluent, chainable ORM mapping declarations."""

from __future__ import annotations

from fluent_mapping.builders import (
    Buildable,
    Embedded,
    Entity,
    Field,
    GeneratedValue,
    Inheritance,
    MappingBuilder,
    Table,
)
from fluent_mapping.core.config import MappingConfig
from fluent_mapping.core.enums import (
    CascadeOperation,
    FetchMode,
    GenerationStrategy,
    InheritanceType,
    RelationKind,
)
from fluent_mapping.core.exceptions import (
    BuilderError,
    DriverError,
    DuplicateMappingError,
    FluentMappingError,
    InvalidArgumentError,
    InvalidFieldConfigurationError,
    InvalidRelationConfigurationError,
    InvalidStateError,
    MappingNotFoundError,
    MetadataError,
    MetadataNotFoundError,
    MethodNotFoundError,
    MissingInverseSideError,
    RelationError,
    UnknownTypeError,
)
from fluent_mapping.core.naming import (
    DefaultNamingStrategy,
    NamingStrategy,
    UnderscoreNamingStrategy,
)
from fluent_mapping.core.types import ColumnType, TypeRegistry
from fluent_mapping.driver import (
    EmbeddableMapping,
    EntityMapping,
    FluentDriver,
    MappedSuperClassMapping,
    commit,
)
from fluent_mapping.metadata import ClassMetadata, ClassMetadataBuilder, MetadataRegistry
from fluent_mapping.relations import ManyToMany, ManyToOne, OneToMany, OneToOne, Relation

__all__ = [
    # Builder
    "MappingBuilder",
    "Buildable",
    "Field",
    "GeneratedValue",
    "Embedded",
    "Table",
    "Entity",
    "Inheritance",
    # Relations
    "Relation",
    "OneToOne",
    "ManyToOne",
    "OneToMany",
    "ManyToMany",
    # Driver
    "FluentDriver",
    "EntityMapping",
    "EmbeddableMapping",
    "MappedSuperClassMapping",
    "commit",
    # Metadata
    "ClassMetadata",
    "ClassMetadataBuilder",
    "MetadataRegistry",
    # Config, naming and types
    "MappingConfig",
    "NamingStrategy",
    "DefaultNamingStrategy",
    "UnderscoreNamingStrategy",
    "TypeRegistry",
    "ColumnType",
    # Enums
    "RelationKind",
    "CascadeOperation",
    "FetchMode",
    "GenerationStrategy",
    "InheritanceType",
    # Exceptions
    "FluentMappingError",
    "BuilderError",
    "InvalidStateError",
    "InvalidArgumentError",
    "MethodNotFoundError",
    "RelationError",
    "MissingInverseSideError",
    "InvalidRelationConfigurationError",
    "MetadataError",
    "UnknownTypeError",
    "InvalidFieldConfigurationError",
    "DuplicateMappingError",
    "MetadataNotFoundError",
    "DriverError",
    "MappingNotFoundError",
]
