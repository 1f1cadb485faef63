"""Metadata store - the records that mappings are finalized into."""

from __future__ import annotations

from fluent_mapping.metadata.builder import ClassMetadataBuilder, FieldBuilder
from fluent_mapping.metadata.model import (
    AssociationMapping,
    ClassMetadata,
    DiscriminatorColumn,
    EmbeddedMapping,
    FieldMapping,
    GeneratorDefinition,
    JoinColumnMapping,
    JoinTableMapping,
    TableDefinition,
    class_name_of,
)
from fluent_mapping.metadata.protocol import MetadataStore
from fluent_mapping.metadata.registry import MetadataRegistry

__all__ = [
    "ClassMetadata",
    "ClassMetadataBuilder",
    "FieldBuilder",
    "MetadataRegistry",
    "MetadataStore",
    "FieldMapping",
    "AssociationMapping",
    "JoinColumnMapping",
    "JoinTableMapping",
    "EmbeddedMapping",
    "GeneratorDefinition",
    "DiscriminatorColumn",
    "TableDefinition",
    "class_name_of",
]
