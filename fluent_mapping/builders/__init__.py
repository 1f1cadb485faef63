"""Builders - the fluent mapping verbs and the descriptors they create."""

from __future__ import annotations

from fluent_mapping.builders.builder import MappingBuilder, validate_macro
from fluent_mapping.builders.embedded import Embedded
from fluent_mapping.builders.entity import Entity, Inheritance
from fluent_mapping.builders.field import Field
from fluent_mapping.builders.generated_value import GeneratedValue
from fluent_mapping.builders.protocol import Buildable
from fluent_mapping.builders.table import Table

__all__ = [
    "MappingBuilder",
    "validate_macro",
    "Buildable",
    "Field",
    "GeneratedValue",
    "Embedded",
    "Table",
    "Entity",
    "Inheritance",
]
