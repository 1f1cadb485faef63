"""Driver layer - mapping declarations, queue commit and class loading."""

from __future__ import annotations

from fluent_mapping.driver.commit import commit
from fluent_mapping.driver.driver import FluentDriver
from fluent_mapping.driver.mapping import (
    EmbeddableMapping,
    EntityMapping,
    MappedSuperClassMapping,
)

__all__ = [
    "FluentDriver",
    "EntityMapping",
    "EmbeddableMapping",
    "MappedSuperClassMapping",
    "commit",
]
