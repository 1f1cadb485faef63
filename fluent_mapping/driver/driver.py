"""Fluent driver - turns registered mappings into ClassMetadata.

The driver is the seam a host framework calls into: it owns the mappings,
creates a MappingBuilder per class, runs the mapping, and commits the
queue into a MetadataRegistry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from fluent_mapping.builders.builder import MappingBuilder, validate_macro
from fluent_mapping.core.config import MappingConfig
from fluent_mapping.core.exceptions import InvalidArgumentError, MappingNotFoundError
from fluent_mapping.core.naming import NamingStrategy
from fluent_mapping.driver.commit import commit
from fluent_mapping.driver.mapping import EntityMapping
from fluent_mapping.metadata.builder import ClassMetadataBuilder
from fluent_mapping.metadata.model import ClassMetadata, class_name_of
from fluent_mapping.metadata.registry import MetadataRegistry

logger = logging.getLogger(__name__)


class FluentDriver:
    """Loads class metadata from fluent mappings.

    Args:
        mappings: Initial mappings to register.
        config: Naming, type and key generation settings.
        registry: Registry to load metadata into. Lookup misses on it are
                  resolved through this driver.
    """

    def __init__(
        self,
        mappings: Iterable[EntityMapping] = (),
        config: MappingConfig | None = None,
        registry: MetadataRegistry | None = None,
    ) -> None:
        self._config = config or MappingConfig()
        self._naming_strategy = self._config.build_naming_strategy()
        self._types = self._config.build_type_registry()
        self._registry = registry or MetadataRegistry()
        self._registry.set_loader(self.load_metadata_for_class)
        self._mappings: dict[str, EntityMapping] = {}
        self._macros: dict[str, Callable[..., Any]] = {}
        self.add_mappings(mappings)

    @property
    def config(self) -> MappingConfig:
        return self._config

    @property
    def naming_strategy(self) -> NamingStrategy:
        return self._naming_strategy

    @property
    def registry(self) -> MetadataRegistry:
        return self._registry

    def add_mapping(self, mapping: EntityMapping) -> None:
        if not isinstance(mapping, EntityMapping):
            raise InvalidArgumentError(
                f"Mappings must extend EntityMapping, got {type(mapping).__name__}"
            )
        self._mappings[class_name_of(mapping.map_for())] = mapping

    def add_mappings(self, mappings: Iterable[EntityMapping]) -> None:
        for mapping in mappings:
            self.add_mapping(mapping)

    def get_all_class_names(self) -> list[str]:
        """Names of all mapped classes, sorted alphabetically."""
        return sorted(self._mappings)

    def is_transient(self, entity: type | str) -> bool:
        """Whether the class has no mapping."""
        return class_name_of(entity) not in self._mappings

    def macro(self, name: str, implementation: Callable[..., Any]) -> None:
        """Register a macro on every builder this driver creates."""
        validate_macro(name, implementation)
        self._macros[name] = implementation

    def load_metadata_for_class(self, entity: type | str) -> ClassMetadata:
        """Run the class's mapping and commit it into the registry.

        Raises:
            MappingNotFoundError: If no mapping is registered for the class.
        """
        class_name = class_name_of(entity)
        mapping = self._mappings.get(class_name)
        if mapping is None:
            raise MappingNotFoundError(class_name)

        metadata = ClassMetadata(name=class_name)
        metadata_builder = ClassMetadataBuilder(
            metadata, self._naming_strategy, self._types, self._registry
        )
        mapping.configure(metadata_builder)

        builder = MappingBuilder(
            metadata_builder,
            self._naming_strategy,
            default_generation_strategy=self._config.default_generation_strategy,
        )
        for name, implementation in self._macros.items():
            builder.macro(name, implementation)

        mapping.map(builder)
        built = commit(builder)

        if metadata.table.name is None and not (
            metadata.is_embedded_class or metadata.is_mapped_superclass
        ):
            metadata.table.name = self._naming_strategy.class_to_table_name(class_name)

        self._registry.add(metadata)
        logger.info("Loaded metadata for %s (%d declarations)", class_name, built)
        return metadata

    def load_all(self) -> list[ClassMetadata]:
        """Load every mapped class not yet in the registry, in name order."""
        return [self._registry.get(name) for name in self.get_all_class_names()]
