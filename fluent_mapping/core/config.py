"""Mapping configuration.

MappingConfig is a Pydantic model so host frameworks can load it from
settings files or environment-driven dicts.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from fluent_mapping.core.enums import GenerationStrategy
from fluent_mapping.core.naming import (
    DefaultNamingStrategy,
    NamingStrategy,
    UnderscoreNamingStrategy,
)
from fluent_mapping.core.types import TypeRegistry

_NAMING_STRATEGIES: dict[str, type[DefaultNamingStrategy]] = {
    "default": DefaultNamingStrategy,
    "underscore": UnderscoreNamingStrategy,
}


class MappingConfig(BaseModel):
    """Configuration for a mapping session."""

    naming_strategy: Literal["default", "underscore"] = "default"
    default_generation_strategy: GenerationStrategy = GenerationStrategy.AUTO
    custom_types: list[str] = []

    def build_naming_strategy(self) -> NamingStrategy:
        """Instantiate the configured naming strategy."""
        return _NAMING_STRATEGIES[self.naming_strategy]()

    def build_type_registry(self) -> TypeRegistry:
        """Create a type registry including the configured custom types."""
        return TypeRegistry(self.custom_types)
