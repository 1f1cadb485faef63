"""Identifier generation settings for a primary key column."""

from __future__ import annotations

from fluent_mapping.core.enums import GenerationStrategy
from fluent_mapping.metadata.builder import FieldBuilder
from fluent_mapping.metadata.model import class_name_of


class GeneratedValue:
    """Chooses how a primary key value is generated.

    Created by Field.generated_value(); build() is called for you once the
    optional callback has run.
    """

    def __init__(
        self,
        builder: FieldBuilder,
        strategy: GenerationStrategy = GenerationStrategy.AUTO,
    ) -> None:
        self._builder = builder
        self._strategy = strategy
        self._sequence_name: str | None = None
        self._allocation_size = 1
        self._initial_value = 1
        self._generator: str | None = None

    @property
    def strategy(self) -> GenerationStrategy:
        return self._strategy

    def auto(self) -> GeneratedValue:
        """Let the platform pick the strategy."""
        self._strategy = GenerationStrategy.AUTO
        return self

    def identity(self) -> GeneratedValue:
        """Use an identity / auto-increment column."""
        self._strategy = GenerationStrategy.IDENTITY
        return self

    def sequence(
        self,
        name: str | None = None,
        allocation_size: int = 1,
        initial_value: int = 1,
    ) -> GeneratedValue:
        """Use a database sequence. The name defaults to ``{field}_seq``."""
        self._strategy = GenerationStrategy.SEQUENCE
        self._sequence_name = name
        self._allocation_size = allocation_size
        self._initial_value = initial_value
        return self

    def uuid(self) -> GeneratedValue:
        self._strategy = GenerationStrategy.UUID
        return self

    def none(self) -> GeneratedValue:
        """Identifiers are assigned by the application."""
        self._strategy = GenerationStrategy.NONE
        return self

    def custom(self, generator: type | str) -> GeneratedValue:
        """Use an application-provided generator class."""
        self._strategy = GenerationStrategy.CUSTOM
        self._generator = class_name_of(generator)
        return self

    def build(self) -> FieldBuilder:
        if self._strategy is GenerationStrategy.SEQUENCE:
            return self._builder.set_sequence_generator(
                self._sequence_name or f"{self._builder.name}_seq",
                self._allocation_size,
                self._initial_value,
            )
        if self._strategy is GenerationStrategy.CUSTOM and self._generator is not None:
            return self._builder.set_custom_id_generator(self._generator)
        return self._builder.generated_value(self._strategy)
