"""Field descriptor - chainable configuration for one column.

Every configuration verb returns the field itself, so declarations read as
``builder.string("email").unique().length(180)``. The settings are kept
in the store's FieldBuilder until build() finalizes them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fluent_mapping.builders.generated_value import GeneratedValue
from fluent_mapping.core.enums import GenerationStrategy
from fluent_mapping.core.exceptions import InvalidArgumentError, MethodNotFoundError
from fluent_mapping.core.types import ColumnType
from fluent_mapping.metadata.builder import FieldBuilder
from fluent_mapping.metadata.protocol import MetadataStore


class Field:
    """A pending column declaration.

    Use Field.make() (or the MappingBuilder verbs) rather than the
    constructor: make() resolves the logical type first, so an unknown type
    fails at declaration time.
    """

    def __init__(
        self,
        builder: FieldBuilder,
        default_strategy: GenerationStrategy = GenerationStrategy.AUTO,
    ) -> None:
        self._builder = builder
        self._default_strategy = default_strategy

    @classmethod
    def make(
        cls,
        metadata_builder: MetadataStore,
        field_type: str | ColumnType,
        name: str,
        default_strategy: GenerationStrategy = GenerationStrategy.AUTO,
    ) -> Field:
        """Create a field for ``name`` with logical type ``field_type``.

        Raises:
            UnknownTypeError: If the type token is not registered.
        """
        type_name = metadata_builder.types.get(field_type)
        return cls(metadata_builder.create_field(name, type_name), default_strategy)

    @property
    def field_name(self) -> str:
        return self._builder.name

    @property
    def type(self) -> str:
        return self._builder.type

    def get_builder(self) -> FieldBuilder:
        return self._builder

    # --- Column options ---

    def name(self, column_name: str) -> Field:
        """Set the column name (defaults to the property name)."""
        return self.column_name(column_name)

    def column_name(self, column_name: str) -> Field:
        self._builder.column_name(column_name)
        return self

    def nullable(self, flag: bool = True) -> Field:
        self._builder.nullable(flag)
        return self

    def unique(self, flag: bool = True) -> Field:
        self._builder.unique(flag)
        return self

    def length(self, length: int) -> Field:
        """Maximum length of a string column."""
        self._builder.length(length)
        return self

    def precision(self, precision: int) -> Field:
        """Total number of digits of a decimal column."""
        self._builder.precision(precision)
        return self

    def scale(self, scale: int) -> Field:
        """Digits right of the decimal point; must not exceed precision."""
        self._builder.scale(scale)
        return self

    def column_definition(self, definition: str) -> Field:
        """Raw, non-portable DDL following the column name."""
        self._builder.column_definition(definition)
        return self

    def option(self, name: str, value: Any) -> Field:
        self._builder.option(name, value)
        return self

    def unsigned(self, flag: bool = True) -> Field:
        self._builder.option("unsigned", flag)
        return self

    def set_default(self, value: Any) -> Field:
        """Value used when none is supplied."""
        self._builder.option("default", value)
        return self

    def default(self, value: Any) -> Field:
        return self.set_default(value)

    def fixed(self, flag: bool = True) -> Field:
        """Fixed instead of varying length (string and binary columns)."""
        self._builder.option("fixed", flag)
        return self

    def comment(self, comment: str) -> Field:
        self._builder.option("comment", comment)
        return self

    def collation(self, collation: str) -> Field:
        self._builder.option("collation", collation)
        return self

    # --- Keys ---

    def primary(self) -> Field:
        """Mark the column as (part of) the primary key."""
        self._builder.make_primary_key()
        return self

    def use_for_versioning(self) -> Field:
        """Use the column for optimistic locking."""
        self._builder.is_version_field()
        return self

    def auto_increment(self) -> Field:
        return self.generated_value()

    def generated_value(self, callback: Callable[[GeneratedValue], Any] | None = None) -> Field:
        """Generate the value of this key column.

        Args:
            callback: Receives the GeneratedValue to pick a strategy.
        """
        if callback is not None and not callable(callback):
            raise InvalidArgumentError("generated_value() expects a callable configurator")

        generated_value = GeneratedValue(self._builder, self._default_strategy)
        if callback is not None:
            callback(generated_value)
        generated_value.build()
        return self

    def build(self) -> Field:
        """Finalize the column. Call at most once."""
        self._builder.build()
        return self

    def __getattr__(self, name: str) -> Any:
        raise MethodNotFoundError("Field", name)

    def __repr__(self) -> str:
        return f"Field({self._builder.name!r}, {self._builder.type!r})"
