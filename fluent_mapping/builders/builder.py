"""Mapping builder - the fluent entry point for declaring an entity's mapping.

Verbs create descriptors, let an optional callback configure them, queue
them and hand them back for further chaining. Nothing touches the metadata
store until the queue is committed, except table() and entity(), which are
applied immediately.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from fluent_mapping.builders.embedded import Embedded
from fluent_mapping.builders.entity import Entity
from fluent_mapping.builders.field import Field
from fluent_mapping.builders.protocol import Buildable
from fluent_mapping.builders.table import Table
from fluent_mapping.core.enums import GenerationStrategy
from fluent_mapping.core.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    MethodNotFoundError,
)
from fluent_mapping.core.naming import NamingStrategy
from fluent_mapping.core.types import ColumnType
from fluent_mapping.metadata.builder import ClassMetadataBuilder
from fluent_mapping.relations import ManyToMany, ManyToOne, OneToMany, OneToOne, Relation

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Relation)

Macro = Callable[..., Any]


def _ensure_callable(callback: Any, verb: str) -> None:
    if callback is not None and not callable(callback):
        raise InvalidArgumentError(f"{verb}() expects a callable configurator, got {callback!r}")


def _chain(*callbacks: Callable[[Any], Any] | None) -> Callable[[Any], None]:
    """Combine configurators into one that runs them in order."""

    def run(target: Any) -> None:
        for callback in callbacks:
            if callback is not None:
                callback(target)

    return run


def validate_macro(name: str, implementation: Any) -> None:
    """Check that a macro can be registered under ``name``.

    The implementation must be callable and accept the builder as its first
    positional argument, and the name must not shadow a built-in verb.

    Raises:
        InvalidArgumentError: If any of these checks fails.
    """
    if not name or not name.isidentifier():
        raise InvalidArgumentError(f"Macro name must be a valid identifier, got {name!r}")
    if hasattr(MappingBuilder, name):
        raise InvalidArgumentError(f"Macro [{name}] would shadow a built-in builder verb")
    if not callable(implementation):
        raise InvalidArgumentError(
            "Fluent builder should be extended with a callable argument, none given"
        )

    try:
        parameters = inspect.signature(implementation).parameters.values()
    except (TypeError, ValueError):
        # builtins without an introspectable signature
        return
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    if not any(
        p.kind in positional or p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters
    ):
        raise InvalidArgumentError(
            f"Macro [{name}] must accept the builder as its first positional argument"
        )


class MappingBuilder:
    """Declares the mapping of one class.

    Args:
        builder: Metadata store of the class being mapped.
        naming_strategy: Injected into relations; defaults to the store's.
        embedded: Whether the class is an embeddable. Defaults to the
                  store's flag at construction time.
        default_generation_strategy: Strategy used by auto_increment().
    """

    def __init__(
        self,
        builder: ClassMetadataBuilder,
        naming_strategy: NamingStrategy | None = None,
        *,
        embedded: bool | None = None,
        default_generation_strategy: GenerationStrategy = GenerationStrategy.AUTO,
    ) -> None:
        self._builder = builder
        self._naming_strategy = naming_strategy or builder.naming_strategy
        self._embedded = builder.is_embedded_class() if embedded is None else embedded
        self._default_generation_strategy = default_generation_strategy
        self._queued: list[Buildable] = []
        self._macros: dict[str, Macro] = {}
        self._table: Table | None = None
        self._entity: Entity | None = None

    @property
    def metadata_builder(self) -> ClassMetadataBuilder:
        return self._builder

    @property
    def naming_strategy(self) -> NamingStrategy:
        return self._naming_strategy

    def is_embedded_class(self) -> bool:
        return self._embedded

    def _guard_embedded(self, verb: str) -> None:
        if self._embedded:
            raise InvalidStateError(verb, "embeddable classes have no table or identity of their own")

    # --- Structural declarations ---

    def table(
        self,
        name: str | Callable[[Table], Any],
        callback: Callable[[Table], Any] | None = None,
    ) -> Table:
        """Declare the physical table, by name or through a callback.

        When both are given the name is applied first.

        Raises:
            InvalidStateError: On an embeddable, or if a table was already declared.
        """
        self._guard_embedded("table")
        _ensure_callable(callback, "table")
        if self._table is not None:
            raise InvalidStateError("table", "the table was already declared in this mapping")

        table = Table(self._builder)
        if callable(name):
            name(table)
        else:
            table.name(name)
        if callback is not None:
            callback(table)

        self._table = table
        return table

    def entity(self, callback: Callable[[Entity], Any] | None = None) -> Entity:
        """Declare class-level settings such as inheritance.

        Raises:
            InvalidStateError: On an embeddable, or if called twice.
        """
        self._guard_embedded("entity")
        _ensure_callable(callback, "entity")
        if self._entity is not None:
            raise InvalidStateError("entity", "the entity was already declared in this mapping")

        entity = Entity(self._builder)
        if callback is not None:
            callback(entity)

        self._entity = entity
        return entity

    # --- Fields ---

    def field(
        self,
        field_type: str | ColumnType,
        name: str,
        callback: Callable[[Field], Any] | None = None,
    ) -> Field:
        """Declare a column of logical type ``field_type``.

        Raises:
            UnknownTypeError: If the type is not registered.
        """
        _ensure_callable(callback, "field")
        field = Field.make(self._builder, field_type, name, self._default_generation_strategy)
        if callback is not None:
            callback(field)

        self._queue(field)
        return field

    def increments(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        """Unsigned, auto-generated integer primary key."""
        self._guard_embedded("increments")
        return self.integer(name, callback).primary().unsigned().auto_increment()

    def small_increments(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        self._guard_embedded("small_increments")
        return self.small_integer(name, callback).primary().unsigned().auto_increment()

    def big_increments(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        self._guard_embedded("big_increments")
        return self.big_integer(name, callback).primary().unsigned().auto_increment()

    def string(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.STRING, name, callback)

    def text(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.TEXT, name, callback)

    def integer(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.INTEGER, name, callback)

    def small_integer(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.SMALLINT, name, callback)

    def big_integer(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.BIGINT, name, callback)

    def unsigned_small_integer(
        self, name: str, callback: Callable[[Field], Any] | None = None
    ) -> Field:
        _ensure_callable(callback, "unsigned_small_integer")
        return self.small_integer(name, _chain(lambda f: f.unsigned(), callback))

    def unsigned_integer(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        _ensure_callable(callback, "unsigned_integer")
        return self.integer(name, _chain(lambda f: f.unsigned(), callback))

    def unsigned_big_integer(
        self, name: str, callback: Callable[[Field], Any] | None = None
    ) -> Field:
        _ensure_callable(callback, "unsigned_big_integer")
        return self.big_integer(name, _chain(lambda f: f.unsigned(), callback))

    def float(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        """Float column, precision 8 and scale 2 unless the callback says otherwise."""
        _ensure_callable(callback, "float")
        return self.field(
            ColumnType.FLOAT, name, _chain(lambda f: f.precision(8).scale(2), callback)
        )

    def decimal(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        """Decimal column, precision 8 and scale 2 unless the callback says otherwise."""
        _ensure_callable(callback, "decimal")
        return self.field(
            ColumnType.DECIMAL, name, _chain(lambda f: f.precision(8).scale(2), callback)
        )

    def boolean(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.BOOLEAN, name, callback)

    def json(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.JSON, name, callback)

    def json_array(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.JSON_ARRAY, name, callback)

    def guid(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.GUID, name, callback)

    def date(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.DATE, name, callback)

    def date_time(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.DATETIME, name, callback)

    def date_time_tz(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.DATETIMETZ, name, callback)

    def time(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.TIME, name, callback)

    def timestamp(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.DATETIME, name, callback)

    def timestamp_tz(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        return self.field(ColumnType.DATETIMETZ, name, callback)

    def binary(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        """Binary column, nullable by default."""
        _ensure_callable(callback, "binary")
        return self.field(ColumnType.BINARY, name, _chain(lambda f: f.nullable(), callback))

    def blob(self, name: str, callback: Callable[[Field], Any] | None = None) -> Field:
        _ensure_callable(callback, "blob")
        return self.field(ColumnType.BLOB, name, _chain(lambda f: f.nullable(), callback))

    def remember_token(
        self, name: str = "remember_token", callback: Callable[[Field], Any] | None = None
    ) -> Field:
        """Nullable string(100) for "remember me" tokens."""
        _ensure_callable(callback, "remember_token")
        return self.string(name, _chain(lambda f: f.nullable().length(100), callback))

    # --- Relations ---

    def one_to_one(
        self,
        field: str,
        entity: type | str,
        callback: Callable[[OneToOne], Any] | None = None,
    ) -> OneToOne:
        return self.add_relation(
            OneToOne(self._builder, self._naming_strategy, field, entity), callback
        )

    def has_one(
        self,
        field: str,
        entity: type | str,
        callback: Callable[[OneToOne], Any] | None = None,
    ) -> OneToOne:
        return self.one_to_one(field, entity, callback)

    def many_to_one(
        self,
        field: str,
        entity: type | str,
        callback: Callable[[ManyToOne], Any] | None = None,
    ) -> ManyToOne:
        return self.add_relation(
            ManyToOne(self._builder, self._naming_strategy, field, entity), callback
        )

    def belongs_to(
        self,
        field: str,
        entity: type | str,
        callback: Callable[[ManyToOne], Any] | None = None,
    ) -> ManyToOne:
        return self.many_to_one(field, entity, callback)

    def one_to_many(
        self,
        field: str,
        entity: type | str,
        callback: Callable[[OneToMany], Any] | None = None,
    ) -> OneToMany:
        return self.add_relation(
            OneToMany(self._builder, self._naming_strategy, field, entity), callback
        )

    def has_many(
        self,
        field: str,
        entity: type | str,
        callback: Callable[[OneToMany], Any] | None = None,
    ) -> OneToMany:
        return self.one_to_many(field, entity, callback)

    def many_to_many(
        self,
        field: str,
        entity: type | str,
        callback: Callable[[ManyToMany], Any] | None = None,
    ) -> ManyToMany:
        return self.add_relation(
            ManyToMany(self._builder, self._naming_strategy, field, entity), callback
        )

    def belongs_to_many(
        self,
        field: str,
        entity: type | str,
        callback: Callable[[ManyToMany], Any] | None = None,
    ) -> ManyToMany:
        return self.many_to_many(field, entity, callback)

    def add_relation(self, relation: R, callback: Callable[[R], Any] | None = None) -> R:
        """Configure and queue a relation, including custom Relation subclasses."""
        if not isinstance(relation, Relation):
            raise InvalidArgumentError(f"add_relation() expects a Relation, got {relation!r}")
        _ensure_callable(callback, "add_relation")
        if callback is not None:
            callback(relation)

        self._queue(relation)
        return relation

    # --- Embeddables ---

    def embed(
        self,
        field: str,
        embeddable: type | str,
        callback: Callable[[Embedded], Any] | None = None,
    ) -> Embedded:
        """Declare a property holding an embeddable value object."""
        _ensure_callable(callback, "embed")
        embedded = Embedded(self._builder, field, embeddable)
        if callback is not None:
            callback(embedded)

        self._queue(embedded)
        return embedded

    # --- Queue ---

    def _queue(self, buildable: Buildable) -> None:
        self._queued.append(buildable)
        logger.debug(
            "Queued %r for %s (%d pending)", buildable, self._builder.metadata.name, len(self._queued)
        )

    def get_queued(self) -> tuple[Buildable, ...]:
        """Pending declarations in declaration order."""
        return tuple(self._queued)

    def reset_queued(self) -> MappingBuilder:
        """Discard every pending declaration without building it."""
        logger.debug(
            "Discarding %d queued declarations for %s",
            len(self._queued),
            self._builder.metadata.name,
        )
        self._queued = []
        return self

    # --- Macros ---

    def macro(self, name: str, implementation: Macro) -> None:
        """Register a new builder verb.

        Calling ``builder.<name>(*args)`` afterwards invokes
        ``implementation(builder, *args)`` and returns its result.

        Raises:
            InvalidArgumentError: If the implementation is not callable, cannot
                take the builder as first argument, or the name is taken.
        """
        validate_macro(name, implementation)
        self._macros[name] = implementation
        logger.debug("Registered macro [%s] on builder for %s", name, self._builder.metadata.name)

    def has_macro(self, name: str) -> bool:
        return name in self._macros

    def __getattr__(self, name: str) -> Any:
        macros = self.__dict__.get("_macros", {})
        if name in macros:
            return functools.partial(macros[name], self)
        raise MethodNotFoundError("Fluent builder", name)
