"""Relation base classes.

A relation is declared against the owning class, configured through
chainable verbs, queued, and finalized by build(). All contradiction checks
run at finalization; declaration only rejects malformed arguments.
"""

from __future__ import annotations

from typing import Any

from fluent_mapping.core.enums import CascadeOperation, FetchMode, RelationKind
from fluent_mapping.core.exceptions import (
    InvalidArgumentError,
    InvalidRelationConfigurationError,
    MethodNotFoundError,
)
from fluent_mapping.core.naming import NamingStrategy
from fluent_mapping.metadata.model import (
    AssociationMapping,
    JoinColumnMapping,
    JoinTableMapping,
    class_name_of,
)
from fluent_mapping.metadata.protocol import MetadataStore
from fluent_mapping.relations.join_column import JoinColumn

_ORDER_DIRECTIONS = ("ASC", "DESC")


class Relation:
    """Common configuration shared by every association kind.

    Subclasses set ``kind`` and override the ``_validate`` /
    ``_resolve_*`` hooks. Custom kinds can subclass this and be passed to
    MappingBuilder.add_relation().
    """

    kind: RelationKind

    def __init__(
        self,
        builder: MetadataStore,
        naming_strategy: NamingStrategy,
        field: str,
        entity: type | str,
    ) -> None:
        self._builder = builder
        self._naming_strategy = naming_strategy
        self._field = field
        self._entity = class_name_of(entity)
        self._cascade: set[CascadeOperation] = set()
        self._fetch = FetchMode.LAZY
        self._orphan_removal = False
        self._mapped_by: str | None = None
        self._inversed_by: str | None = None
        self._nullable: bool | None = None
        self._unique: bool | None = None
        self._on_delete: str | None = None

    @property
    def field_name(self) -> str:
        return self._field

    @property
    def target_entity(self) -> str:
        return self._entity

    @property
    def source_entity(self) -> str:
        return self._builder.metadata.name

    # --- Cascade and fetch ---

    def cascade(self, operations: list[CascadeOperation | str]) -> Relation:
        """Propagate entity operations to the associated entities."""
        for operation in operations:
            try:
                self._cascade.add(CascadeOperation(operation))
            except ValueError:
                raise InvalidArgumentError(f"Unknown cascade operation '{operation}'") from None
        return self

    def cascade_all(self) -> Relation:
        return self.cascade([CascadeOperation.ALL])

    def cascade_persist(self) -> Relation:
        return self.cascade([CascadeOperation.PERSIST])

    def cascade_remove(self) -> Relation:
        return self.cascade([CascadeOperation.REMOVE])

    def fetch(self, mode: FetchMode | str) -> Relation:
        try:
            self._fetch = FetchMode(mode)
        except ValueError:
            raise InvalidArgumentError(f"Unknown fetch mode '{mode}'") from None
        return self

    def fetch_lazy(self) -> Relation:
        return self.fetch(FetchMode.LAZY)

    def fetch_eager(self) -> Relation:
        return self.fetch(FetchMode.EAGER)

    def fetch_extra_lazy(self) -> Relation:
        return self.fetch(FetchMode.EXTRA_LAZY)

    def orphan_removal(self, flag: bool = True) -> Relation:
        """Remove associated entities once they are detached from this side."""
        self._orphan_removal = flag
        return self

    # --- Foreign key defaults ---

    def nullable(self, flag: bool = True) -> Relation:
        self._nullable = flag
        return self

    def unique(self, flag: bool = True) -> Relation:
        self._unique = flag
        return self

    def on_delete(self, action: str) -> Relation:
        self._on_delete = action.upper()
        return self

    # --- Finalization ---

    def _invalid(self, detail: str) -> InvalidRelationConfigurationError:
        return InvalidRelationConfigurationError(self.source_entity, self._field, detail)

    def _validate(self) -> None:
        if self._mapped_by is not None and self._inversed_by is not None:
            raise self._invalid("mapped_by and inversed_by cannot both be set")

    def _resolve_mapped_by(self) -> str | None:
        return self._mapped_by

    def _resolve_join_columns(self) -> tuple[JoinColumnMapping, ...]:
        return ()

    def _resolve_join_table(self) -> JoinTableMapping | None:
        return None

    def _order_by(self) -> dict[str, str]:
        return {}

    def _index_by(self) -> str | None:
        return None

    def to_mapping(self) -> AssociationMapping:
        """Validate the configuration and resolve join metadata.

        Raises:
            InvalidRelationConfigurationError: On contradictory settings.
            MissingInverseSideError: If an inverse-only relation has no owner.
        """
        self._validate()
        return AssociationMapping(
            field_name=self._field,
            source_entity=self.source_entity,
            target_entity=self._entity,
            kind=self.kind,
            mapped_by=self._resolve_mapped_by(),
            inversed_by=self._inversed_by,
            join_columns=self._resolve_join_columns(),
            join_table=self._resolve_join_table(),
            cascade=frozenset(self._cascade),
            fetch=self._fetch,
            orphan_removal=self._orphan_removal,
            order_by=self._order_by(),
            index_by=self._index_by(),
        )

    def build(self) -> Relation:
        self._builder.add_association(self.to_mapping())
        return self

    def __getattr__(self, name: str) -> Any:
        raise MethodNotFoundError(type(self).__name__, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._field!r}, {self._entity!r})"


class SingleValuedRelation(Relation):
    """Base for relations whose owning side holds a foreign key column."""

    def __init__(
        self,
        builder: MetadataStore,
        naming_strategy: NamingStrategy,
        field: str,
        entity: type | str,
    ) -> None:
        super().__init__(builder, naming_strategy, field, entity)
        self._join_columns: list[JoinColumn] = []

    def _primary_join_column(self) -> JoinColumn:
        if not self._join_columns:
            self._join_columns.append(JoinColumn())
        return self._join_columns[0]

    def join_column(
        self,
        name: str | None = None,
        referenced_column: str | None = None,
        nullable: bool | None = None,
        unique: bool | None = None,
        on_delete: str | None = None,
        column_definition: str | None = None,
    ) -> SingleValuedRelation:
        """Add an explicit join column; several make a composite foreign key."""
        self._join_columns.append(
            JoinColumn(name, referenced_column, nullable, unique, on_delete, column_definition)
        )
        return self

    def foreign_key(self, name: str) -> SingleValuedRelation:
        """Name the foreign key column (defaults to ``{field}_id``)."""
        self._primary_join_column().name = name
        return self

    def target_key(self, column: str) -> SingleValuedRelation:
        """Column on the target the foreign key references."""
        self._primary_join_column().referenced_column = column
        return self

    def local_key(self, column: str) -> SingleValuedRelation:
        return self.target_key(column)

    def inversed_by(self, field: str) -> SingleValuedRelation:
        """Name the inverse side's field on the target entity."""
        self._inversed_by = field
        return self

    def _unique_by_default(self) -> bool:
        return False

    def _validate(self) -> None:
        super()._validate()
        if self._fetch is FetchMode.EXTRA_LAZY:
            raise self._invalid("extra-lazy fetching only applies to collections")

    def _resolve_join_columns(self) -> tuple[JoinColumnMapping, ...]:
        if self._resolve_mapped_by() is not None:
            return ()

        join_columns = self._join_columns or [JoinColumn()]
        default_referenced = self._naming_strategy.referenced_column_name()
        return tuple(
            column.resolve(
                self._naming_strategy.join_column_name(self._field),
                default_referenced,
                nullable=True if self._nullable is None else self._nullable,
                unique=self._unique_by_default() if self._unique is None else self._unique,
                on_delete=self._on_delete,
            )
            for column in join_columns
        )


class CollectionRelation(Relation):
    """Base for collection-valued relations."""

    def __init__(
        self,
        builder: MetadataStore,
        naming_strategy: NamingStrategy,
        field: str,
        entity: type | str,
    ) -> None:
        super().__init__(builder, naming_strategy, field, entity)
        self._order: dict[str, str] = {}
        self._index: str | None = None

    def order_by(self, field: str, direction: str = "ASC") -> CollectionRelation:
        """Sort the collection by a target field; may be called repeatedly."""
        direction = direction.upper()
        if direction not in _ORDER_DIRECTIONS:
            raise InvalidArgumentError(f"Order direction must be ASC or DESC, got '{direction}'")
        self._order[field] = direction
        return self

    def index_by(self, field: str) -> CollectionRelation:
        """Key the collection by a target field."""
        self._index = field
        return self

    def _order_by(self) -> dict[str, str]:
        return dict(self._order)

    def _index_by(self) -> str | None:
        return self._index
