"""Many-to-many association."""

from __future__ import annotations

from fluent_mapping.core.enums import RelationKind
from fluent_mapping.core.naming import NamingStrategy
from fluent_mapping.metadata.model import JoinColumnMapping, JoinTableMapping
from fluent_mapping.metadata.protocol import MetadataStore
from fluent_mapping.relations.join_column import JoinColumn
from fluent_mapping.relations.relation import CollectionRelation


class ManyToMany(CollectionRelation):
    """Entities on both sides reference many of each other through a join table.

    The declaring side owns the join table unless mapped_by() is set. Unset
    names come from the naming strategy: ``User.tags -> Tag`` resolves to
    table ``user_tag`` with columns ``user_id`` and ``tag_id``.
    """

    kind = RelationKind.MANY_TO_MANY

    def __init__(
        self,
        builder: MetadataStore,
        naming_strategy: NamingStrategy,
        field: str,
        entity: type | str,
    ) -> None:
        super().__init__(builder, naming_strategy, field, entity)
        self._join_table: str | None = None
        self._join_table_schema: str | None = None
        self._join_columns: list[JoinColumn] = []
        self._inverse_join_columns: list[JoinColumn] = []

    def mapped_by(self, field: str) -> ManyToMany:
        self._mapped_by = field
        return self

    def inversed_by(self, field: str) -> ManyToMany:
        self._inversed_by = field
        return self

    def join_table(self, name: str, schema: str | None = None) -> ManyToMany:
        self._join_table = name
        self._join_table_schema = schema
        return self

    def join_column(self, name: str, referenced_column: str | None = None) -> ManyToMany:
        """Add a join table column pointing at the declaring entity."""
        self._join_columns.append(JoinColumn(name, referenced_column))
        return self

    def inverse_join_column(self, name: str, referenced_column: str | None = None) -> ManyToMany:
        """Add a join table column pointing at the target entity."""
        self._inverse_join_columns.append(JoinColumn(name, referenced_column))
        return self

    def _first(self, columns: list[JoinColumn]) -> JoinColumn:
        if not columns:
            columns.append(JoinColumn())
        return columns[0]

    def foreign_key(self, name: str) -> ManyToMany:
        self._first(self._join_columns).name = name
        return self

    def inverse_key(self, name: str) -> ManyToMany:
        self._first(self._inverse_join_columns).name = name
        return self

    def source(self, referenced_column: str) -> ManyToMany:
        """Column on the declaring entity referenced by the join table."""
        self._first(self._join_columns).referenced_column = referenced_column
        return self

    def target(self, referenced_column: str) -> ManyToMany:
        """Column on the target entity referenced by the join table."""
        self._first(self._inverse_join_columns).referenced_column = referenced_column
        return self

    def _validate(self) -> None:
        super()._validate()
        if self._mapped_by is not None and (
            self._join_table is not None or self._join_columns or self._inverse_join_columns
        ):
            raise self._invalid("the inverse side (mapped_by) cannot configure the join table")

    def _resolve_side(
        self, columns: list[JoinColumn], entity: str
    ) -> tuple[JoinColumnMapping, ...]:
        default_referenced = self._naming_strategy.referenced_column_name()
        return tuple(
            column.resolve(
                self._naming_strategy.join_key_column_name(
                    entity, column.referenced_column or default_referenced
                ),
                default_referenced,
                nullable=False,
                on_delete=self._on_delete or "CASCADE",
            )
            for column in (columns or [JoinColumn()])
        )

    def _resolve_join_table(self) -> JoinTableMapping | None:
        if self._mapped_by is not None:
            return None

        join_columns = self._resolve_side(self._join_columns, self.source_entity)
        inverse_join_columns = self._resolve_side(self._inverse_join_columns, self._entity)
        collisions = {c.name for c in join_columns} & {c.name for c in inverse_join_columns}
        if collisions:
            raise self._invalid(
                f"join table columns collide: {sorted(collisions)}; "
                "name them with foreign_key() and inverse_key()"
            )

        name = self._join_table or self._naming_strategy.join_table_name(
            self.source_entity, self._entity, self._field
        )
        return JoinTableMapping(
            name=name,
            join_columns=join_columns,
            inverse_join_columns=inverse_join_columns,
            schema=self._join_table_schema,
        )
