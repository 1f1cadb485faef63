"""Explicit join column override."""

from __future__ import annotations

from fluent_mapping.metadata.model import JoinColumnMapping


class JoinColumn:
    """A foreign key column whose unset parts fall back to relation defaults."""

    def __init__(
        self,
        name: str | None = None,
        referenced_column: str | None = None,
        nullable: bool | None = None,
        unique: bool | None = None,
        on_delete: str | None = None,
        column_definition: str | None = None,
    ) -> None:
        self.name = name
        self.referenced_column = referenced_column
        self.nullable = nullable
        self.unique = unique
        self.on_delete = on_delete
        self.column_definition = column_definition

    def resolve(
        self,
        default_name: str,
        default_referenced_column: str,
        *,
        nullable: bool = True,
        unique: bool = False,
        on_delete: str | None = None,
    ) -> JoinColumnMapping:
        return JoinColumnMapping(
            name=self.name or default_name,
            referenced_column_name=self.referenced_column or default_referenced_column,
            nullable=nullable if self.nullable is None else self.nullable,
            unique=unique if self.unique is None else self.unique,
            on_delete=self.on_delete or on_delete,
            column_definition=self.column_definition,
        )
