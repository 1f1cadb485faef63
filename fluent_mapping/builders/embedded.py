"""Embedded descriptor - a property holding an embeddable value object."""

from __future__ import annotations

from fluent_mapping.metadata.model import EmbeddedMapping, class_name_of
from fluent_mapping.metadata.protocol import MetadataStore


class Embedded:
    """A pending embeddable declaration.

    Columns of the embeddable are prefixed with ``{field}_`` unless a
    prefix is set or prefixing is switched off.
    """

    def __init__(self, builder: MetadataStore, field: str, embeddable: type | str) -> None:
        self._builder = builder
        self._field = field
        self._embeddable = class_name_of(embeddable)
        self._column_prefix: str | bool | None = None

    @property
    def field_name(self) -> str:
        return self._field

    @property
    def embeddable(self) -> str:
        return self._embeddable

    def prefix(self, column_prefix: str) -> Embedded:
        self._column_prefix = column_prefix
        return self

    def no_prefix(self) -> Embedded:
        self._column_prefix = False
        return self

    def to_mapping(self) -> EmbeddedMapping:
        return EmbeddedMapping(
            field_name=self._field,
            class_name=self._embeddable,
            column_prefix=self._column_prefix,
        )

    def build(self) -> Embedded:
        self._builder.add_embedded(self.to_mapping())
        return self

    def __repr__(self) -> str:
        return f"Embedded({self._field!r}, {self._embeddable!r})"
