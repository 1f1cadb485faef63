"""Entity-wide settings: repository class, read-only flag and inheritance."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fluent_mapping.core.enums import InheritanceType
from fluent_mapping.core.exceptions import InvalidArgumentError
from fluent_mapping.metadata.builder import ClassMetadataBuilder
from fluent_mapping.metadata.model import DiscriminatorColumn, class_name_of


class Inheritance:
    """Discriminator settings of an inheritance root.

    The discriminator column defaults to ``dtype``, string(255).
    """

    def __init__(self, builder: ClassMetadataBuilder, inheritance_type: InheritanceType) -> None:
        if inheritance_type is InheritanceType.NONE:
            raise InvalidArgumentError("Inheritance needs SINGLE_TABLE or JOINED")
        self._builder = builder
        self._builder.set_inheritance_type(inheritance_type)
        self._builder.set_discriminator_column(DiscriminatorColumn())

    def column(self, name: str, type: str = "string", length: int | None = 255) -> Inheritance:
        """Set the discriminator column."""
        self._builder.set_discriminator_column(
            DiscriminatorColumn(name=name, type=self._builder.types.get(type), length=length)
        )
        return self

    def map(self, name: str | dict[str, type | str], class_name: type | str | None = None) -> Inheritance:
        """Map discriminator values to classes, one at a time or as a dict."""
        if isinstance(name, dict):
            for key, value in name.items():
                self._builder.add_discriminator_map_class(key, class_name_of(value))
            return self
        if class_name is None:
            raise InvalidArgumentError(f"Discriminator value '{name}' needs a class")
        self._builder.add_discriminator_map_class(name, class_name_of(class_name))
        return self


class Entity:
    """Configures class-level mapping concerns."""

    def __init__(self, builder: ClassMetadataBuilder) -> None:
        self._builder = builder

    def set_repository_class(self, repository_class: type | str) -> Entity:
        self._builder.set_repository_class(class_name_of(repository_class))
        return self

    def read_only(self) -> Entity:
        self._builder.set_read_only()
        return self

    def inheritance(
        self,
        inheritance_type: InheritanceType | str,
        callback: Callable[[Inheritance], Any] | None = None,
    ) -> Inheritance:
        try:
            inheritance_type = InheritanceType(inheritance_type)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown inheritance type '{inheritance_type}'"
            ) from None

        inheritance = Inheritance(self._builder, inheritance_type)
        if callback is not None:
            callback(inheritance)
        return inheritance

    def single_table_inheritance(
        self, callback: Callable[[Inheritance], Any] | None = None
    ) -> Inheritance:
        return self.inheritance(InheritanceType.SINGLE_TABLE, callback)

    def joined_table_inheritance(
        self, callback: Callable[[Inheritance], Any] | None = None
    ) -> Inheritance:
        return self.inheritance(InheritanceType.JOINED, callback)
