"""Naming strategies.

A naming strategy derives default table and column names for anything a
mapping does not name explicitly. Entity identifiers are dotted class names;
only the last segment takes part in naming.
"""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def short_name(class_name: str) -> str:
    """Return the unqualified part of a dotted class name."""
    return class_name.rsplit(".", 1)[-1]


@runtime_checkable
class NamingStrategy(Protocol):
    """Contract for deriving default table and column names."""

    def class_to_table_name(self, class_name: str) -> str:
        """Default table name for an entity."""
        ...

    def property_to_column_name(self, property_name: str) -> str:
        """Default column name for a mapped property."""
        ...

    def embedded_field_to_column_name(self, property_name: str, embedded_column: str) -> str:
        """Default column name for a field inlined from an embeddable."""
        ...

    def referenced_column_name(self) -> str:
        """Default identifier column that foreign keys point at."""
        ...

    def join_column_name(self, property_name: str) -> str:
        """Default foreign key column for a single-valued association."""
        ...

    def join_table_name(self, source_entity: str, target_entity: str, property_name: str) -> str:
        """Default join table name for a many-to-many association."""
        ...

    def join_key_column_name(self, entity: str, referenced_column: str | None = None) -> str:
        """Default join table column pointing at an entity."""
        ...


class DefaultNamingStrategy:
    """Keeps class and property names as written.

    Join tables and join key columns are lower-cased:
    ``User.tags -> Tag`` gives join table ``user_tag`` with columns
    ``user_id`` and ``tag_id``. The join table name depends on which side
    declares the association.
    """

    def class_to_table_name(self, class_name: str) -> str:
        return short_name(class_name)

    def property_to_column_name(self, property_name: str) -> str:
        return property_name

    def embedded_field_to_column_name(self, property_name: str, embedded_column: str) -> str:
        return f"{property_name}_{embedded_column}"

    def referenced_column_name(self) -> str:
        return "id"

    def join_column_name(self, property_name: str) -> str:
        return f"{property_name}_{self.referenced_column_name()}"

    def join_table_name(self, source_entity: str, target_entity: str, property_name: str) -> str:
        source = self.class_to_table_name(source_entity)
        target = self.class_to_table_name(target_entity)
        return f"{source}_{target}".lower()

    def join_key_column_name(self, entity: str, referenced_column: str | None = None) -> str:
        table = self.class_to_table_name(entity)
        return f"{table}_{referenced_column or self.referenced_column_name()}".lower()


def _underscore(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class UnderscoreNamingStrategy(DefaultNamingStrategy):
    """Snake-cases every derived name (``BlogPost.authorName -> blog_post.author_name``)."""

    def class_to_table_name(self, class_name: str) -> str:
        return _underscore(short_name(class_name))

    def property_to_column_name(self, property_name: str) -> str:
        return _underscore(property_name)

    def embedded_field_to_column_name(self, property_name: str, embedded_column: str) -> str:
        return f"{_underscore(property_name)}_{embedded_column}"

    def join_column_name(self, property_name: str) -> str:
        return f"{_underscore(property_name)}_{self.referenced_column_name()}"
