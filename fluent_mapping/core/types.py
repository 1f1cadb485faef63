"""Column type registry.

Resolves logical type tokens ("string", "datetimetz", ...) to the canonical
type names stored on field mappings. Custom tokens can be registered at
startup; unknown tokens are never accepted silently.
"""

from __future__ import annotations

from enum import Enum

from fluent_mapping.core.exceptions import InvalidArgumentError, UnknownTypeError


class ColumnType(str, Enum):
    """Built-in logical column types."""

    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    SMALLINT = "smallint"
    BIGINT = "bigint"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    JSON = "json"
    JSON_ARRAY = "json_array"
    GUID = "guid"
    DATE = "date"
    DATETIME = "datetime"
    DATETIMETZ = "datetimetz"
    TIME = "time"
    BINARY = "binary"
    BLOB = "blob"


class TypeRegistry:
    """Registry of column type names known to the metadata store.

    Args:
        custom_types: Extra type names to accept besides the built-ins.
    """

    def __init__(self, custom_types: list[str] | None = None) -> None:
        self._types: set[str] = {member.value for member in ColumnType}
        for name in custom_types or []:
            self.register(name)

    def register(self, type_name: str) -> None:
        """Accept a custom type name."""
        if not type_name:
            raise InvalidArgumentError("Type name must be a non-empty string")
        self._types.add(type_name.lower())

    def get(self, type_name: str | ColumnType) -> str:
        """Resolve a type token to its canonical name.

        Raises:
            UnknownTypeError: If the token is not registered.
        """
        key = type_name.value if isinstance(type_name, ColumnType) else str(type_name).lower()
        if key not in self._types:
            raise UnknownTypeError(str(type_name), self.type_names)
        return key

    def has(self, type_name: str | ColumnType) -> bool:
        """Check if a type token is registered."""
        key = type_name.value if isinstance(type_name, ColumnType) else str(type_name).lower()
        return key in self._types

    @property
    def type_names(self) -> list[str]:
        """All registered type names, sorted alphabetically."""
        return sorted(self._types)

    def __len__(self) -> int:
        return len(self._types)
