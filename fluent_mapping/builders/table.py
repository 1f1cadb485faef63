"""Table descriptor - physical table settings, applied immediately."""

from __future__ import annotations

from typing import Any

from fluent_mapping.metadata.builder import ClassMetadataBuilder


class Table:
    """Configures the table an entity maps to."""

    def __init__(self, builder: ClassMetadataBuilder) -> None:
        self._builder = builder

    def get_name(self) -> str | None:
        return self._builder.metadata.table.name

    def name(self, name: str) -> Table:
        self._builder.set_table_name(name)
        return self

    def set_name(self, name: str) -> Table:
        return self.name(name)

    def schema(self, schema: str) -> Table:
        self._builder.set_table_schema(schema)
        return self

    def charset(self, charset: str) -> Table:
        self._builder.add_table_option("charset", charset)
        return self

    def collate(self, collation: str) -> Table:
        self._builder.add_table_option("collate", collation)
        return self

    def options(self, options: dict[str, Any]) -> Table:
        for key, value in options.items():
            self._builder.add_table_option(key, value)
        return self

    def index(self, columns: str | list[str], name: str | None = None) -> Table:
        """Add an index. The name defaults to ``idx_{columns}``."""
        columns = [columns] if isinstance(columns, str) else list(columns)
        self._builder.add_index(columns, name or "idx_" + "_".join(columns))
        return self

    def unique(self, columns: str | list[str], name: str | None = None) -> Table:
        """Add a unique constraint. The name defaults to ``uniq_{columns}``."""
        columns = [columns] if isinstance(columns, str) else list(columns)
        self._builder.add_unique_constraint(columns, name or "uniq_" + "_".join(columns))
        return self
