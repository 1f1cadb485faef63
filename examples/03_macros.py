"""
Example 03: Macros

This example extends the builder with custom verbs, once per builder and
once for every builder a driver creates.
"""

from dataclasses import dataclass
from datetime import datetime

from fluent_mapping import (
    EntityMapping,
    FluentDriver,
    MappingBuilder,
    MethodNotFoundError,
)


@dataclass
class Invoice:
    id: int
    number: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None


def timestamps(builder: MappingBuilder) -> None:
    builder.date_time("created_at")
    builder.date_time("updated_at")


def soft_deletes(builder: MappingBuilder, column: str = "deleted_at"):
    return builder.date_time(column).nullable()


class InvoiceMapping(EntityMapping):
    def map_for(self):
        return Invoice

    def map(self, builder: MappingBuilder) -> None:
        builder.increments("id")
        builder.string("number", lambda f: f.length(20).unique())
        builder.timestamps()
        builder.soft_deletes()


def main():
    print("=== Macros ===\n")

    driver = FluentDriver([InvoiceMapping()])
    try:
        driver.load_metadata_for_class(Invoice)
    except MethodNotFoundError as exc:
        print(f"Without macros: {exc}\n")

    driver.macro("timestamps", timestamps)
    driver.macro("soft_deletes", soft_deletes)
    metadata = driver.load_metadata_for_class(Invoice)

    print(f"With macros, {metadata.table.name} has columns:")
    for field in metadata.fields.values():
        print(f"  - {field.column_name} ({field.type}, nullable={field.nullable})")


if __name__ == "__main__":
    main()
