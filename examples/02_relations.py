"""
Example 02: Relations and Embeddables

This example maps a small blog domain: a many-to-one author, its inverse
one-to-many, a many-to-many tag list with a generated join table, and an
embedded value object loaded on demand.
"""

from dataclasses import dataclass, field

from fluent_mapping import (
    EmbeddableMapping,
    EntityMapping,
    FluentDriver,
    MappingBuilder,
    MappingConfig,
)


@dataclass
class Address:
    street: str
    city: str


@dataclass
class Author:
    id: int
    name: str
    address: Address


@dataclass
class Tag:
    id: int
    label: str


@dataclass
class Article:
    id: int
    title: str
    author: Author
    tags: list = field(default_factory=list)


class AddressMapping(EmbeddableMapping):
    def map_for(self):
        return Address

    def map(self, builder: MappingBuilder) -> None:
        builder.string("street")
        builder.string("city")


class AuthorMapping(EntityMapping):
    def map_for(self):
        return Author

    def map(self, builder: MappingBuilder) -> None:
        builder.increments("id")
        builder.string("name")
        builder.embed("address", Address).prefix("addr_")
        builder.has_many("articles", Article).mapped_by("author").order_by("title")


class TagMapping(EntityMapping):
    def map_for(self):
        return Tag

    def map(self, builder: MappingBuilder) -> None:
        builder.increments("id")
        builder.string("label").unique()


class ArticleMapping(EntityMapping):
    def map_for(self):
        return Article

    def map(self, builder: MappingBuilder) -> None:
        builder.increments("id")
        builder.string("title")
        builder.belongs_to("author", Author).nullable(False).inversed_by("articles")
        builder.belongs_to_many("tags", Tag, lambda r: r.cascade_persist().fetch_extra_lazy())


def main():
    config = MappingConfig(naming_strategy="underscore")
    driver = FluentDriver(
        [AddressMapping(), AuthorMapping(), TagMapping(), ArticleMapping()], config=config
    )

    print("=== Relations and Embeddables ===\n")

    for metadata in driver.load_all():
        kind = "embeddable" if metadata.is_embedded_class else f"table {metadata.table.name}"
        print(f"{metadata.name} ({kind})")
        for mapping in metadata.fields.values():
            print(f"  column {mapping.column_name}: {mapping.type}")
        for association in metadata.associations.values():
            print(f"  {association.kind.value} {association.field_name} -> {association.target_entity}")
            for join_column in association.join_columns:
                print(f"    join column {join_column.name} -> {join_column.referenced_column_name}")
            if association.join_table is not None:
                join_table = association.join_table
                columns = [c.name for c in join_table.join_columns + join_table.inverse_join_columns]
                print(f"    join table {join_table.name} {columns}")
        print()


if __name__ == "__main__":
    main()
