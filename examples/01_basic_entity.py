"""
Example 01: Basic Entity Mapping

This example declares a single entity with FluentMapping's MappingBuilder and
loads its metadata through the FluentDriver.
"""

from dataclasses import dataclass

from fluent_mapping import EntityMapping, FluentDriver, MappingBuilder


@dataclass
class Product:
    id: int
    sku: str
    name: str
    price: float
    stock: int


class ProductMapping(EntityMapping):
    def map_for(self):
        return Product

    def map(self, builder: MappingBuilder) -> None:
        builder.table("products", lambda t: t.index("name").unique("sku"))
        builder.increments("id")
        builder.string("sku", lambda f: f.length(32))
        builder.string("name").length(120)
        builder.decimal("price")
        builder.unsigned_integer("stock").set_default(0)


def main():
    driver = FluentDriver([ProductMapping()])

    print("=== Basic Entity Mapping ===\n")

    metadata = driver.load_metadata_for_class(Product)
    print(f"Class: {metadata.name}")
    print(f"Table: {metadata.table.name}")
    print(f"Identifier: {metadata.identifier} ({metadata.generator.strategy.value})")
    print(f"Indexes: {metadata.table.indexes}")
    print(f"Unique constraints: {metadata.table.unique_constraints}\n")

    print("Columns:")
    for field in metadata.fields.values():
        print(
            f"  - {field.column_name}: {field.type} length={field.length} "
            f"precision={field.precision} scale={field.scale} nullable={field.nullable}"
        )


if __name__ == "__main__":
    main()
