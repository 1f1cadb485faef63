"""FluentMapping exception hierarchy.

Declaration errors are raised straight from the verb call. Relation and
metadata store errors surface when a queued descriptor is built.
"""

from __future__ import annotations


class FluentMappingError(Exception):
    """Base exception for all FluentMapping errors."""


# --- Builder ---


class BuilderError(FluentMappingError):
    """Base for mapping builder errors."""


class InvalidStateError(BuilderError):
    """Raised when a verb is not allowed in the builder's current state."""

    def __init__(self, verb: str, detail: str) -> None:
        self.verb = verb
        super().__init__(f"Cannot call '{verb}': {detail}")


class InvalidArgumentError(BuilderError, ValueError):
    """Raised when a builder verb receives an argument of the wrong shape."""


class MethodNotFoundError(BuilderError, AttributeError):
    """Raised when a verb is neither built in nor registered as a macro."""

    def __init__(self, owner: str, verb: str) -> None:
        self.owner = owner
        self.verb = verb
        super().__init__(f"{owner} method [{verb}] does not exist")


# --- Relations ---


class RelationError(FluentMappingError):
    """Base for association resolution errors."""


class MissingInverseSideError(RelationError):
    """Raised when an inverse-only relation has no mapped-by reference."""

    def __init__(self, entity: str, field_name: str, target_entity: str) -> None:
        self.entity = entity
        self.field_name = field_name
        self.target_entity = target_entity
        super().__init__(
            f"Relation '{entity}::{field_name}' needs mapped_by() naming the owning "
            f"field on '{target_entity}'"
        )


class InvalidRelationConfigurationError(RelationError):
    """Raised when an association is configured with contradictory options."""

    def __init__(self, entity: str, field_name: str, detail: str) -> None:
        self.entity = entity
        self.field_name = field_name
        super().__init__(f"Invalid relation '{entity}::{field_name}': {detail}")


# --- Metadata store ---


class MetadataError(FluentMappingError):
    """Base for metadata store errors."""


class UnknownTypeError(MetadataError):
    """Raised when a logical column type token is not registered."""

    def __init__(self, type_name: str, known_types: list[str]) -> None:
        self.type_name = type_name
        self.known_types = known_types
        super().__init__(f"Unknown column type '{type_name}'. Known types: {', '.join(known_types)}")


class InvalidFieldConfigurationError(MetadataError):
    """Raised when a column's options cannot be stored together."""

    def __init__(self, field_name: str, detail: str) -> None:
        self.field_name = field_name
        super().__init__(f"Invalid configuration for field '{field_name}': {detail}")


class DuplicateMappingError(MetadataError):
    """Raised when a property is mapped twice on the same class."""

    def __init__(self, class_name: str, field_name: str) -> None:
        self.class_name = class_name
        self.field_name = field_name
        super().__init__(f"Property '{field_name}' is already mapped on '{class_name}'")


class MetadataNotFoundError(MetadataError):
    """Raised when no metadata is available for a class."""

    def __init__(self, class_name: str, message: str | None = None) -> None:
        self.class_name = class_name
        super().__init__(message or f"No metadata found for class '{class_name}'")


# --- Driver ---


class DriverError(FluentMappingError):
    """Base for mapping driver errors."""


class MappingNotFoundError(MetadataNotFoundError, DriverError):
    """Raised when the driver has no mapping registered for a class."""

    def __init__(self, class_name: str) -> None:
        super().__init__(class_name, f"No mapping registered for class '{class_name}'")
