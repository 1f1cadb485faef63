"""Enumerations shared by the builders and the metadata store."""

from __future__ import annotations

from enum import Enum


class RelationKind(Enum):
    """Association cardinalities."""

    ONE_TO_ONE = "one_to_one"
    MANY_TO_ONE = "many_to_one"
    ONE_TO_MANY = "one_to_many"
    MANY_TO_MANY = "many_to_many"


class CascadeOperation(Enum):
    """Entity operations propagated along an association."""

    PERSIST = "persist"
    REMOVE = "remove"
    MERGE = "merge"
    DETACH = "detach"
    REFRESH = "refresh"
    ALL = "all"


class FetchMode(Enum):
    """Association loading strategies."""

    LAZY = "lazy"
    EAGER = "eager"
    EXTRA_LAZY = "extra_lazy"


class GenerationStrategy(Enum):
    """Primary key generation strategies."""

    AUTO = "auto"
    IDENTITY = "identity"
    SEQUENCE = "sequence"
    UUID = "uuid"
    CUSTOM = "custom"
    NONE = "none"


class InheritanceType(Enum):
    """Entity inheritance mapping strategies."""

    NONE = "none"
    SINGLE_TABLE = "single_table"
    JOINED = "joined"
