"""Relation descriptors - the four association kinds and their shared base."""

from __future__ import annotations

from fluent_mapping.relations.join_column import JoinColumn
from fluent_mapping.relations.many_to_many import ManyToMany
from fluent_mapping.relations.many_to_one import ManyToOne
from fluent_mapping.relations.one_to_many import OneToMany
from fluent_mapping.relations.one_to_one import OneToOne
from fluent_mapping.relations.relation import (
    CollectionRelation,
    Relation,
    SingleValuedRelation,
)

__all__ = [
    "Relation",
    "SingleValuedRelation",
    "CollectionRelation",
    "OneToOne",
    "ManyToOne",
    "OneToMany",
    "ManyToMany",
    "JoinColumn",
]
