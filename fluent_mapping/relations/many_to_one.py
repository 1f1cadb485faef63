"""Many-to-one association."""

from __future__ import annotations

from fluent_mapping.core.enums import RelationKind
from fluent_mapping.relations.relation import SingleValuedRelation


class ManyToOne(SingleValuedRelation):
    """Many entities reference one target. Always the owning side."""

    kind = RelationKind.MANY_TO_ONE

    def _validate(self) -> None:
        super()._validate()
        if self._orphan_removal:
            raise self._invalid("orphan removal is not supported on many-to-one")
