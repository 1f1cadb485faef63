"""One-to-one association."""

from __future__ import annotations

from fluent_mapping.core.enums import RelationKind
from fluent_mapping.relations.relation import SingleValuedRelation


class OneToOne(SingleValuedRelation):
    """One entity references exactly one other.

    The owning side gets a unique foreign key column; the inverse side names
    the owning field with mapped_by().
    """

    kind = RelationKind.ONE_TO_ONE

    def mapped_by(self, field: str) -> OneToOne:
        self._mapped_by = field
        return self

    def _unique_by_default(self) -> bool:
        return True

    def _validate(self) -> None:
        super()._validate()
        if self._mapped_by is not None and self._join_columns:
            raise self._invalid("the inverse side (mapped_by) cannot declare join columns")
