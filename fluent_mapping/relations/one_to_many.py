"""One-to-many association."""

from __future__ import annotations

from fluent_mapping.core.enums import RelationKind
from fluent_mapping.core.exceptions import MissingInverseSideError
from fluent_mapping.relations.relation import CollectionRelation


class OneToMany(CollectionRelation):
    """Inverse side of a many-to-one.

    mapped_by() must name the many-to-one field on the target.
    """

    kind = RelationKind.ONE_TO_MANY

    def mapped_by(self, field: str) -> OneToMany:
        self._mapped_by = field
        return self

    def _resolve_mapped_by(self) -> str:
        if self._mapped_by is None:
            raise MissingInverseSideError(self.source_entity, self._field, self._entity)
        return self._mapped_by
