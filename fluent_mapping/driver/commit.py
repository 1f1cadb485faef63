"""Queue commit - finalizes a builder's pending declarations in order."""

from __future__ import annotations

import logging

from fluent_mapping.builders.builder import MappingBuilder

logger = logging.getLogger(__name__)


def commit(builder: MappingBuilder) -> int:
    """Build every queued declaration in declaration order.

    Errors propagate unchanged; declarations queued before the failing one
    stay applied to the metadata store.

    Returns:
        The number of declarations built.
    """
    queued = builder.get_queued()
    name = builder.metadata_builder.metadata.name
    for index in range(len(queued)):
        logger.debug("Building %d/%d for %s: %r", index + 1, len(queued), name, queued[index])
        queued[index].build()
    return len(queued)
