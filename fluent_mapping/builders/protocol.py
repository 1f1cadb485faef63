"""Buildable protocol.

Everything the mapping builder queues implements this interface. The
committer drains the queue by calling build() on each item in order.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Buildable(Protocol):
    """A pending declaration that can finalize itself against the metadata store."""

    def build(self) -> Any:
        """Apply the declaration to the metadata store."""
        ...
