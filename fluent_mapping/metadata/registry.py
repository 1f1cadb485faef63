"""Metadata registry - holds finalized ClassMetadata by class name.

A loader can be attached so that a lookup miss builds the metadata on
demand (the driver uses this to resolve embeddables).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from fluent_mapping.core.exceptions import MetadataNotFoundError
from fluent_mapping.metadata.model import ClassMetadata


class MetadataRegistry:
    """Stores ClassMetadata keyed by dotted class name.

    Args:
        loader: Called with a class name on a lookup miss. Must return the
                loaded metadata; it is added to the registry.
    """

    def __init__(self, loader: Callable[[str], ClassMetadata] | None = None) -> None:
        self._metadata: dict[str, ClassMetadata] = {}
        self._loader = loader

    def set_loader(self, loader: Callable[[str], ClassMetadata] | None) -> None:
        self._loader = loader

    def add(self, metadata: ClassMetadata) -> None:
        self._metadata[metadata.name] = metadata

    def get(self, class_name: str) -> ClassMetadata:
        """Look up metadata, loading it on a miss when a loader is set.

        Raises:
            MetadataNotFoundError: If nothing is registered and no loader is set.
        """
        if class_name in self._metadata:
            return self._metadata[class_name]
        if self._loader is None:
            raise MetadataNotFoundError(class_name)

        metadata = self._loader(class_name)
        self._metadata[class_name] = metadata
        return metadata

    def find(self, class_name: str) -> ClassMetadata | None:
        """Look up already-registered metadata without loading."""
        return self._metadata.get(class_name)

    def has(self, class_name: str) -> bool:
        return class_name in self._metadata

    @property
    def class_names(self) -> list[str]:
        """All registered class names, sorted alphabetically."""
        return sorted(self._metadata)

    def __iter__(self) -> Iterator[ClassMetadata]:
        return iter(self._metadata.values())

    def __len__(self) -> int:
        return len(self._metadata)
