"""Directory indexer for manga collections."""

from .builder import (
    DEFAULT_DESCRIPTOR_NAME,
    BuiltIndex,
    CollectionLoad,
    CollectionLoaded,
    CollectionSkipped,
    build_index,
    load_collection,
)

__all__ = [
    "DEFAULT_DESCRIPTOR_NAME",
    "BuiltIndex",
    "CollectionLoad",
    "CollectionLoaded",
    "CollectionSkipped",
    "build_index",
    "load_collection",
]
