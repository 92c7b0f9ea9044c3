"""Document stores for Shortcode Stripper."""

from pathlib import Path
from typing import Iterable, Optional

from shortcode_stripper.stores.base import DocumentStore, StoreError
from shortcode_stripper.stores.folder_store import (
    DEFAULT_EXTENSIONS,
    FolderDocumentStore,
)
from shortcode_stripper.stores.json_store import JSONDocumentStore
from shortcode_stripper.stores.memory_store import MemoryDocumentStore

__all__ = [
    "DocumentStore",
    "StoreError",
    "FolderDocumentStore",
    "JSONDocumentStore",
    "MemoryDocumentStore",
    "DEFAULT_EXTENSIONS",
    "get_store",
]


def get_store(
    path: Path,
    extensions: Optional[Iterable[str]] = None,
) -> DocumentStore:
    """Open the appropriate store for a path.

    A directory becomes a FolderDocumentStore and a .json file a
    JSONDocumentStore.
    """
    path = Path(path)
    if path.is_dir():
        return FolderDocumentStore(path, extensions=extensions)
    if path.is_file() and path.suffix.lower() == ".json":
        return JSONDocumentStore(path)
    raise StoreError(
        f"Unsupported store: {path}. "
        "Expected a folder of documents or a .json export."
    )
