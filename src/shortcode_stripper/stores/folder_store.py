"""Folder-of-files document store."""

from pathlib import Path
from typing import Iterable, Optional

from shortcode_stripper.stores.base import DocumentStore, StoreError

DEFAULT_EXTENSIONS: tuple[str, ...] = (".txt", ".html", ".htm", ".md")


class FolderDocumentStore(DocumentStore):
    """Treat every text file in a folder as a document.

    Document ids are POSIX paths relative to the root folder, so the same
    export produces the same ids on every platform. Files are read and
    written as UTF-8 with line endings left untouched.
    """

    def __init__(
        self,
        root: Path,
        extensions: Optional[Iterable[str]] = None,
        recursive: bool = True,
    ) -> None:
        """Initialize the store.

        Args:
            root: Folder holding the documents
            extensions: File extensions to include (default: DEFAULT_EXTENSIONS)
            recursive: Whether to include files in subfolders

        Raises:
            StoreError: If root is not a directory
        """
        self.root = Path(root)
        if not self.root.is_dir():
            raise StoreError(f"Not a directory: {self.root}")
        self.extensions = tuple(
            ext.lower() for ext in (extensions or DEFAULT_EXTENSIONS)
        )
        self.recursive = recursive

    def list_document_ids(self) -> list[str]:
        pattern = "**/*" if self.recursive else "*"
        try:
            files = [
                p for p in self.root.glob(pattern)
                if p.is_file() and p.suffix.lower() in self.extensions
            ]
        except OSError as e:
            raise StoreError(f"Cannot list {self.root}: {e}") from e

        return sorted(p.relative_to(self.root).as_posix() for p in files)

    def _resolve(self, document_id: str) -> Path:
        """Map an id back to a file path inside the root folder."""
        path = (self.root / document_id).resolve()
        if not path.is_relative_to(self.root.resolve()):
            raise StoreError(f"Document id escapes store root: {document_id}")
        return path

    def get_body(self, document_id: str) -> str:
        path = self._resolve(document_id)
        try:
            with path.open(encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Cannot read {document_id}: {e}") from e

    def set_body(self, document_id: str, body: str) -> None:
        path = self._resolve(document_id)
        if not path.is_file():
            raise StoreError(f"Document not found: {document_id}")
        try:
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(body)
        except OSError as e:
            raise StoreError(f"Cannot write {document_id}: {e}") from e
