"""JSON export document store."""

import json
import os
import shutil
import tempfile
from pathlib import Path

from shortcode_stripper.stores.base import DocumentStore, StoreError


class JSONDocumentStore(DocumentStore):
    """Store documents in a JSON file mapping id to body.

    Expected file shape::

        {"42": "[vc_row]Hello[/vc_row]", "43": "Plain text"}

    The file is loaded once. Each set_body writes the whole export to a
    temporary file beside it and swaps it in, so a failed write leaves the
    previous export intact.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.documents = self._load()

    def _load(self) -> dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Cannot read {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise StoreError(f"Invalid JSON in {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Expected a JSON object in {self.path}")

        documents: dict[str, str] = {}
        for key, value in data.items():
            if not isinstance(value, str):
                raise StoreError(f"Body of document {key} is not a string")
            documents[str(key)] = value
        return documents

    def list_document_ids(self) -> list[str]:
        return list(self.documents)

    def get_body(self, document_id: str) -> str:
        try:
            return self.documents[document_id]
        except KeyError as e:
            raise StoreError(f"Document not found: {document_id}") from e

    def set_body(self, document_id: str, body: str) -> None:
        if document_id not in self.documents:
            raise StoreError(f"Document not found: {document_id}")

        previous = self.documents[document_id]
        self.documents[document_id] = body
        try:
            self._save()
        except OSError as e:
            self.documents[document_id] = previous
            raise StoreError(f"Cannot write {self.path}: {e}") from e

    def _save(self) -> None:
        """Replace the export file with the current documents."""
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self.documents, f, ensure_ascii=False, indent=2)
            shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
