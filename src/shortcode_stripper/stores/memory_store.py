"""In-memory document store."""

from typing import Optional

from shortcode_stripper.stores.base import DocumentStore, StoreError


class MemoryDocumentStore(DocumentStore):
    """Store documents in a dict keyed by id.

    Every successful set_body call is appended to ``writes`` so callers
    can see which documents were rewritten and in what order.
    """

    def __init__(self, documents: Optional[dict[str, str]] = None) -> None:
        self.documents: dict[str, str] = dict(documents or {})
        self.writes: list[str] = []

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
        self.documents[document_id] = body
        self.writes.append(document_id)
