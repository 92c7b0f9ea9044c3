"""Abstract base class for document stores."""

from abc import ABC, abstractmethod

from shortcode_stripper.core.models import Document


class StoreError(Exception):
    """Error reading from or writing to a document store."""

    pass


class DocumentStore(ABC):
    """Abstract base class for document stores.

    A store exposes every document as an opaque id plus a text body.
    Implementations raise StoreError for backend failures so the batch
    runner can skip a single document without aborting the run.
    """

    @abstractmethod
    def list_document_ids(self) -> list[str]:
        """Return ids of all documents, regardless of type or status."""
        ...

    @abstractmethod
    def get_body(self, document_id: str) -> str:
        """Read the current body of a document.

        Args:
            document_id: Id returned by list_document_ids

        Returns:
            The document's text body

        Raises:
            StoreError: If the document cannot be read
        """
        ...

    @abstractmethod
    def set_body(self, document_id: str, body: str) -> None:
        """Overwrite the body of a document.

        Args:
            document_id: Id returned by list_document_ids
            body: New text body

        Raises:
            StoreError: If the document cannot be written
        """
        ...

    def get_document(self, document_id: str) -> Document:
        """Read a document as a Document record."""
        return Document(id=document_id, body=self.get_body(document_id))
