"""Batch runner that strips shortcodes from every stored document."""

import logging
from typing import Callable, Iterable, Optional

from shortcode_stripper.core.models import BatchResult, DocumentOutcome
from shortcode_stripper.core.stripper import ShortcodeStripper
from shortcode_stripper.stores.base import DocumentStore, StoreError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int], None]


class BatchRunner:
    """Strip shortcodes from all documents in a store.

    Pipeline, per document:
    1. Read the current body
    2. Strip the configured shortcodes
    3. Write the new body back only if it differs

    Store errors for a single document are logged and recorded, and the
    run moves on to the next document.
    """

    def __init__(
        self,
        store: DocumentStore,
        stripper: Optional[ShortcodeStripper] = None,
        markers: Optional[Iterable[str]] = None,
    ) -> None:
        """Initialize the runner.

        Args:
            store: Document store to process
            stripper: Preconfigured stripper (takes precedence over markers)
            markers: Marker names for a new stripper (default: DEFAULT_MARKERS)
        """
        self.store = store
        self.stripper = stripper or ShortcodeStripper(markers)

    def run(
        self,
        dry_run: bool = False,
        progress: Optional[ProgressCallback] = None,
    ) -> BatchResult:
        """Process every document in the store.

        Args:
            dry_run: Compute changes without writing anything
            progress: Called with each document id and the total document
                count before that document is processed

        Returns:
            BatchResult with one outcome per document

        Raises:
            StoreError: If the store cannot list its documents
        """
        document_ids = self.store.list_document_ids()
        logger.info(
            "Stripping %d marker(s) from %d document(s)%s",
            len(self.stripper.markers),
            len(document_ids),
            " (dry run)" if dry_run else "",
        )

        result = BatchResult(dry_run=dry_run)
        for document_id in document_ids:
            if progress:
                progress(document_id, len(document_ids))
            result.add(self.process_document(document_id, dry_run=dry_run))

        logger.info(
            "Done: %d scanned, %d changed, %d written, %d failed",
            result.scanned,
            result.changed,
            result.written,
            result.failed,
        )
        return result

    def process_document(
        self, document_id: str, dry_run: bool = False
    ) -> DocumentOutcome:
        """Strip one document and persist it if its body changed."""
        outcome = DocumentOutcome(id=document_id)

        try:
            document = self.store.get_document(document_id)
        except StoreError as e:
            logger.warning("Skipping %s: %s", document_id, e)
            outcome.error = str(e)
            return outcome

        # No opening tag means stripping cannot change anything
        if not self.stripper.contains_markers(document.body):
            return outcome

        new_body = self.stripper.strip(document.body)
        if new_body == document.body:
            return outcome

        outcome.changed = True
        if dry_run:
            logger.debug("Would rewrite %s", document_id)
            return outcome

        try:
            self.store.set_body(document_id, new_body)
        except StoreError as e:
            logger.warning("Failed to write %s: %s", document_id, e)
            outcome.error = str(e)
            return outcome

        outcome.written = True
        logger.debug("Rewrote %s", document_id)
        return outcome
